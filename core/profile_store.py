"""
Profile Store：記住玩家上次使用的名稱與頭像設定

對應加入房間頁面的本地保存：
- userName：顯示名稱（"Guest Player" 視為未設定）
- characterCustomization：頭像設定 JSON
"""
import json
import logging
from typing import Optional

from pydantic import ValidationError

from schemas import CharacterCustomizationIn
from storage.local_store import LocalStore

logger = logging.getLogger(__name__)

USER_NAME_KEY = "userName"
CUSTOMIZATION_KEY = "characterCustomization"
GUEST_PLAYER_NAME = "Guest Player"


class ProfileStore:
    def __init__(self, store: LocalStore):
        self.store = store

    def get_display_name(self) -> Optional[str]:
        name = self.store.get_item(USER_NAME_KEY)
        if not name or name == GUEST_PLAYER_NAME:
            return None
        return name

    def set_display_name(self, name: str) -> None:
        self.store.set_item(USER_NAME_KEY, name.strip())

    def get_customization(self) -> Optional[CharacterCustomizationIn]:
        """
        取得保存的頭像設定

        返回：
            頭像設定；沒有存過或內容無法解析時回傳 None
        """
        raw = self.store.get_item(CUSTOMIZATION_KEY)
        if raw is None:
            return None

        try:
            return CharacterCustomizationIn.model_validate_json(raw)
        except ValidationError as e:
            logger.error(f"Failed to parse character customization: {e}")
            return None

    def set_customization(self, customization: CharacterCustomizationIn) -> None:
        self.store.set_item(CUSTOMIZATION_KEY, json.dumps(customization.model_dump()))
