"""
Pack Manager：擁有 Pack 集合並負責持久化

職責：
1. 從 LocalStore 載入 Pack 集合（key: quizPacks）
2. 儲存 Pack：驗證 -> 提交 -> upsert -> 整份集合寫回
3. 刪除 Pack：remove -> 整份集合寫回

規則：
- 驗證失敗時不寫入任何東西
- 每次變更都把整個集合序列化寫回
- 寫入失敗不攔截，直接往上拋
"""
import json
import logging
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from schemas import Pack, PackDraft
from services.pack_service import commit_pack, upsert_pack, remove_pack
from storage.local_store import LocalStore
from core.exceptions import PackNotFound

logger = logging.getLogger(__name__)

PACKS_KEY = "quizPacks"

_pack_list_adapter = TypeAdapter(List[Pack])


class PackManager:
    """Pack 集合的擁有者（單一 session 內唯一的寫入者）"""

    def __init__(self, store: LocalStore):
        self.store = store

    def load_packs(self) -> List[Pack]:
        """
        載入 Pack 集合

        - 沒有存過：回傳空集合
        - 內容損壞：記錄錯誤後回傳空集合
        """
        raw = self.store.get_item(PACKS_KEY)
        if raw is None:
            return []

        try:
            return _pack_list_adapter.validate_json(raw)
        except (ValidationError, TypeError) as e:
            logger.error(f"Failed to load saved packs: {e}")
            return []

    def save_packs(self, packs: List[Pack]) -> None:
        """把整個集合序列化寫回 LocalStore"""
        payload = [p.model_dump(mode="json", by_alias=True) for p in packs]
        self.store.set_item(PACKS_KEY, json.dumps(payload, ensure_ascii=False))

    def list_packs(self) -> List[Pack]:
        return self.load_packs()

    def get_pack(self, pack_id: str) -> Pack:
        """
        異常：
            PackNotFound: 集合中沒有這個 ID
        """
        for pack in self.load_packs():
            if pack.id == pack_id:
                return pack
        raise PackNotFound(pack_id)

    def save_pack(self, draft: PackDraft, existing_id: Optional[str] = None) -> Pack:
        """
        提交草稿並寫入集合

        參數：
            draft: Pack 草稿
            existing_id: 編輯既有 Pack 時傳入其 ID；None 表示建立新 Pack

        返回：
            提交後的 Pack

        異常：
            PackValidationError: 草稿沒有通過驗證（不會寫入）
            PackNotFound: existing_id 不在集合中
        """
        with self.store.lock:
            packs = self.load_packs()
            if existing_id is not None and not any(p.id == existing_id for p in packs):
                raise PackNotFound(existing_id)

            pack = commit_pack(draft, existing_id)
            packs = upsert_pack(packs, pack)
            self.save_packs(packs)

        if existing_id is not None:
            logger.info(f"Updated pack {pack.id} ({pack.name})")
        else:
            logger.info(f"Created pack {pack.id} ({pack.name}) with {len(pack.questions)} questions")
        return pack

    def delete_pack(self, pack_id: str) -> bool:
        """
        刪除 Pack

        返回：
            True 如果有刪除，False 如果集合中本來就沒有（不寫入）
        """
        with self.store.lock:
            packs = self.load_packs()
            remaining = remove_pack(packs, pack_id)
            if len(remaining) == len(packs):
                return False
            self.save_packs(remaining)

        logger.info(f"Deleted pack {pack_id}")
        return True
