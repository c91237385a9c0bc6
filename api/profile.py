"""
Profile API Endpoints

玩家上次使用的顯示名稱與頭像設定，加入房間頁面用來預先填入表單
"""
from fastapi import APIRouter, Depends, HTTPException
import logging

from schemas import CharacterCustomizationIn, ProfileOut, ProfileUpdate
from core.profile_store import ProfileStore
from services.customization_service import default_customization
from api.dependencies import get_profile_store

router = APIRouter(prefix="/api/profile", tags=["profile"])
logger = logging.getLogger(__name__)


def _current_profile(profiles: ProfileStore) -> ProfileOut:
    customization = profiles.get_customization()
    if customization is None:
        customization = CharacterCustomizationIn(**default_customization())
    return ProfileOut(
        display_name=profiles.get_display_name(),
        character_customization=customization
    )


@router.get("", response_model=ProfileOut)
def get_profile(profiles: ProfileStore = Depends(get_profile_store)):
    """
    取得玩家設定

    返回：
        - displayName: 上次使用的名稱（沒有則為 null）
        - characterCustomization: 上次的頭像（沒有則為預設頭像）
    """
    return _current_profile(profiles)


@router.put("", response_model=ProfileOut)
def update_profile(update: ProfileUpdate, profiles: ProfileStore = Depends(get_profile_store)):
    """只更新有提供的欄位"""
    try:
        if update.display_name is not None:
            if not update.display_name.strip():
                raise HTTPException(status_code=400, detail="Display name cannot be blank")
            profiles.set_display_name(update.display_name)
        if update.character_customization is not None:
            profiles.set_customization(update.character_customization)

        return _current_profile(profiles)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to update profile: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error")
