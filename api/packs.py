"""
Pack API Endpoints

職責：
1. 列出 / 取得 Pack
2. 建立與編輯 Pack（驗證失敗回 400，訊息為第一個失敗的規則）
3. 刪除 Pack
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
import logging

from schemas import Pack, PackDraft, PackSummary
from core.pack_manager import PackManager
from core.exceptions import PackNotFound, PackValidationError
from api.dependencies import get_pack_manager

router = APIRouter(prefix="/api/packs", tags=["packs"])
logger = logging.getLogger(__name__)


@router.get("", response_model=List[PackSummary])
def list_packs(manager: PackManager = Depends(get_pack_manager)):
    """
    列出所有 Pack（保留建立順序）

    返回：
        - id, name, description, isPublic, timeLimit, questionCount
    """
    try:
        return [PackSummary.from_pack(p) for p in manager.list_packs()]
    except Exception as e:
        logger.error(f"Failed to list packs: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/{pack_id}", response_model=Pack)
def get_pack(pack_id: str, manager: PackManager = Depends(get_pack_manager)):
    try:
        return manager.get_pack(pack_id)
    except PackNotFound:
        raise HTTPException(status_code=404, detail="Pack not found")
    except Exception as e:
        logger.error(f"Failed to get pack {pack_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("", response_model=Pack, status_code=status.HTTP_201_CREATED)
def create_pack(draft: PackDraft, manager: PackManager = Depends(get_pack_manager)):
    """
    建立 Pack

    流程：
    1. 驗證草稿（失敗 -> 400，不寫入）
    2. 產生新 ID、夾取秒數
    3. 附加到集合並寫回
    """
    try:
        return manager.save_pack(draft)

    except PackValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except Exception as e:
        logger.error(f"Failed to create pack: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error")


@router.put("/{pack_id}", response_model=Pack)
def update_pack(pack_id: str, draft: PackDraft, manager: PackManager = Depends(get_pack_manager)):
    """
    編輯 Pack：沿用原本的 ID，在集合中原位置取代
    """
    try:
        return manager.save_pack(draft, existing_id=pack_id)

    except PackNotFound:
        raise HTTPException(status_code=404, detail="Pack not found")
    except PackValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except Exception as e:
        logger.error(f"Failed to update pack {pack_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error")


@router.delete("/{pack_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_pack(pack_id: str, manager: PackManager = Depends(get_pack_manager)):
    try:
        deleted = manager.delete_pack(pack_id)
    except Exception as e:
        logger.error(f"Failed to delete pack {pack_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error")

    if not deleted:
        raise HTTPException(status_code=404, detail="Pack not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
