"""
Room API Endpoints

職責：
1. 驗證房間代碼（加入前的存在性檢查）
2. 玩家加入房間
3. 建立 / 關閉房間（Host endpoint）

錯誤回應：
- 400：必要欄位缺少
- 404：房間不存在或已關閉
- 500：未預期錯誤（只記 log，不外洩細節）
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
import logging

from database import get_db
from schemas import (
    RoomCreate,
    RoomResponse,
    RoomSummary,
    JoinRoomRequest,
    JoinRoomResponse,
    PlayerOut,
)
from core.room_manager import RoomManager
from core.exceptions import RoomNotFound

router = APIRouter(prefix="/api/rooms", tags=["rooms"])
logger = logging.getLogger(__name__)

ROOM_NOT_FOUND = "Room not found or has expired"
INTERNAL_ERROR = "Internal server error"


@router.get("/validate", response_model=RoomResponse)
def validate_room(code: Optional[str] = Query(None), db: Session = Depends(get_db)):
    """
    驗證房間代碼

    參數：
        code: 房間代碼（query parameter，不分大小寫）

    返回：
        - room: {id, code, name, isActive, createdAt}
    """
    if not code or not code.strip():
        raise HTTPException(status_code=400, detail="Room code is required")

    try:
        room = RoomManager.lookup_active_room(db, code)
        return RoomResponse(room=RoomSummary.model_validate(room))

    except RoomNotFound:
        raise HTTPException(status_code=404, detail=ROOM_NOT_FOUND)
    except Exception as e:
        logger.error(f"Error validating room: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)


@router.post("/join", response_model=JoinRoomResponse)
def join_room(join_data: JoinRoomRequest, db: Session = Depends(get_db)):
    """
    加入房間（玩家 endpoint）

    前置條件：
    - roomId 與 playerName 都必須提供
    - 房間必須存在且 active

    流程：
    1. 檢查必要欄位
    2. 建立 Player（含頭像設定）
    3. 返回玩家資訊
    """
    player_name = (join_data.player_name or "").strip()
    if not join_data.room_id or not player_name:
        raise HTTPException(status_code=400, detail="Room ID and player name are required")

    try:
        player = RoomManager.create_player(
            db,
            join_data.room_id,
            player_name,
            join_data.character_customization
        )
        return JoinRoomResponse(player=PlayerOut.model_validate(player))

    except RoomNotFound:
        raise HTTPException(status_code=404, detail=ROOM_NOT_FOUND)
    except Exception as e:
        logger.error(f"Error joining room: {e}", exc_info=True)
        db.rollback()
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)


@router.post("", response_model=RoomResponse, status_code=status.HTTP_201_CREATED)
def create_room(room_data: RoomCreate, db: Session = Depends(get_db)):
    """
    建立房間（Host endpoint）

    返回：
        - room: 新房間摘要（含 6 位代碼）
    """
    if not room_data.name.strip():
        raise HTTPException(status_code=400, detail="Room name is required")

    try:
        room = RoomManager.create_room(db, room_data.name)
        return RoomResponse(room=RoomSummary.model_validate(room))

    except Exception as e:
        logger.error(f"Failed to create room: {e}", exc_info=True)
        db.rollback()
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)


@router.post("/{room_id}/close", response_model=RoomResponse)
def close_room(room_id: str, db: Session = Depends(get_db)):
    """
    關閉房間（Host endpoint）

    效果：
    - is_active -> False
    - 之後 validate / join 都會回 404
    """
    try:
        room = RoomManager.close_room(db, room_id)
        return RoomResponse(room=RoomSummary.model_validate(room))

    except RoomNotFound:
        raise HTTPException(status_code=404, detail="Room not found")
    except Exception as e:
        logger.error(f"Failed to close room: {e}", exc_info=True)
        db.rollback()
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)
