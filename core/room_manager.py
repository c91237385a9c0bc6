"""
Room Manager：管理 Room 與 Player 的建立、查詢

職責：
1. 建立 Room（產生唯一代碼）
2. 以代碼 / ID 查詢 active 的 Room
3. 玩家加入房間（含頭像設定）
4. 關閉 Room

原則：
- 只做存在性檢查與寫入，唯一性交給資料庫
- 所有寫入經過 @transactional
"""
from sqlalchemy.orm import Session
from typing import Optional
import logging

from models import Room, Player, CharacterCustomization
from schemas import CharacterCustomizationIn
from core.locks import with_room_lock
from core.exceptions import RoomNotFound
from services.naming_service import generate_room_code, normalize_room_code
from services.customization_service import describe_customization
from database import transactional

logger = logging.getLogger(__name__)


class RoomManager:
    """Room 生命週期管理器"""

    @staticmethod
    @transactional
    def create_room(db: Session, name: str) -> Room:
        """
        建立新房間

        流程：
        1. 生成唯一的房間代碼
        2. 建立 Room（is_active=True）

        參數：
            db: SQLAlchemy Session
            name: 房間名稱

        返回：
            Room
        """
        code = generate_room_code()
        while db.query(Room).filter(Room.code == code).first():
            logger.warning(f"Room code collision detected on {code}, regenerating")
            code = generate_room_code()

        room = Room(code=code, name=name.strip(), is_active=True)
        db.add(room)
        db.flush()

        logger.info(f"Created room {room.id} with code {code}")
        return room

    @staticmethod
    def lookup_active_room(db: Session, code: str) -> Room:
        """
        透過房間代碼取得 active 的 Room（不分大小寫）

        參數：
            db: SQLAlchemy Session
            code: 房間代碼（會轉成大寫）

        返回：
            Room object

        異常：
            RoomNotFound: 代碼不存在或房間已關閉
        """
        normalized = normalize_room_code(code)
        room = db.query(Room).filter(
            Room.code == normalized,
            Room.is_active == True
        ).first()
        if not room:
            raise RoomNotFound(f"with code {normalized}")
        return room

    @staticmethod
    def get_active_room(db: Session, room_id: str, lock: bool = False) -> Room:
        """
        透過 ID 取得 active 的 Room

        參數：
            db: SQLAlchemy Session
            room_id: Room ID
            lock: True 時以行級鎖讀取（寫入前使用，需在 transaction 內）

        異常：
            RoomNotFound: Room 不存在或已關閉
        """
        query = with_room_lock(room_id, db) if lock else db.query(Room).filter(Room.id == room_id)
        room = query.first()
        if not room or not room.is_active:
            raise RoomNotFound(room_id)
        return room

    @staticmethod
    @transactional
    def create_player(
        db: Session,
        room_id: str,
        name: str,
        customization: Optional[CharacterCustomizationIn] = None
    ) -> Player:
        """
        玩家加入房間

        前置條件：
        - 房間必須存在且 is_active

        流程：
        1. 鎖定 Room 並確認狀態
        2. 建立 Player（score=0, is_active=True）
        3. 有頭像設定時一併建立 CharacterCustomization

        參數：
            db: SQLAlchemy Session
            room_id: Room ID
            name: 玩家名稱
            customization: 頭像設定（可選）

        返回：
            Player（已載入 customization）

        異常：
            RoomNotFound: Room 不存在或已關閉
        """
        room = RoomManager.get_active_room(db, room_id, lock=True)

        player = Player(
            room_id=room.id,
            name=name,
            score=0,
            is_active=True
        )
        if customization is not None:
            player.customization = CharacterCustomization(
                color=customization.color,
                glasses=customization.glasses,
                smile=customization.smile
            )
        db.add(player)
        db.flush()

        if customization is not None:
            logger.info(
                f"Player {player.id} ({name}) joined room {room.id} with avatar "
                f"{describe_customization(customization.color, customization.glasses, customization.smile)}"
            )
        else:
            logger.info(f"Player {player.id} ({name}) joined room {room.id}")

        return player

    @staticmethod
    @transactional
    def close_room(db: Session, room_id: str) -> Room:
        """
        關閉房間：之後不再接受加入，也查不到

        異常：
            RoomNotFound: Room 不存在
        """
        room = with_room_lock(room_id, db).first()
        if not room:
            raise RoomNotFound(room_id)

        room.is_active = False
        logger.info(f"Closed room {room_id} ({room.code})")
        return room

