"""
並發控制工具

提供 Database-level 的鎖定機制，防止玩家加入與關閉房間同時發生

主要使用 SELECT ... FOR UPDATE（PostgreSQL 行級鎖）；SQLite 會忽略 FOR UPDATE，
在單一檔案資料庫上由寫入鎖保護
"""
from sqlalchemy.orm import Session, Query

from models import Room


def with_room_lock(room_id: str, db: Session) -> Query:
    """
    鎖定一個 Room（行級鎖）

    使用場景：
    - 建立 Player 前確認房間仍是 active
    - 關閉房間時

    範例：
        room = with_room_lock(room_id, db).first()
        if not room or not room.is_active:
            raise RoomNotFound(room_id)

    參數：
        room_id: Room ID
        db: SQLAlchemy Session

    返回：
        Query object（需要呼叫 .first() 來取得結果）

    注意：
        - 必須在 transaction 內使用（搭配 @transactional）
    """
    return db.query(Room).filter(
        Room.id == room_id
    ).with_for_update(nowait=False)
