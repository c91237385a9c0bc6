"""
ORM Models

Room / Player / CharacterCustomization 三張表：
- Room：可加入的遊戲房間，以短代碼識別
- Player：房間內的參與者
- CharacterCustomization：玩家的頭像設定（可選，一對一）
"""
import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from database import Base


def _uuid() -> str:
    return str(uuid.uuid4())


def _now() -> datetime:
    return datetime.now(timezone.utc)


class Room(Base):
    __tablename__ = "rooms"

    id = Column(String(36), primary_key=True, default=_uuid)
    code = Column(String(12), unique=True, index=True, nullable=False)
    name = Column(String(50), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_now)

    players = relationship("Player", back_populates="room", cascade="all, delete-orphan")


class Player(Base):
    __tablename__ = "players"

    id = Column(String(36), primary_key=True, default=_uuid)
    room_id = Column(String(36), ForeignKey("rooms.id"), nullable=False, index=True)
    name = Column(String(50), nullable=False)
    score = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_now)

    room = relationship("Room", back_populates="players")
    customization = relationship(
        "CharacterCustomization",
        back_populates="player",
        uselist=False,
        cascade="all, delete-orphan"
    )


class CharacterCustomization(Base):
    __tablename__ = "character_customizations"

    id = Column(String(36), primary_key=True, default=_uuid)
    player_id = Column(String(36), ForeignKey("players.id"), nullable=False, unique=True)
    color = Column(String(7), nullable=False)
    glasses = Column(Integer, nullable=False, default=0)
    smile = Column(Integer, nullable=False, default=0)

    player = relationship("Player", back_populates="customization")
