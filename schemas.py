"""
Request / Response Schemas

JSON 欄位沿用前端的 camelCase（roomId、timeLimit...），Python 端用 snake_case，
以 alias 對應。所有 model 都接受兩種名稱（populate_by_name）。
"""
from datetime import datetime
from typing import Annotated, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from services.customization_service import GLASSES_STYLES, SMILE_STYLES
from services.time_limit_service import DEFAULT_TIME_LIMIT, clamp_time_limit


OptionText = Annotated[str, Field(max_length=100)]


# ============ Character Customization ============

class CharacterCustomizationIn(BaseModel):
    color: str = Field(..., pattern=r"^#[0-9A-Fa-f]{6}$")
    glasses: int = Field(..., ge=0, lt=len(GLASSES_STYLES))
    smile: int = Field(..., ge=0, lt=len(SMILE_STYLES))


class CharacterCustomizationOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    color: str
    glasses: int
    smile: int


# ============ Room / Player ============

class RoomCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)


class RoomSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    code: str
    name: str
    is_active: bool = Field(..., alias="isActive")
    created_at: datetime = Field(..., alias="createdAt")


class RoomResponse(BaseModel):
    room: RoomSummary


class JoinRoomRequest(BaseModel):
    """
    加入房間的 request body

    room_id / player_name 是 Optional：缺少時由 endpoint 回 400，
    與型別錯誤（422）區分開來
    """
    model_config = ConfigDict(populate_by_name=True)

    room_id: Optional[str] = Field(None, alias="roomId")
    player_name: Optional[str] = Field(None, alias="playerName", max_length=50)
    character_customization: Optional[CharacterCustomizationIn] = Field(
        None, alias="characterCustomization"
    )


class PlayerOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    name: str
    room_id: str = Field(..., alias="roomId")
    score: int
    is_active: bool = Field(..., alias="isActive")
    created_at: datetime = Field(..., alias="createdAt")
    customization: Optional[CharacterCustomizationOut] = None


class JoinRoomResponse(BaseModel):
    player: PlayerOut


# ============ Pack ============

class QuestionDraft(BaseModel):
    """編輯中的題目，內容可能不完整"""
    model_config = ConfigDict(populate_by_name=True)

    question: str = Field("", max_length=200)
    options: List[OptionText] = Field(default_factory=list)
    correct_answer: int = Field(0, alias="correctAnswer")


class PackDraft(BaseModel):
    """編輯中的 Pack，所有欄位皆可省略；是否可提交由 validate_pack 決定"""
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(None, max_length=50)
    description: Optional[str] = Field(None, max_length=200)
    questions: Optional[List[QuestionDraft]] = None
    is_public: Optional[bool] = Field(None, alias="isPublic")
    time_limit: Optional[int] = Field(None, alias="timeLimit")


class Question(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    question: str
    options: Tuple[str, ...]
    correct_answer: int = Field(..., alias="correctAnswer")


class Pack(BaseModel):
    """已提交的 Pack（不可變快照）"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    description: str
    questions: Tuple[Question, ...]
    is_public: bool = Field(False, alias="isPublic")
    time_limit: int = Field(DEFAULT_TIME_LIMIT, alias="timeLimit")

    @field_validator("time_limit", mode="before")
    @classmethod
    def _clamp_time_limit(cls, value):
        return clamp_time_limit(value)


class PackSummary(BaseModel):
    """Pack 列表用的摘要"""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: str
    is_public: bool = Field(..., alias="isPublic")
    time_limit: int = Field(..., alias="timeLimit")
    question_count: int = Field(..., alias="questionCount")

    @classmethod
    def from_pack(cls, pack: Pack) -> "PackSummary":
        return cls(
            id=pack.id,
            name=pack.name,
            description=pack.description,
            is_public=pack.is_public,
            time_limit=pack.time_limit,
            question_count=len(pack.questions),
        )


# ============ Profile ============

class ProfileOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    display_name: Optional[str] = Field(None, alias="displayName")
    character_customization: CharacterCustomizationIn = Field(..., alias="characterCustomization")


class ProfileUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    display_name: Optional[str] = Field(None, alias="displayName", min_length=1, max_length=50)
    character_customization: Optional[CharacterCustomizationIn] = Field(
        None, alias="characterCustomization"
    )
