"""
Pack 服務：Pack 草稿的驗證、提交與集合操作

純計算邏輯，不負責持久化（由 PackManager 負責）：
- validate_pack：依序檢查規則，回傳第一個錯誤訊息
- commit_pack：草稿 -> 不可變的 Pack 快照
- upsert_pack / remove_pack：回傳新的集合，不修改傳入的集合
"""
import uuid
from typing import List, Optional, Sequence

from schemas import Pack, PackDraft, Question
from services.time_limit_service import clamp_time_limit
from core.exceptions import PackValidationError


def generate_pack_id() -> str:
    """產生不透明的 Pack ID"""
    return uuid.uuid4().hex


def validate_pack(draft: PackDraft) -> Optional[str]:
    """
    驗證 Pack 草稿

    檢查順序（fail-fast，只回報第一個錯誤）：
    1. name 去除空白後不可為空
    2. description 去除空白後不可為空
    3. 至少一題
    4. 每一題依序：題目不可為空 -> 每個選項不可為空 -> 正確答案索引在範圍內

    參數：
        draft: Pack 草稿

    返回：
        錯誤訊息字串；通過驗證則回傳 None

    範例：
        validate_pack(PackDraft(name="  ")) -> "Pack name is required"
    """
    if not (draft.name or "").strip():
        return "Pack name is required"
    if not (draft.description or "").strip():
        return "Pack description is required"
    if not draft.questions:
        return "At least one question is required"

    for index, question in enumerate(draft.questions, start=1):
        if not question.question.strip():
            return f"Question {index} is empty"
        if any(not option.strip() for option in question.options):
            return f"Question {index} has empty options"
        if question.correct_answer < 0 or question.correct_answer >= len(question.options):
            return f"Question {index} has invalid correct answer"

    return None


def commit_pack(draft: PackDraft, existing_id: Optional[str] = None) -> Pack:
    """
    把草稿提交成 Pack 快照

    規則：
    - existing_id 存在時沿用（編輯），否則產生新 ID（建立）
    - time_limit 夾取到 [10, 120]，未填則為 30
    - is_public 未填則為 False
    - 題目與選項複製成 tuple，不會和草稿共用可變物件

    異常：
        PackValidationError: 草稿沒有通過 validate_pack
    """
    error = validate_pack(draft)
    if error:
        raise PackValidationError(error)

    questions = tuple(
        Question(
            question=q.question,
            options=tuple(q.options),
            correct_answer=q.correct_answer,
        )
        for q in draft.questions
    )

    return Pack(
        id=existing_id or generate_pack_id(),
        name=draft.name,
        description=draft.description,
        questions=questions,
        is_public=bool(draft.is_public),
        time_limit=clamp_time_limit(draft.time_limit),
    )


def upsert_pack(packs: Sequence[Pack], pack: Pack) -> List[Pack]:
    """
    以 ID 取代既有的 Pack（保留順序），找不到則附加在最後
    """
    replaced = False
    result: List[Pack] = []
    for existing in packs:
        if existing.id == pack.id:
            result.append(pack)
            replaced = True
        else:
            result.append(existing)

    if not replaced:
        result.append(pack)
    return result


def remove_pack(packs: Sequence[Pack], pack_id: str) -> List[Pack]:
    """移除指定 ID 的 Pack；不存在時回傳內容相同的新集合"""
    return [p for p in packs if p.id != pack_id]
