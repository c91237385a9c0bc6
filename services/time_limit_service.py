"""
題目時間限制：Pack 每題秒數的範圍與夾取邏輯

純計算邏輯。commit 前與 Pack 建立時（包含從儲存重新載入）都呼叫同一個函式，
確保 time_limit 永遠落在 [MIN_TIME_LIMIT, MAX_TIME_LIMIT]。
"""
from numbers import Real
from typing import Optional

MIN_TIME_LIMIT = 10
MAX_TIME_LIMIT = 120
DEFAULT_TIME_LIMIT = 30


def clamp_time_limit(value: Optional[int]) -> int:
    """
    將秒數夾取到合法範圍

    未填或 0 視為沒有設定，使用預設值

    範例：
        clamp_time_limit(5)    -> 10
        clamp_time_limit(200)  -> 120
        clamp_time_limit(None) -> 30
        clamp_time_limit(0)    -> 30

    異常：
        ValueError: 不是數字（例如儲存內容損壞時的 list / dict）
    """
    if not value:
        return DEFAULT_TIME_LIMIT
    if isinstance(value, bool) or not isinstance(value, (Real, str)):
        raise ValueError(f"time limit must be a number, got {type(value).__name__}")
    return max(MIN_TIME_LIMIT, min(MAX_TIME_LIMIT, int(value)))
