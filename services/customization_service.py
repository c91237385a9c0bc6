"""
頭像設定服務：鴨子頭像的顏色與配件選項

純資料與轉換邏輯，不涉及資料庫
"""
from typing import Any, Dict

DUCK_COLORS = [
    "#FFD700",  # Yellow
    "#FFA500",  # Orange
    "#FF69B4",  # Pink
    "#98FB98",  # Light Green
    "#87CEEB",  # Sky Blue
    "#DDA0DD",  # Plum
]

GLASSES_STYLES = ["none", "round", "square", "star"]

SMILE_STYLES = ["neutral", "happy", "excited"]


def default_customization() -> Dict[str, Any]:
    """新玩家的預設頭像（黃色、無眼鏡、平常表情）"""
    return {"color": DUCK_COLORS[0], "glasses": 0, "smile": 0}


def describe_customization(color: str, glasses: int, smile: int) -> Dict[str, str]:
    """
    把索引轉成可讀的樣式名稱，給 log 和前端預覽用

    範例：
        describe_customization("#FFD700", 1, 2)
        -> {"color": "#FFD700", "glasses": "round", "smile": "excited"}
    """
    return {
        "color": color.upper(),
        "glasses": GLASSES_STYLES[glasses],
        "smile": SMILE_STYLES[smile],
    }
