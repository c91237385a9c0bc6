"""
自定義異常類別

集中管理所有業務邏輯異常，方便 API 層統一處理
"""


class QuizGameException(Exception):
    """所有遊戲異常的基類"""
    pass


# ============ Room 相關異常 ============

class RoomNotFound(QuizGameException):
    """房間不存在或已經關閉"""
    def __init__(self, room_ref):
        self.room_ref = room_ref
        super().__init__(f"Room {room_ref} not found")


# ============ Pack 相關異常 ============

class PackNotFound(QuizGameException):
    """Pack 不存在"""
    def __init__(self, pack_id):
        self.pack_id = pack_id
        super().__init__(f"Pack {pack_id} not found")


class PackValidationError(QuizGameException):
    """Pack 草稿沒有通過驗證（訊息即為第一個失敗的規則）"""
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
