"""
API 層

FastAPI routers：rooms（房間驗證與加入）、packs（Pack CRUD）、profile（玩家本地設定）
"""
