"""
核心業務邏輯層

這個 package 包含有狀態的業務邏輯，包括：
- RoomManager：管理 Room 與 Player 的建立、查詢
- PackManager：擁有 Pack 集合，負責驗證後寫入持久化儲存
- ProfileStore：玩家名稱與頭像設定的本地保存
- Locks：並發控制工具
"""
