"""
儲存層

LocalStore：以單一 JSON 檔模擬瀏覽器 localStorage 的字串 key-value 儲存
"""
