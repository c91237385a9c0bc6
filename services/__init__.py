"""
服務層

這個 package 包含純計算邏輯，不負責持久化：
- PackService：Pack 驗證、提交、集合操作
- TimeLimitService：題目秒數夾取
- NamingService：房間代碼生成
- CustomizationService：頭像選項
"""
