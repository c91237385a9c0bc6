import os
import tempfile

# 測試不碰開發用的資料庫與本地儲存檔
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault(
    "LOCAL_STORE_PATH",
    os.path.join(tempfile.gettempdir(), "quiz_room_tests", "local_store.json")
)
