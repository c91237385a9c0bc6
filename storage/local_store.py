import json
import logging
import os
import tempfile
import threading
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)

DEFAULT_STORE_FILE = "./data/local_store.json"


class LocalStore:
    """
    以 JSON 檔保存的字串 key-value 儲存，介面對應瀏覽器的 localStorage。

    檔案格式：
    {
        "quizPacks": "[...]",
        "userName": "Alice",
        ...
    }

    值一律是字串，由呼叫者自行序列化。每次寫入都是整份檔案的 atomic replace，
    寫入失敗（權限、磁碟已滿）不會被攔截，直接往上拋。
    """

    def __init__(self, path: Optional[str] = None) -> None:
        self.path = os.path.abspath(path or DEFAULT_STORE_FILE)
        self.lock = threading.RLock()

        parent_dir = os.path.dirname(self.path) or "."
        os.makedirs(parent_dir, exist_ok=True)

    def get_item(self, key: str) -> Optional[str]:
        """取得 key 對應的字串值，不存在時回傳 None"""
        with self.lock:
            return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"LocalStore values must be str, got {type(value).__name__}")
        with self.lock:
            data = self._read()
            data[key] = value
            self._atomic_write(data)

    def remove_item(self, key: str) -> None:
        with self.lock:
            data = self._read()
            if key in data:
                del data[key]
                self._atomic_write(data)

    def keys(self) -> List[str]:
        with self.lock:
            return list(self._read().keys())

    def _read(self) -> Dict[str, str]:
        if not os.path.exists(self.path):
            return {}

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError:
            logger.error(f"Local store {self.path} is corrupted, starting from an empty store")
            return {}

        if not isinstance(data, dict):
            logger.error(f"Local store {self.path} does not hold an object, starting from an empty store")
            return {}

        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _atomic_write(self, data: Dict[str, str]) -> None:
        """
        Write JSON to a temporary file and atomically replace the target.

        Readers never see a partially-written file.
        """
        directory = os.path.dirname(self.path) or "."
        fd, tmp_path = tempfile.mkstemp(prefix=".local_store.", suffix=".tmp", dir=directory, text=True)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp_file:
                json.dump(data, tmp_file, indent=2, ensure_ascii=False)
                tmp_file.flush()
                os.fsync(tmp_file.fileno())
            os.replace(tmp_path, self.path)
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
