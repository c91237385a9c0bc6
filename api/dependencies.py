"""
FastAPI dependencies：本地儲存相關

LocalStore 是 process 內的單例，PackManager / ProfileStore 每個請求建立一次，
共用同一個 store（與它的 lock）
"""
from functools import lru_cache

from fastapi import Depends

from database import get_settings
from storage.local_store import LocalStore
from core.pack_manager import PackManager
from core.profile_store import ProfileStore


@lru_cache(maxsize=1)
def _get_store_singleton() -> LocalStore:
    return LocalStore(path=get_settings().local_store_path)


def get_local_store() -> LocalStore:
    return _get_store_singleton()


def get_pack_manager(store: LocalStore = Depends(get_local_store)) -> PackManager:
    return PackManager(store)


def get_profile_store(store: LocalStore = Depends(get_local_store)) -> ProfileStore:
    return ProfileStore(store)
