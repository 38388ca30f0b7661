from .models import AuthData, Session
from .storage import KeyValueStore, MemoryKeyValueStore, JsonFileKeyValueStore
from .session_store import SessionStore, STORAGE_KEY_SUFFIX
from .flow import AuthFlow

__all__ = [
    "AuthData",
    "Session",
    "KeyValueStore",
    "MemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "SessionStore",
    "STORAGE_KEY_SUFFIX",
    "AuthFlow",
]
