"""
Persistence of the signed-in account under an app-scoped key.
"""

import json
import logging
from typing import Optional

from pydantic import ValidationError

from .models import AuthData
from .storage import KeyValueStore


logger = logging.getLogger(__name__)

STORAGE_KEY_SUFFIX = "_wallet_auth_key"


class SessionStore:
    """Loads, saves and clears one ``AuthData`` record.

    Reads never raise: a missing or malformed record is treated as signed out.
    """

    def __init__(self, store: KeyValueStore, app_key_prefix: str):
        self._store = store
        self._key = app_key_prefix + STORAGE_KEY_SUFFIX

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> Optional[AuthData]:
        raw = self._store.get(self._key)
        if not raw:
            return None

        try:
            data = json.loads(raw)
        except (TypeError, ValueError):
            logger.warning(f"Discarding unparseable session record under {self._key}")
            return None

        # An empty object is how a signed-out record has always been stored
        if not data:
            return None

        try:
            auth = AuthData.model_validate(data)
        except ValidationError:
            logger.warning(f"Discarding malformed session record under {self._key}")
            return None

        if not auth.account_id:
            return None
        return auth

    def save(self, auth: AuthData) -> None:
        self._store.set(self._key, auth.model_dump_json(by_alias=True))

    def clear(self) -> None:
        self._store.remove(self._key)
