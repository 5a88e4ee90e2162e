"""Persisted per-key preferences, decoupled from where they are stored.

A :class:`PersistedPreference` reads its value once when created and writes
it back on every change. Values are stored JSON encoded.
"""

import json
import logging
from collections.abc import Callable
from typing import Generic, Protocol, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session

from chefai.models.preference import UserPreference

_log = logging.getLogger(__name__)

T = TypeVar("T")


class PreferenceBackend(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryPreferenceBackend:
    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class SqlPreferenceBackend:
    """Preferences of one user stored in the ``user_preferences`` table."""

    def __init__(self, session: Session, user_id: int):
        self._session = session
        self._user_id = user_id

    def _row(self, key: str) -> UserPreference | None:
        stmt = select(UserPreference).where(
            UserPreference.user_id == self._user_id,
            UserPreference.key == key,
        )
        return self._session.execute(stmt).scalar_one_or_none()

    def get(self, key: str) -> str | None:
        row = self._row(key)
        return row.value if row is not None else None

    def set(self, key: str, value: str) -> None:
        row = self._row(key)
        if row is None:
            self._session.add(UserPreference(user_id=self._user_id, key=key, value=value))
        else:
            row.value = value
        self._session.flush()


class PersistedPreference(Generic[T]):
    def __init__(self, backend: PreferenceBackend, key: str, default: T):
        self._backend = backend
        self.key = key
        self._value: T = self._read(default)

    def _read(self, default: T) -> T:
        raw = self._backend.get(self.key)
        if not raw:
            return default
        try:
            return json.loads(raw)
        except ValueError as exc:
            _log.warning("Error reading preference %r: %s", self.key, exc)
            return default

    @property
    def value(self) -> T:
        return self._value

    def set(self, value: T | Callable[[T], T]) -> None:
        new_value = value(self._value) if callable(value) else value
        try:
            encoded = json.dumps(new_value)
        except (TypeError, ValueError) as exc:
            _log.warning("Error setting preference %r: %s", self.key, exc)
            return
        self._value = new_value
        self._backend.set(self.key, encoded)


BANNER_KEYS = ("banner.generator_intro", "banner.planner_intro", "banner.community_intro")


def banner_preference(backend: PreferenceBackend, key: str) -> PersistedPreference[bool]:
    """Whether the intro banner ``key`` has been dismissed."""
    return PersistedPreference(backend, key, False)
