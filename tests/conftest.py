"""Shared fixtures: an in-memory Realtime Database and a test config."""

import copy
import threading
from collections import Counter
from dataclasses import dataclass
from typing import Any

import pytest
from firebase_admin import exceptions

from foodcourt.config import FirebaseConfig
from foodcourt.firebase import auth, client

PATCHED_MODULES = [
    "foodcourt.firebase.catalog",
    "foodcourt.firebase.orders",
    "foodcourt.firebase.seed",
    "foodcourt.firebase.settings",
    "foodcourt.firebase.streams",
    "foodcourt.firebase.users",
    "foodcourt.firebase.wishlist",
]


def _parts(path: str) -> list[str]:
    return [part for part in path.split("/") if part]


@dataclass
class FakeEvent:
    event_type: str
    path: str
    data: Any


class FakeRegistration:
    def __init__(self, db: "FakeDatabase", listener):
        self._db = db
        self._listener = listener
        self.closed = False

    def close(self):
        self.closed = True
        self._db.listeners.remove(self._listener)


class FakeReference:
    """Subset of ``firebase_admin.db.Reference`` backed by ``FakeDatabase``."""

    def __init__(self, db: "FakeDatabase", path: str):
        self._db = db
        self.path = "/".join(_parts(path))

    @property
    def key(self):
        parts = _parts(self.path)
        return parts[-1] if parts else None

    def child(self, path: str) -> "FakeReference":
        return FakeReference(self._db, f"{self.path}/{path}")

    def get(self):
        return self._db.read(self.path)

    def set(self, value):
        self._db.write(self.path, value)

    def update(self, value: dict):
        for key, child in value.items():
            self._db.write(f"{self.path}/{key}", child)

    def delete(self):
        self._db.write(self.path, None)

    def push(self, value=""):
        ref = self.child(self._db.next_push_key())
        ref.set(value)
        return ref

    def listen(self, callback):
        listener = (self.path, callback)
        self._db.listeners.append(listener)
        callback(FakeEvent("put", "/", self.get()))
        return FakeRegistration(self._db, listener)


class FakeDatabase:
    def __init__(self, data: dict | None = None):
        self.data: dict = data or {}
        self.reads: Counter = Counter()
        self.failing: set[str] = set()
        self.fail_writes = False
        self.listeners: list = []
        self._push_count = 0
        self._lock = threading.Lock()

    def fail_on(self, path: str):
        """Make every read at or below ``path`` raise."""
        self.failing.add("/".join(_parts(path)))

    def next_push_key(self) -> str:
        self._push_count += 1
        return f"-Npush{self._push_count:04d}"

    def read(self, path: str):
        with self._lock:
            self.reads[path] += 1
        for failing in self.failing:
            if path == failing or path.startswith(failing + "/"):
                raise exceptions.UnavailableError(f"backend unavailable: {path}")

        node: Any = self.data
        for part in _parts(path):
            if not isinstance(node, dict):
                return None
            node = node.get(part)
        return copy.deepcopy(node)

    def write(self, path: str, value: Any):
        if self.fail_writes:
            raise exceptions.PermissionDeniedError(f"permission denied: {path}")

        value = copy.deepcopy(value)
        parts = _parts(path)
        if not parts:
            self.data = value or {}
        else:
            node = self.data
            for part in parts[:-1]:
                node = node.setdefault(part, {})
            if value is None or value == {}:
                node.pop(parts[-1], None)
            else:
                node[parts[-1]] = value

        self._notify("/".join(parts), value)

    def _notify(self, path: str, value: Any):
        for listen_path, callback in list(self.listeners):
            if path == listen_path or path.startswith(listen_path + "/") or not listen_path:
                relative = path[len(listen_path):] or "/"
                callback(FakeEvent("put", relative, copy.deepcopy(value)))
            elif listen_path.startswith(path + "/") or not path:
                callback(FakeEvent("put", "/", self.read(listen_path)))


@pytest.fixture
def config() -> FirebaseConfig:
    return FirebaseConfig(
        credentials_path="/nonexistent/service-account.json",
        database_url="https://foodcourt-test.firebaseio.com",
        api_key="test-api-key",
    )


@pytest.fixture
def fake_db(monkeypatch) -> FakeDatabase:
    """Route every accessor module's ``get_reference`` to an in-memory database."""
    db = FakeDatabase()

    def get_reference(config, path="/"):
        return FakeReference(db, path)

    for module in PATCHED_MODULES:
        monkeypatch.setattr(f"{module}.get_reference", get_reference)
    return db


@pytest.fixture(autouse=True)
def clean_auth_session():
    auth.reset_session()
    yield
    auth.reset_session()
    client.reset_client()
