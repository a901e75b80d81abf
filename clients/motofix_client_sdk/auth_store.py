from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from platformdirs import user_data_dir

TOKEN_KEY = "motofix_admin_token"


class TokenStorage(Protocol):
    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


@dataclass
class MemoryTokenStorage:
    items: dict[str, str] = field(default_factory=dict)

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value

    def remove_item(self, key: str) -> None:
        self.items.pop(key, None)


@dataclass
class FileTokenStorage:
    """Key/value storage persisted as JSON in the per-user data directory."""

    app_name: str = "motofix-control"
    filename: str = "storage.json"
    base_dir: Path | None = None

    def _path(self) -> Path:
        base = self.base_dir or Path(user_data_dir(self.app_name, "MOTOFIX"))
        base.mkdir(parents=True, exist_ok=True)
        return base / self.filename

    def _read(self) -> dict[str, str]:
        path = self._path()
        if not path.exists():
            return {}
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError:
            path.unlink()
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(key): str(value) for key, value in data.items()}

    def _write(self, data: dict[str, str]) -> None:
        path = self._path()
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        try:
            path.chmod(0o600)
        except OSError:
            pass

    def get_item(self, key: str) -> str | None:
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove_item(self, key: str) -> None:
        data = self._read()
        if data.pop(key, None) is not None:
            self._write(data)


@dataclass
class AuthStore:
    storage: TokenStorage = field(default_factory=MemoryTokenStorage)
    key: str = TOKEN_KEY

    def get_token(self) -> str | None:
        return self.storage.get_item(self.key)

    def set_token(self, token: str) -> None:
        self.storage.set_item(self.key, token)

    def clear(self) -> None:
        self.storage.remove_item(self.key)

    def is_authenticated(self) -> bool:
        return bool(self.get_token())
