from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class ToastLevel(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Toast:
    level: ToastLevel
    message: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class NotificationCenter:
    """Transient toast queue; the shell prints and drains it after each action."""

    def __init__(self) -> None:
        self._pending: list[Toast] = []
        self.history: list[Toast] = []

    def success(self, message: str) -> Toast:
        return self._push(ToastLevel.SUCCESS, message)

    def error(self, message: str) -> Toast:
        return self._push(ToastLevel.ERROR, message)

    def _push(self, level: ToastLevel, message: str) -> Toast:
        toast = Toast(level=level, message=message)
        self._pending.append(toast)
        self.history.append(toast)
        return toast

    @property
    def pending(self) -> list[Toast]:
        return list(self._pending)

    def drain(self) -> list[Toast]:
        toasts, self._pending = self._pending, []
        return toasts

    def render(self) -> None:
        for toast in self.drain():
            print(f"[{toast.level.value}] {toast.message}")
