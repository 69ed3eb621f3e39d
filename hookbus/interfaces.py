"""Hook bus interface for code that receives an injected dispatcher."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from hookbus.dispatcher import HookCallback


@runtime_checkable
class HookBus(Protocol):
    def add(self, tag: str, callback: HookCallback, priority: int | None = None) -> HookBus: ...

    def has(self, tag: str, callback: HookCallback | None = None) -> bool | int: ...

    def run(self, tag: str, value: Any = None, *args: Any) -> Any: ...

    def remove(self, tag: str, callback: HookCallback, priority: int | None = None) -> bool: ...

    def remove_all(self, tag: str, priority: int | None = None) -> bool: ...

    def get_current(self) -> str | None: ...

    def doing(self, tag: str | None = None) -> bool: ...

    def did(self, tag: str) -> int: ...
