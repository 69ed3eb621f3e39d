"""Priority-ordered action/filter dispatcher."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from hookbus.models import HookStats

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY = 10

HookCallback = Callable[..., Any]


class _Registration:
    __slots__ = ("callback", "removed")

    def __init__(self, callback: HookCallback) -> None:
        self.callback = callback
        self.removed = False


class Dispatcher:
    """In-process hook bus: callbacks grouped by tag and priority.

    Lower priorities run first; callbacks sharing a priority run in the
    order they were added. ``run`` threads a value through every callback
    and returns whatever the last one returned.
    """

    def __init__(self, default_priority: int = DEFAULT_PRIORITY) -> None:
        self.default_priority = default_priority
        self._hooks: dict[str, dict[int, list[_Registration]]] = {}
        self._merged: set[str] = set()
        self._current: list[str] = []
        self._triggered: dict[str, int] = {}
        self._mutations = 0

    def _priority(self, priority: int | None) -> int:
        if priority is None:
            return self.default_priority
        if isinstance(priority, bool):
            raise TypeError(f"Priority must be an int, got {priority!r}")
        return priority

    def add(self, tag: str, callback: HookCallback, priority: int | None = None) -> Dispatcher:
        priority = self._priority(priority)
        self._hooks.setdefault(tag, {}).setdefault(priority, []).append(_Registration(callback))
        self._merged.discard(tag)
        self._mutations += 1
        logger.debug("Registered %r on %s at priority %s", callback, tag, priority)
        return self

    def on(self, tag: str, priority: int | None = None) -> Callable[[HookCallback], HookCallback]:
        """Decorator form of :meth:`add`."""

        def decorator(fn: HookCallback) -> HookCallback:
            self.add(tag, fn, priority)
            return fn

        return decorator

    def has(self, tag: str, callback: HookCallback | None = None) -> bool | int:
        """Report whether ``tag`` has callbacks, or where ``callback`` sits.

        Without ``callback`` this is a plain boolean. With one, the priority
        it was registered at is returned, or ``False`` when it is not
        attached. Priority ``0`` is falsy, so compare the result with
        ``is False``.
        """
        buckets = self._hooks.get(tag)
        if not buckets:
            return False
        if callback is None:
            return True
        for priority, bucket in buckets.items():
            if any(reg.callback == callback for reg in bucket):
                return priority
        return False

    def run(self, tag: str, value: Any = None, *args: Any) -> Any:
        """Pass ``value`` through every callback on ``tag``.

        Each callback is called as ``callback(value, *args)`` and its return
        value becomes the next ``value``. Exceptions raised by a callback
        propagate; the remaining callbacks are skipped.
        """
        self._triggered[tag] = self._triggered.get(tag, 0) + 1
        if not self._hooks.get(tag):
            logger.debug("Run %s: no callbacks registered", tag)
            return value

        self._current.append(tag)
        try:
            if tag not in self._merged:
                self._hooks[tag] = dict(sorted(self._hooks[tag].items()))
                self._merged.add(tag)

            stamp = self._mutations
            order = iter(list(self._hooks[tag]))
            priority = next(order, None)
            while priority is not None:
                # Snapshot the bucket; later buckets are read when reached.
                for reg in list(self._hooks.get(tag, {}).get(priority, ())):
                    if reg.removed:
                        continue
                    value = reg.callback(value, *args)
                if self._mutations != stamp:
                    # Registrations changed mid-run; continue from the live buckets.
                    stamp = self._mutations
                    order = iter(sorted(p for p in self._hooks.get(tag, {}) if p > priority))
                priority = next(order, None)
        finally:
            self._current.pop()

        logger.debug("Run %s completed (%s total)", tag, self._triggered[tag])
        return value

    def remove(self, tag: str, callback: HookCallback, priority: int | None = None) -> bool:
        priority = self._priority(priority)
        buckets = self._hooks.get(tag)
        if not buckets or priority not in buckets:
            return False

        bucket = buckets[priority]
        for position, reg in enumerate(bucket):
            if reg.callback == callback:
                break
        else:
            return False

        reg.removed = True
        del bucket[position]
        if not bucket:
            del buckets[priority]
        if not buckets:
            del self._hooks[tag]
        self._merged.discard(tag)
        self._mutations += 1
        logger.debug("Removed %r from %s at priority %s", callback, tag, priority)
        return True

    def remove_all(self, tag: str, priority: int | None = None) -> bool:
        """Drop every callback on ``tag``, or only those at ``priority``.

        ``None`` and ``False`` both mean every priority; ``False`` would
        otherwise hash to the priority ``0`` bucket.
        """
        if priority is True:
            raise TypeError("Priority must be an int, None or False")
        buckets = self._hooks.get(tag)
        if buckets:
            if priority is not None and priority is not False:
                dropped = buckets.pop(priority, [])
                if not buckets:
                    del self._hooks[tag]
            else:
                dropped = [reg for bucket in self._hooks.pop(tag).values() for reg in bucket]
            for reg in dropped:
                reg.removed = True
            self._mutations += 1
            logger.debug("Removed %s callbacks from %s", len(dropped), tag)
        self._merged.discard(tag)
        return True

    def get_current(self) -> str | None:
        return self._current[-1] if self._current else None

    def doing(self, tag: str | None = None) -> bool:
        if tag is None:
            return bool(self._current)
        return tag in self._current

    def did(self, tag: str) -> int:
        return self._triggered.get(tag, 0)

    def tags(self) -> list[str]:
        return [tag for tag, buckets in self._hooks.items() if buckets]

    def callbacks(self, tag: str) -> list[HookCallback]:
        """Callbacks on ``tag`` in the order ``run`` would call them."""
        buckets = self._hooks.get(tag, {})
        return [reg.callback for priority in sorted(buckets) for reg in buckets[priority]]

    def stats(self, tag: str) -> HookStats:
        buckets = self._hooks.get(tag, {})
        return HookStats(
            tag=tag,
            registered=bool(buckets),
            priorities=sorted(buckets),
            callback_count=sum(len(bucket) for bucket in buckets.values()),
            runs=self.did(tag),
            active=self.doing(tag),
        )
