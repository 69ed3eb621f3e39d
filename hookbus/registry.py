"""Process-wide dispatcher instance.

Applications should build one :class:`~hookbus.dispatcher.Dispatcher` at
start-up, install it with :func:`set_dispatcher` and pass it to the code that
needs it. :func:`get_dispatcher` exists for extension points that have no
other way to reach it.
"""

from __future__ import annotations

import logging

from hookbus.dispatcher import Dispatcher
from hookbus.interfaces import HookBus

logger = logging.getLogger(__name__)

_instance: HookBus | None = None


def get_dispatcher() -> HookBus:
    global _instance
    if _instance is None:
        _instance = Dispatcher()
        logger.debug("Created process-wide dispatcher")
    return _instance


def set_dispatcher(dispatcher: HookBus) -> HookBus:
    global _instance
    _instance = dispatcher
    return dispatcher


def reset_dispatcher() -> None:
    """Forget the current instance. Intended for test harnesses."""
    global _instance
    _instance = None
