"""hookbus: priority-ordered action and filter hooks."""

from hookbus.dispatcher import DEFAULT_PRIORITY, Dispatcher
from hookbus.interfaces import HookBus
from hookbus.models import HookStats
from hookbus.registry import get_dispatcher, reset_dispatcher, set_dispatcher

__all__ = [
    "DEFAULT_PRIORITY",
    "Dispatcher",
    "HookBus",
    "HookStats",
    "get_dispatcher",
    "reset_dispatcher",
    "set_dispatcher",
]
