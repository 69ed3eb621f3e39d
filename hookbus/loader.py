"""Register callbacks declared in configuration."""

from __future__ import annotations

import importlib
import logging
from collections.abc import Iterable

from hookbus.config import HookbusConfig, HookBinding
from hookbus.dispatcher import Dispatcher, HookCallback
from hookbus.interfaces import HookBus

logger = logging.getLogger(__name__)


class CallbackImportError(ValueError):
    """A ``module:attribute`` reference could not be resolved to a callable."""


def resolve_callback(reference: str) -> HookCallback:
    module_name, sep, attr_path = reference.partition(":")
    if not sep or not module_name or not attr_path:
        raise CallbackImportError(f"Callback reference must look like 'module:attr', got {reference!r}")
    try:
        target = importlib.import_module(module_name)
    except ImportError as exc:
        raise CallbackImportError(f"Cannot import module {module_name!r} for {reference!r}") from exc
    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise CallbackImportError(f"{reference!r} has no attribute {part!r}") from exc
    if not callable(target):
        raise CallbackImportError(f"{reference!r} resolved to non-callable {type(target).__name__}")
    return target


def load_bindings(dispatcher: HookBus, bindings: Iterable[HookBinding]) -> HookBus:
    """Resolve every binding first, then register them in declaration order."""
    resolved = [(binding, resolve_callback(binding.callback)) for binding in bindings]
    for binding, callback in resolved:
        dispatcher.add(binding.tag, callback, binding.priority)
    logger.info("Loaded %s configured hook bindings", len(resolved))
    return dispatcher


def build_dispatcher(config: HookbusConfig) -> Dispatcher:
    dispatcher = Dispatcher(default_priority=config.dispatcher.default_priority)
    load_bindings(dispatcher, config.hooks)
    return dispatcher
