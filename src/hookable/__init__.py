"""Hookable — declare hook points on class hierarchies and attach behavior per instance."""

from hookable.hooks import (
    Hookable,
    HookStore,
    Phase,
    register_hook,
    register_hook_on_class,
    resolve_hook_key,
)
from hookable.kernel import HookableException, HookExecutionException, InvalidArgumentException

__version__ = "0.1.0"

__all__ = [
    "HookExecutionException",
    "HookStore",
    "Hookable",
    "HookableException",
    "InvalidArgumentException",
    "Phase",
    "register_hook",
    "register_hook_on_class",
    "resolve_hook_key",
]
