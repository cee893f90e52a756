# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Hook registration — @register_hook and register_hook_on_class."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any

from hookable.hooks.table import get_registry
from hookable.hooks.types import HookKey, Phase
from hookable.kernel.exceptions import InvalidArgumentException


class HookDeclaration:
    """Pending ``@register_hook`` declarations for one class attribute.

    When the class body completes, ``__set_name__`` writes every pending
    declaration into the declaring class's own table and puts the original
    function back in place, so any class can declare hook points.
    """

    def __init__(self, fn: Any) -> None:
        functools.update_wrapper(self, getattr(fn, "__func__", fn))
        self.fn = fn
        self.hooks: list[tuple[HookKey, Phase]] = []

    def __set_name__(self, owner: type, name: str) -> None:
        for hook_key, phase in self.hooks:
            register_hook_on_class(owner, name, hook_key, phase)
        setattr(owner, name, self.fn)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.fn(*args, **kwargs)


def register_hook(hook_key: HookKey, phase: Phase | str = Phase.BEFORE) -> Callable[[Any], HookDeclaration]:
    """Declare that *hook_key* fires on *phase* of the decorated method.

    The declaring class's own table is written when its body completes.
    Decorators stack, and for the same phase the outermost one wins::

        class Widget(Hookable):
            @register_hook("beforeMount")
            @register_hook("afterMount", Phase.AFTER)
            def mount(self): ...
    """
    _check_name("hook_key", hook_key)
    resolved = Phase.coerce(phase)

    def decorator(fn: Any) -> HookDeclaration:
        declaration = fn if isinstance(fn, HookDeclaration) else HookDeclaration(fn)
        declaration.hooks.append((hook_key, resolved))
        return declaration

    return decorator


def register_hook_on_class(
    cls: type,
    method_name: str,
    hook_key: HookKey,
    phase: Phase | str = Phase.BEFORE,
) -> None:
    """Imperative form of :func:`register_hook` for an existing class.

    Writes into *cls*'s own interception table, creating it if *cls* has
    none of its own yet. Usable on any class, including ones written
    without this package in mind.
    """
    if not isinstance(cls, type):
        raise InvalidArgumentException(
            f"Hooks can only be registered on classes, got {type(cls).__name__}",
            context={"target": cls},
        )
    _check_name("method_name", method_name)
    _check_name("hook_key", hook_key)
    get_registry().register(cls, method_name, hook_key, Phase.coerce(phase))


def _check_name(label: str, value: Any) -> None:
    if not isinstance(value, str) or not value:
        raise InvalidArgumentException(
            f"{label} must be a non-empty string, got {value!r}",
            context={label: value},
        )
