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
"""Hook key resolution along the inheritance chain."""

from __future__ import annotations

from typing import Any

from hookable.hooks.table import get_registry
from hookable.hooks.types import HookKey, Phase


def resolve_hook_key(target: Any, method_name: str, phase: Phase | str) -> HookKey | None:
    """Find the hook key consulted on *phase* of *method_name*.

    *target* is an instance or a class. The walk follows the MRO of the
    most-derived class:

    * a class with no interception table visible from it (none of its own
      and none along its own MRO) ends the walk with ``None``, whatever
      classes further up declare;
    * a class whose visible table has an entry for this method and phase
      ends the walk with that key, so the most-derived declaration wins;
    * otherwise the walk moves on to the next class.
    """
    cls = target if isinstance(target, type) else type(target)
    resolved = Phase.coerce(phase)
    registry = get_registry()

    for klass in cls.__mro__:
        table = registry.visible_table(klass)
        if table is None:
            return None
        hook_key = table.get(method_name, resolved)
        if hook_key is not None:
            return hook_key
    return None


def resolve_hook_keys(target: Any, method_name: str) -> tuple[HookKey | None, HookKey | None]:
    """Return the ``(before, after)`` hook keys for *method_name*."""
    return (
        resolve_hook_key(target, method_name, Phase.BEFORE),
        resolve_hook_key(target, method_name, Phase.AFTER),
    )


def hookable_method_names(target: Any) -> list[str]:
    """Names declared in any interception table along the MRO, in MRO order."""
    cls = target if isinstance(target, type) else type(target)
    registry = get_registry()
    names: dict[str, None] = {}
    for klass in cls.__mro__:
        table = registry.own_table(klass)
        if table is not None:
            names.update(dict.fromkeys(table.method_names()))
    return list(names)
