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
"""Interception tables — per-class (method, phase) -> hook key declarations."""

from __future__ import annotations

import logging
import weakref
from dataclasses import dataclass, field

from hookable.hooks.types import HookKey, Phase

logger = logging.getLogger(__name__)


@dataclass
class InterceptionTable:
    """Hook keys declared by exactly one class.

    ``entries`` maps a method name to ``{Phase: hook_key}``. Entries may be
    overwritten but are never removed.
    """

    owner: type
    entries: dict[str, dict[Phase, HookKey]] = field(default_factory=dict)

    def set(self, method_name: str, phase: Phase, hook_key: HookKey) -> None:
        self.entries.setdefault(method_name, {})[phase] = hook_key

    def get(self, method_name: str, phase: Phase) -> HookKey | None:
        return self.entries.get(method_name, {}).get(phase)

    def method_names(self) -> list[str]:
        return list(self.entries)


class InterceptionRegistry:
    """Side-table of interception tables keyed by class.

    A class's table is its own: registering on a subclass creates a new
    table even when an ancestor already has one. Tables are held weakly by
    class, so they live exactly as long as the class does.
    """

    def __init__(self) -> None:
        self._tables: weakref.WeakKeyDictionary[type, InterceptionTable] = weakref.WeakKeyDictionary()

    def own_table(self, cls: type) -> InterceptionTable | None:
        """Return the table *cls* itself owns, ignoring ancestors."""
        return self._tables.get(cls)

    def ensure_table(self, cls: type) -> InterceptionTable:
        table = self._tables.get(cls)
        if table is None:
            table = InterceptionTable(owner=cls)
            self._tables[cls] = table
            logger.debug("Created interception table for %s", cls.__qualname__)
        return table

    def visible_table(self, cls: type) -> InterceptionTable | None:
        """Return the nearest table along *cls*'s own MRO, or None."""
        for klass in cls.__mro__:
            table = self._tables.get(klass)
            if table is not None:
                return table
        return None

    def register(self, cls: type, method_name: str, hook_key: HookKey, phase: Phase) -> None:
        self.ensure_table(cls).set(method_name, phase, hook_key)
        logger.debug(
            "Registered %s hook '%s' on %s.%s",
            phase.value,
            hook_key,
            cls.__qualname__,
            method_name,
        )


_registry = InterceptionRegistry()


def get_registry() -> InterceptionRegistry:
    """Return the process-wide interception registry."""
    return _registry


def get_interception_table(cls: type) -> InterceptionTable | None:
    """Return the interception table owned by *cls* itself, or None."""
    return _registry.own_table(cls)
