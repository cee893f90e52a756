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
"""Hook core types — Phase, HookEntry and the handler calling convention."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from hookable.kernel.exceptions import InvalidArgumentException

HookKey = str
"""Opaque name of a dispatch channel; need not match any method name."""

HookHandler = Callable[..., Any]
"""Called as ``handler(instance, *args, **kwargs)``; the return value is ignored."""


class Phase(StrEnum):
    """Where a hook key fires relative to the intercepted method body."""

    BEFORE = "before"
    AFTER = "after"

    @classmethod
    def coerce(cls, value: Phase | str) -> Phase:
        """Accept a :class:`Phase` or its string value."""
        try:
            return cls(value)
        except ValueError:
            raise InvalidArgumentException(
                f"Unknown hook phase {value!r}; expected 'before' or 'after'",
                context={"phase": value},
            ) from None


@dataclass(eq=False)
class HookEntry:
    """One registered handler under a hook key.

    Entries compare by identity, so two registrations of the same handler
    stay distinct entries. ``consumed`` is set on a once entry right before
    it fires and keeps re-entrant executions from firing it again.
    """

    handler: HookHandler
    once: bool = False
    consumed: bool = field(default=False, repr=False)


def ensure_callable(hook_key: HookKey, handlers: list[Any]) -> None:
    """Raise :class:`InvalidArgumentException` unless every handler is callable."""
    for position, handler in enumerate(handlers):
        if not callable(handler):
            raise InvalidArgumentException(
                f"Hook handler for '{hook_key}' must be callable, got {type(handler).__name__}",
                context={"hook_key": hook_key, "position": position, "handler": handler},
            )
