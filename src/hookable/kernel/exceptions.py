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
"""Exception hierarchy for Hookable.

All package exceptions inherit from HookableException, so callers can catch
one type for every error the hook machinery raises, or a specific subclass
for targeted handling.

Categories:
- InvalidArgumentException: bad input to a registration or store operation
- HookExecutionException: a hook handler failed (reported, never raised)
"""

from __future__ import annotations

from typing import Any


class HookableException(Exception):
    """Base exception for all Hookable errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "INVALID_ARGUMENT").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


class InvalidArgumentException(HookableException):
    """A non-callable handler, unknown phase or bad registration target.

    Raised synchronously, before any hook store or table is mutated.
    """

    def __init__(self, message: str, context: dict | None = None) -> None:
        super().__init__(message, code="INVALID_ARGUMENT", context=context)


class HookExecutionException(HookableException):
    """A hook handler raised while its hook key was being executed.

    The store builds one per failure and hands it to the diagnostics sink;
    the original exception is available as ``__cause__``.
    """

    def __init__(self, hook_key: str, handler: Any, cause: BaseException) -> None:
        super().__init__(
            f"Hook handler {_describe(handler)} failed for hook key '{hook_key}': {cause!r}",
            code="HOOK_EXECUTION",
            context={"hook_key": hook_key, "handler": handler},
        )
        self.__cause__ = cause

    @property
    def hook_key(self) -> str:
        return self.context["hook_key"]

    @property
    def handler(self) -> Any:
        return self.context["handler"]


def _describe(handler: Any) -> str:
    return getattr(handler, "__qualname__", None) or repr(handler)
