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
"""Diagnostics sinks — where failing hook handlers are reported."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from hookable.core.config import Config, config_properties
from hookable.hooks.types import HookHandler, HookKey
from hookable.kernel.exceptions import HookExecutionException
from hookable.logging.port import LoggingPort


@runtime_checkable
class DiagnosticsSink(Protocol):
    """Receives every failure isolated by a hook store."""

    def __call__(self, hook_key: HookKey, handler: HookHandler, error: HookExecutionException) -> None: ...


@config_properties(prefix="hookable.diagnostics")
@dataclass
class DiagnosticsProperties:
    """Settings for :class:`LoggingDiagnostics`."""

    level: str = "ERROR"
    traceback: bool = True


class LoggingDiagnostics:
    """Default sink: logs each handler failure.

    Logs through the stdlib logger *logger_name* unless a *logger* is given;
    any logger with a stdlib-style ``log(level, msg, *args, exc_info=...)``
    works, including the structlog loggers a :class:`LoggingPort` hands out.
    """

    def __init__(
        self,
        level: str = "ERROR",
        traceback: bool = True,
        logger_name: str = "hookable.hooks",
        logger: Any = None,
    ) -> None:
        self.level: int = getattr(logging, level.upper(), logging.ERROR)
        self.traceback = traceback
        self._logger = logger if logger is not None else logging.getLogger(logger_name)

    @classmethod
    def from_config(cls, config: Config, port: LoggingPort | None = None) -> LoggingDiagnostics:
        props = config.bind(DiagnosticsProperties)
        logger = port.get_logger("hookable.hooks") if port is not None else None
        return cls(level=props.level, traceback=props.traceback, logger=logger)

    def __call__(self, hook_key: HookKey, handler: HookHandler, error: HookExecutionException) -> None:
        extra: dict[str, Any] = {}
        if self.traceback:
            extra["exc_info"] = error.__cause__
        self._logger.log(
            self.level,
            "Hook handler %s failed for hook key '%s'",
            getattr(handler, "__qualname__", repr(handler)),
            hook_key,
            **extra,
        )


_default_sink: DiagnosticsSink = LoggingDiagnostics()


def get_default_diagnostics() -> DiagnosticsSink:
    """Return the sink used by stores that were not given one."""
    return _default_sink


def set_default_diagnostics(sink: DiagnosticsSink) -> DiagnosticsSink:
    """Replace the process-wide default sink and return the previous one."""
    global _default_sink
    previous = _default_sink
    _default_sink = sink
    return previous
