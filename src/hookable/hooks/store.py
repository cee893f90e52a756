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
"""HookStore — per-instance ordered hook lists keyed by hook key."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Iterable
from typing import Any

from hookable.hooks.diagnostics import DiagnosticsSink, get_default_diagnostics
from hookable.hooks.types import HookEntry, HookHandler, HookKey, ensure_callable
from hookable.kernel.exceptions import HookExecutionException

logger = logging.getLogger(__name__)


class HookStore:
    """Ordered hook entries for one owner instance.

    Handlers run as ``handler(owner, *args, **kwargs)`` in registration
    order. A handler that raises is reported to the diagnostics sink and
    execution carries on with the next one.

    Usage::

        store = HookStore(widget)
        store.add_hook("beforeMount", lambda w: w.log.append("mounting"))
        store.exec_hooks("beforeMount")
    """

    def __init__(self, owner: Any, diagnostics: DiagnosticsSink | None = None) -> None:
        self._owner = owner
        self._hooks: dict[HookKey, list[HookEntry]] = {}
        self._diagnostics = diagnostics

    @property
    def owner(self) -> Any:
        return self._owner

    @property
    def diagnostics(self) -> DiagnosticsSink:
        """The store's own sink, falling back to the process default."""
        return self._diagnostics if self._diagnostics is not None else get_default_diagnostics()

    @diagnostics.setter
    def diagnostics(self, sink: DiagnosticsSink | None) -> None:
        self._diagnostics = sink

    @property
    def own_diagnostics(self) -> DiagnosticsSink | None:
        """The sink given to this store, or None when it follows the process default."""
        return self._diagnostics

    # -- registration --------------------------------------------------------

    def add_hook(self, hook_key: HookKey, fn: HookHandler) -> None:
        """Append *fn* under *hook_key*."""
        self._append(hook_key, [fn], once=False)

    def add_mutex_hook(self, hook_key: HookKey, fn: HookHandler) -> None:
        """Make *fn* the only handler under *hook_key*."""
        ensure_callable(hook_key, [fn])
        self._hooks[hook_key] = [HookEntry(fn)]

    def add_hooks(self, hook_key: HookKey, fns: Iterable[HookHandler]) -> None:
        """Append every handler in *fns*; nothing is added if any is not callable."""
        self._append(hook_key, list(fns), once=False)

    def add_once_hook(self, hook_key: HookKey, fn: HookHandler) -> None:
        """Append *fn* to run on the next execution of *hook_key* only."""
        self._append(hook_key, [fn], once=True)

    def add_once_hooks(self, hook_key: HookKey, fns: Iterable[HookHandler]) -> None:
        self._append(hook_key, list(fns), once=True)

    def _append(self, hook_key: HookKey, fns: list[HookHandler], once: bool) -> None:
        ensure_callable(hook_key, fns)
        if not fns:
            return
        self._hooks.setdefault(hook_key, []).extend(HookEntry(fn, once=once) for fn in fns)

    # -- removal -------------------------------------------------------------

    def delete_hook(self, hook_key: HookKey, fn: HookHandler) -> None:
        """Remove the first entry whose handler is *fn*; no-op if absent."""
        entries = self._hooks.get(hook_key)
        if not entries:
            return
        for index, entry in enumerate(entries):
            if _same_handler(entry.handler, fn):
                del entries[index]
                break
        if not entries:
            del self._hooks[hook_key]

    def delete_hooks(self, hook_key: HookKey) -> None:
        self._hooks.pop(hook_key, None)

    def clear_hooks(self) -> None:
        self._hooks = {}

    # -- lookup --------------------------------------------------------------

    def get_hook(self, hook_key: HookKey, index: int) -> HookHandler | None:
        """Return the handler stored at *index* under *hook_key*, or None."""
        entries = self._hooks.get(hook_key, [])
        if 0 <= index < len(entries):
            return entries[index].handler
        return None

    def get_hooks(self, hook_key: HookKey) -> tuple[HookHandler, ...]:
        return tuple(entry.handler for entry in self._hooks.get(hook_key, []))

    def has_hooks(self, hook_key: HookKey) -> bool:
        return bool(self._hooks.get(hook_key))

    def hook_keys(self) -> list[HookKey]:
        return list(self._hooks)

    def __contains__(self, hook_key: object) -> bool:
        return hook_key in self._hooks

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._hooks.values())

    # -- execution -----------------------------------------------------------

    def exec_hook(self, hook_key: HookKey, index: int, /, *args: Any, **kwargs: Any) -> None:
        """Run only the entry at *index*; no-op if the key or index is missing."""
        entries = self._hooks.get(hook_key)
        if not entries or not 0 <= index < len(entries):
            return
        self._run(hook_key, entries[index], args, kwargs)

    def exec_hooks(self, hook_key: HookKey, /, *args: Any, **kwargs: Any) -> None:
        """Run every entry under *hook_key* as it stood when the call began.

        Entries added by a handler wait for the next execution; entries a
        handler deletes still run in this one.
        """
        entries = self._hooks.get(hook_key)
        if not entries:
            return
        for entry in list(entries):
            self._run(hook_key, entry, args, kwargs)

    def _run(self, hook_key: HookKey, entry: HookEntry, args: tuple, kwargs: dict[str, Any]) -> None:
        if entry.consumed:
            return
        if entry.once:
            entry.consumed = True
        try:
            entry.handler(self._owner, *args, **kwargs)
        except Exception as exc:
            self._report(hook_key, entry.handler, exc)
        finally:
            if entry.once:
                self._discard(hook_key, entry)

    def _discard(self, hook_key: HookKey, entry: HookEntry) -> None:
        entries = self._hooks.get(hook_key)
        if not entries:
            return
        for index, candidate in enumerate(entries):
            if candidate is entry:
                del entries[index]
                break
        if not entries:
            del self._hooks[hook_key]

    def _report(self, hook_key: HookKey, handler: HookHandler, exc: Exception) -> None:
        error = HookExecutionException(hook_key, handler, exc)
        sink = self.diagnostics
        try:
            sink(hook_key, handler, error)
        except Exception:
            logger.exception("Diagnostics sink %r failed while reporting hook key '%s'", sink, hook_key)


def _same_handler(stored: HookHandler, fn: HookHandler) -> bool:
    """Identity match; bound methods match when bound to the same object."""
    if stored is fn:
        return True
    if inspect.ismethod(stored) and inspect.ismethod(fn):
        return stored.__self__ is fn.__self__ and stored.__func__ is fn.__func__
    return False
