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
"""Hookable — base class giving instances a hook store and woven methods."""

from __future__ import annotations

import copy
from collections.abc import Iterable
from typing import Any

from hookable.hooks.diagnostics import DiagnosticsSink
from hookable.hooks.resolver import resolve_hook_key
from hookable.hooks.store import HookStore
from hookable.hooks.types import HookHandler, HookKey, Phase
from hookable.hooks.weaver import is_woven, weave_hooks


class Hookable:
    """Base class for hierarchies that expose hook points.

    Subclasses declare hook points with :func:`register_hook` (or
    :func:`register_hook_on_class`); each instance gets its own
    :class:`HookStore` and, at construction, wrappers around every method
    that resolves to a hook key::

        class Widget(Hookable):
            @register_hook("beforeMount")
            @register_hook("afterMount", Phase.AFTER)
            def mount(self):
                ...

        widget = Widget()
        widget.add_hook("beforeMount", lambda w: print("about to mount", w))
        widget.mount()

    Store and wrappers are installed in ``__new__``, so they exist whether
    or not subclass ``__init__`` methods call ``super().__init__()``.
    Hook points must be declared before instances are created.
    """

    _hook_store: HookStore

    def __new__(cls, *args: Any, **kwargs: Any) -> Any:
        instance = super().__new__(cls)
        instance._hook_store = HookStore(instance)
        weave_hooks(instance, instance._hook_store)
        return instance

    # Copies and unpickled instances get their own store and wrappers; the
    # hook lists themselves are never carried over.

    def _plain_state(self) -> dict[str, Any]:
        return {name: value for name, value in vars(self).items() if name != "_hook_store" and not is_woven(value)}

    def __copy__(self) -> Any:
        clone = type(self).__new__(type(self))
        clone.__dict__.update(self._plain_state())
        clone._hook_store.diagnostics = self._hook_store.own_diagnostics
        return clone

    def __deepcopy__(self, memo: dict[int, Any]) -> Any:
        clone = type(self).__new__(type(self))
        memo[id(self)] = clone
        for name, value in self._plain_state().items():
            clone.__dict__[name] = copy.deepcopy(value, memo)
        clone._hook_store.diagnostics = self._hook_store.own_diagnostics
        return clone

    def __getstate__(self) -> dict[str, Any]:
        return self._plain_state()

    def __setstate__(self, state: dict[str, Any]) -> None:
        self.__dict__.update(state)
        if "_hook_store" not in vars(self):
            self._hook_store = HookStore(self)
            weave_hooks(self, self._hook_store)

    @property
    def hook_store(self) -> HookStore:
        return self._hook_store

    def set_hook_diagnostics(self, sink: DiagnosticsSink | None) -> None:
        """Report this instance's handler failures to *sink* (None: process default)."""
        self._hook_store.diagnostics = sink

    def resolve_hook_key(self, method_name: str, phase: Phase | str = Phase.BEFORE) -> HookKey | None:
        return resolve_hook_key(self, method_name, phase)

    def add_hook(self, hook_key: HookKey, fn: HookHandler) -> None:
        self._hook_store.add_hook(hook_key, fn)

    def add_mutex_hook(self, hook_key: HookKey, fn: HookHandler) -> None:
        self._hook_store.add_mutex_hook(hook_key, fn)

    def add_hooks(self, hook_key: HookKey, fns: Iterable[HookHandler]) -> None:
        self._hook_store.add_hooks(hook_key, fns)

    def add_once_hook(self, hook_key: HookKey, fn: HookHandler) -> None:
        self._hook_store.add_once_hook(hook_key, fn)

    def add_once_hooks(self, hook_key: HookKey, fns: Iterable[HookHandler]) -> None:
        self._hook_store.add_once_hooks(hook_key, fns)

    def get_hook(self, hook_key: HookKey, index: int) -> HookHandler | None:
        return self._hook_store.get_hook(hook_key, index)

    def get_hooks(self, hook_key: HookKey) -> tuple[HookHandler, ...]:
        return self._hook_store.get_hooks(hook_key)

    def delete_hook(self, hook_key: HookKey, fn: HookHandler) -> None:
        self._hook_store.delete_hook(hook_key, fn)

    def delete_hooks(self, hook_key: HookKey) -> None:
        self._hook_store.delete_hooks(hook_key)

    def clear_hooks(self) -> None:
        self._hook_store.clear_hooks()

    def exec_hook(self, hook_key: HookKey, index: int, /, *args: Any, **kwargs: Any) -> None:
        self._hook_store.exec_hook(hook_key, index, *args, **kwargs)

    def exec_hooks(self, hook_key: HookKey, /, *args: Any, **kwargs: Any) -> None:
        self._hook_store.exec_hooks(hook_key, *args, **kwargs)
