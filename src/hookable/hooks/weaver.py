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
"""Hook weaver — wraps an instance's hookable methods with hook dispatch."""

from __future__ import annotations

import functools
import inspect
import logging
from typing import Any

from hookable.hooks.resolver import hookable_method_names, resolve_hook_keys
from hookable.hooks.store import HookStore
from hookable.hooks.types import HookKey

logger = logging.getLogger(__name__)

_WOVEN_ATTR = "__hookable_woven__"


def weave_hooks(instance: Any, store: HookStore) -> list[str]:
    """Install hook-dispatching wrappers for the methods of *instance*.

    Only names declared in some interception table along the MRO are
    considered. A method whose before and after keys both resolve to
    nothing is left untouched, as are properties and other non-callable
    attributes. Wrappers are set on the instance, so ``super()`` calls made
    inside the methods reach the class functions and never dispatch twice.

    Returns the names that were wrapped.
    """
    woven: list[str] = []
    for name in hookable_method_names(instance):
        before_key, after_key = resolve_hook_keys(instance, name)
        if before_key is None and after_key is None:
            continue

        static = inspect.getattr_static(instance, name, None)
        if static is None or isinstance(static, property):
            continue
        attr = getattr(instance, name)
        if not callable(attr):
            continue

        setattr(instance, name, _build_wrapper(attr, store, before_key, after_key))
        woven.append(name)

    if woven:
        logger.debug("Wove hooks into %s: %s", type(instance).__qualname__, ", ".join(woven))
    return woven


def unweave_hooks(instance: Any) -> list[str]:
    """Remove every wrapper :func:`weave_hooks` installed on *instance*."""
    removed = [name for name, value in vars(instance).items() if is_woven(value)]
    for name in removed:
        delattr(instance, name)
    return removed


def is_woven(method: Any) -> bool:
    """Whether *method* is a hook-dispatching wrapper."""
    return getattr(method, _WOVEN_ATTR, None) is not None


def _build_wrapper(
    original: Any,
    store: HookStore,
    before_key: HookKey | None,
    after_key: HookKey | None,
) -> Any:
    """Build the before -> body -> after wrapper for one bound method.

    Exceptions from the method body propagate unchanged and skip the after
    phase; handler exceptions never escape the store.
    """

    @functools.wraps(original)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if before_key is not None:
            store.exec_hooks(before_key, *args, **kwargs)

        result = original(*args, **kwargs)

        if after_key is not None:
            store.exec_hooks(after_key, *args, **kwargs)

        return result

    setattr(wrapper, _WOVEN_ATTR, (before_key, after_key))
    return wrapper
