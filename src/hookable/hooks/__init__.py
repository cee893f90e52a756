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
"""Hook points for class hierarchies.

Classes declare which hook key fires before or after which method; each
instance keeps its own ordered handlers per hook key.
"""

from hookable.hooks.decorators import register_hook, register_hook_on_class
from hookable.hooks.diagnostics import (
    DiagnosticsProperties,
    DiagnosticsSink,
    LoggingDiagnostics,
    get_default_diagnostics,
    set_default_diagnostics,
)
from hookable.hooks.hookable import Hookable
from hookable.hooks.resolver import resolve_hook_key, resolve_hook_keys
from hookable.hooks.store import HookStore
from hookable.hooks.table import InterceptionTable, get_interception_table
from hookable.hooks.types import HookEntry, HookHandler, HookKey, Phase
from hookable.hooks.weaver import is_woven, unweave_hooks, weave_hooks

__all__ = [
    "DiagnosticsProperties",
    "DiagnosticsSink",
    "HookEntry",
    "HookHandler",
    "HookKey",
    "HookStore",
    "Hookable",
    "InterceptionTable",
    "LoggingDiagnostics",
    "Phase",
    "get_default_diagnostics",
    "get_interception_table",
    "is_woven",
    "register_hook",
    "register_hook_on_class",
    "resolve_hook_key",
    "resolve_hook_keys",
    "set_default_diagnostics",
    "unweave_hooks",
    "weave_hooks",
]
