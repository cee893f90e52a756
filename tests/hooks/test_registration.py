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
"""Tests for hook registration and interception tables."""

from __future__ import annotations

from enum import StrEnum

import pytest

from hookable.hooks.decorators import HookDeclaration, register_hook, register_hook_on_class
from hookable.hooks.hookable import Hookable
from hookable.hooks.table import InterceptionRegistry, get_interception_table
from hookable.hooks.types import Phase
from hookable.kernel.exceptions import InvalidArgumentException


class TestRegisterHookDecorator:
    def test_writes_own_table_at_class_creation(self):
        class Widget(Hookable):
            @register_hook("beforeMount")
            def mount(self):
                pass

        table = get_interception_table(Widget)
        assert table is not None
        assert table.owner is Widget
        assert table.get("mount", Phase.BEFORE) == "beforeMount"
        assert table.get("mount", Phase.AFTER) is None

    def test_stacked_phases_coexist(self):
        class Widget(Hookable):
            @register_hook("beforeMount")
            @register_hook("afterMount", Phase.AFTER)
            def mount(self):
                pass

        table = get_interception_table(Widget)
        assert table.entries["mount"] == {Phase.BEFORE: "beforeMount", Phase.AFTER: "afterMount"}

    def test_phase_accepts_string_value(self):
        class Widget(Hookable):
            @register_hook("afterMount", "after")
            def mount(self):
                pass

        assert get_interception_table(Widget).get("mount", Phase.AFTER) == "afterMount"

    def test_outermost_decorator_wins_for_same_phase(self):
        class Widget(Hookable):
            @register_hook("outer")
            @register_hook("inner")
            def mount(self):
                pass

        assert get_interception_table(Widget).get("mount", Phase.BEFORE) == "outer"

    def test_marks_classmethod_and_staticmethod(self):
        class Widget(Hookable):
            @register_hook("beforeBuild")
            @classmethod
            def build(cls):
                pass

            @register_hook("beforeCheck")
            @staticmethod
            def check():
                pass

        table = get_interception_table(Widget)
        assert table.get("build", Phase.BEFORE) == "beforeBuild"
        assert table.get("check", Phase.BEFORE) == "beforeCheck"

    def test_subclass_without_declarations_has_no_own_table(self):
        class Base(Hookable):
            @register_hook("beforeMount")
            def mount(self):
                pass

        class Child(Base):
            def mount(self):
                super().mount()

        assert get_interception_table(Child) is None
        assert get_interception_table(Base) is not None

    def test_subclass_gets_distinct_table(self):
        class Base(Hookable):
            @register_hook("beforeMount")
            def mount(self):
                pass

        class Child(Base):
            @register_hook("beforeRender")
            def render(self):
                pass

        base_table = get_interception_table(Base)
        child_table = get_interception_table(Child)
        assert child_table is not base_table
        assert child_table.method_names() == ["render"]
        assert base_table.method_names() == ["mount"]

    def test_declarations_on_a_mixin_are_registered(self):
        class MountMixin:
            @register_hook("beforeMount")
            def mount(self):
                self.value += "mount>"

        class Widget(MountMixin, Hookable):
            def __init__(self):
                self.value = ""

        widget = Widget()
        widget.add_hook("beforeMount", lambda instance: setattr(instance, "value", instance.value + "before>"))
        widget.mount()

        assert get_interception_table(MountMixin).get("mount", Phase.BEFORE) == "beforeMount"
        assert widget.value == "before>mount>"

    def test_class_attribute_is_the_plain_function(self):
        class Widget(Hookable):
            @register_hook("beforeMount")
            @register_hook("afterMount", Phase.AFTER)
            def mount(self):
                """Mount the widget."""

        assert not isinstance(Widget.__dict__["mount"], HookDeclaration)
        assert Widget.mount.__doc__ == "Mount the widget."

    def test_declaration_outside_a_class_stays_callable(self):
        @register_hook("beforeMount")
        def mount(value):
            return value * 2

        assert mount(21) == 42
        assert mount.__name__ == "mount"

    def test_bad_phase_rejected(self):
        with pytest.raises(InvalidArgumentException):
            register_hook("beforeMount", "during")

    def test_empty_key_rejected(self):
        with pytest.raises(InvalidArgumentException):
            register_hook("")


class TestRegisterHookOnClass:
    def test_retrofits_existing_class(self):
        class Widget(Hookable):
            def mount(self):
                pass

        register_hook_on_class(Widget, "mount", "beforeMount")
        register_hook_on_class(Widget, "mount", "afterMount", Phase.AFTER)

        table = get_interception_table(Widget)
        assert table.entries["mount"] == {Phase.BEFORE: "beforeMount", Phase.AFTER: "afterMount"}

    def test_works_on_plain_classes(self):
        class Plain:
            def run(self):
                pass

        register_hook_on_class(Plain, "run", "beforeRun")

        assert get_interception_table(Plain).get("run", Phase.BEFORE) == "beforeRun"

    def test_last_registration_wins(self):
        class Widget(Hookable):
            pass

        register_hook_on_class(Widget, "mount", "first")
        register_hook_on_class(Widget, "mount", "second")

        assert get_interception_table(Widget).get("mount", Phase.BEFORE) == "second"

    def test_registering_on_subclass_leaves_ancestor_table_alone(self):
        class Base(Hookable):
            pass

        class Child(Base):
            pass

        register_hook_on_class(Base, "mount", "beforeMount")
        register_hook_on_class(Child, "mount", "beforeChildMount")

        assert get_interception_table(Base).get("mount", Phase.BEFORE) == "beforeMount"
        assert get_interception_table(Child).get("mount", Phase.BEFORE) == "beforeChildMount"

    @pytest.mark.parametrize(
        ("target", "method_name", "hook_key"),
        [
            (object(), "mount", "beforeMount"),
            (Hookable, "", "beforeMount"),
            (Hookable, "mount", ""),
            (Hookable, "mount", None),
        ],
    )
    def test_invalid_arguments(self, target, method_name, hook_key):
        with pytest.raises(InvalidArgumentException):
            register_hook_on_class(target, method_name, hook_key)

        assert get_interception_table(Hookable) is None


class TestInterceptionRegistry:
    def test_visible_table_prefers_own(self):
        registry = InterceptionRegistry()

        class Base:
            pass

        class Child(Base):
            pass

        base_table = registry.ensure_table(Base)
        assert registry.visible_table(Child) is base_table
        assert registry.own_table(Child) is None

        child_table = registry.ensure_table(Child)
        assert registry.visible_table(Child) is child_table

    def test_visible_table_absent(self):
        registry = InterceptionRegistry()

        class Lonely:
            pass

        assert registry.visible_table(Lonely) is None

    def test_ensure_table_is_idempotent(self):
        registry = InterceptionRegistry()

        class Widget:
            pass

        assert registry.ensure_table(Widget) is registry.ensure_table(Widget)


class TestPhase:
    def test_is_a_string_enum(self):
        assert issubclass(Phase, StrEnum)
        assert Phase.BEFORE == "before"
        assert f"{Phase.AFTER}" == "after"

    def test_coerce_accepts_members_and_values(self):
        assert Phase.coerce(Phase.AFTER) is Phase.AFTER
        assert Phase.coerce("before") is Phase.BEFORE

    def test_coerce_rejects_unknown_values(self):
        with pytest.raises(InvalidArgumentException):
            Phase.coerce("during")
