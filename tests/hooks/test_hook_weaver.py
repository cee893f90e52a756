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
"""Tests for the hook weaver — construction-time method wrapping."""

from __future__ import annotations

import pytest

from hookable.hooks.decorators import register_hook, register_hook_on_class
from hookable.hooks.hookable import Hookable
from hookable.hooks.store import HookStore
from hookable.hooks.types import Phase
from hookable.hooks.weaver import is_woven, unweave_hooks, weave_hooks


class Service(Hookable):
    def __init__(self) -> None:
        self.log: list[str] = []

    @register_hook("beforeRun")
    @register_hook("afterRun", Phase.AFTER)
    def run(self, value, *, scale=1):
        self.log.append(f"run:{value}")
        return value * scale

    @register_hook("beforeFail")
    @register_hook("afterFail", Phase.AFTER)
    def fail(self):
        self.log.append("fail")
        raise RuntimeError("method failed")

    @register_hook("beforeStart")
    def start(self):
        self.log.append("start")

    def stop(self):
        self.log.append("stop")


class TestWrapping:
    def test_only_hooked_methods_are_wrapped(self):
        service = Service()

        assert is_woven(service.run)
        assert is_woven(service.start)
        assert not is_woven(service.stop)
        assert not is_woven(service.add_hook)

    def test_wrapper_keeps_method_metadata(self):
        service = Service()

        assert service.run.__name__ == "run"
        assert service.run.__wrapped__ == Service.run.__get__(service)

    def test_wrappers_live_on_the_instance(self):
        service = Service()

        assert "run" in vars(service)
        assert not is_woven(Service.run)

    def test_before_body_after_order_with_arguments(self):
        service = Service()
        service.add_hook("beforeRun", lambda s, value, **kw: s.log.append(f"before:{value}:{kw}"))
        service.add_hook("afterRun", lambda s, value, **kw: s.log.append(f"after:{value}:{kw}"))

        result = service.run(3, scale=2)

        assert result == 6
        assert service.log == ["before:3:{'scale': 2}", "run:3", "after:3:{'scale': 2}"]

    def test_hooks_cannot_change_return_value(self):
        service = Service()
        service.add_hook("afterRun", lambda s, value, **kw: "replaced")

        assert service.run(5) == 5

    def test_only_before_phase_declared(self):
        service = Service()
        service.add_hook("beforeStart", lambda s: s.log.append("before"))

        service.start()

        assert service.log == ["before", "start"]

    def test_hooks_added_after_construction_are_seen(self):
        service = Service()
        service.run(1)
        service.add_hook("beforeRun", lambda s, value: s.log.append("late"))

        service.run(2)

        assert service.log == ["run:1", "late", "run:2"]

    def test_method_exception_propagates_and_skips_after(self):
        service = Service()
        service.add_hook("beforeFail", lambda s: s.log.append("before"))
        service.add_hook("afterFail", lambda s: s.log.append("after"))

        with pytest.raises(RuntimeError, match="method failed"):
            service.fail()

        assert service.log == ["before", "fail"]


class TestNonMethods:
    def test_properties_are_never_wrapped(self):
        class Gauge(Hookable):
            @property
            def level(self):
                return self._level

        register_hook_on_class(Gauge, "level", "beforeLevel")
        gauge = Gauge()
        gauge._level = 7

        assert "level" not in vars(gauge)
        assert gauge.level == 7

    def test_non_callable_class_attribute_is_left_alone(self):
        class Config(Hookable):
            timeout = 30

        register_hook_on_class(Config, "timeout", "beforeTimeout")

        assert Config().timeout == 30

    def test_missing_attribute_is_skipped(self):
        class Widget(Hookable):
            pass

        register_hook_on_class(Widget, "mount", "beforeMount")

        assert weave_hooks(Widget(), HookStore(None)) == []


class TestClassAndStaticMethods:
    def test_classmethod_and_staticmethod_dispatch(self):
        calls = []

        class Factory(Hookable):
            @register_hook("beforeBuild")
            @classmethod
            def build(cls, name):
                calls.append(f"build:{cls.__name__}:{name}")

            @register_hook("beforeCheck")
            @staticmethod
            def check(value):
                calls.append(f"check:{value}")
                return value

        factory = Factory()
        factory.add_hook("beforeBuild", lambda f, name: calls.append(f"hook:{name}"))
        factory.add_hook("beforeCheck", lambda f, value: calls.append(f"hook:{value}"))

        factory.build("x")
        assert factory.check(4) == 4

        assert calls == ["hook:x", "build:Factory:x", "hook:4", "check:4"]


class TestWeaveFunctions:
    def test_weave_plain_object_with_explicit_store(self):
        class Job:
            def __init__(self):
                self.log = []

            def run(self):
                self.log.append("run")

        register_hook_on_class(Job, "run", "beforeJob")
        job = Job()
        store = HookStore(job)
        store.add_hook("beforeJob", lambda j: j.log.append("hook"))

        assert weave_hooks(job, store) == ["run"]
        job.run()

        assert job.log == ["hook", "run"]

    def test_unweave_restores_class_methods(self):
        service = Service()
        service.add_hook("beforeStart", lambda s: s.log.append("before"))

        removed = unweave_hooks(service)
        service.start()

        assert sorted(removed) == ["fail", "run", "start"]
        assert service.log == ["start"]
        assert not is_woven(service.start)

    def test_is_woven_false_for_plain_callables(self):
        assert not is_woven(len)
        assert not is_woven(None)
