from datetime import timedelta

import pytest

from bindsettings import Inject, Obsolete, Settings, StandardScopeCallbacks


def test_defaults_when_unset():
    s = Settings()
    assert s.inject_attribute is Inject
    assert s.obsolete_attribute is Obsolete
    assert s.cache_pruning_interval == timedelta(seconds=30)
    assert s.default_scope_callback is StandardScopeCallbacks.transient
    assert s.load_extensions is True
    assert tuple(s.extension_search_patterns) == ("bindsettings.extensions.*", "bindsettings.web*")
    assert s.use_reflection_based_injection is False
    assert s.inject_non_public is False
    assert s.inject_parent_private_properties is False
    assert s.activation_cache_disabled is False
    assert s.allow_null_injection is False


def test_reading_defaults_stores_nothing():
    s = Settings()
    _ = s.load_extensions
    _ = s.extension_search_patterns
    assert len(s) == 0


def test_reflection_based_injection_on_without_codegen():
    s = Settings(codegen_available=False)
    assert s.use_reflection_based_injection is True
    assert "use_reflection_based_injection" in s


def test_reflection_based_injection_can_still_be_overridden():
    s = Settings(codegen_available=False)
    s.use_reflection_based_injection = False
    assert s.use_reflection_based_injection is False


@pytest.mark.parametrize(
    "name",
    [
        "load_extensions",
        "use_reflection_based_injection",
        "inject_non_public",
        "inject_parent_private_properties",
        "activation_cache_disabled",
        "allow_null_injection",
    ],
)
def test_bool_settings_round_trip(name):
    s = Settings()
    current = getattr(s, name)
    setattr(s, name, not current)
    assert getattr(s, name) is (not current)
    assert s.get(name, current) is (not current)


def test_marker_settings_return_set_type():
    class Autowired: ...

    class Deprecated: ...

    s = Settings()
    s.inject_attribute = Autowired
    s.obsolete_attribute = Deprecated
    assert s.inject_attribute is Autowired
    assert s.obsolete_attribute is Deprecated


def test_cache_pruning_interval_round_trip():
    s = Settings()
    s.cache_pruning_interval = timedelta(minutes=2)
    assert s.cache_pruning_interval == timedelta(minutes=2)


def test_default_scope_callback_returns_same_callable():
    s = Settings()

    def per_request(ctx):
        return "request"

    s.default_scope_callback = per_request
    assert s.default_scope_callback is per_request


def test_default_scope_callback_accepts_callable_object():
    class PerKernel:
        def __call__(self, ctx):
            return ctx.kernel

    s = Settings()
    cb = PerKernel()
    s.default_scope_callback = cb
    assert s.default_scope_callback is cb


def test_extension_search_patterns_returns_same_list():
    s = Settings()
    patterns = ["myapp.plugins.*"]
    s.extension_search_patterns = patterns
    assert s.extension_search_patterns is patterns


def test_named_setting_uses_key_named_after_property():
    s = Settings()
    s.set("allow_null_injection", True)
    assert s.allow_null_injection is True
