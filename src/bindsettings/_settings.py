from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from datetime import timedelta
from typing import TYPE_CHECKING, Any, TypeVar, overload

from ._markers import Inject, Obsolete
from ._scope import StandardScopeCallbacks


logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import KeysView, Mapping, Sequence

    from ._scope import Context

    T = TypeVar("T")

    ScopeCallback = Callable[[Context], object | None]

_MISSING = object()

DEFAULT_CACHE_PRUNING_INTERVAL = timedelta(seconds=30)
DEFAULT_EXTENSION_SEARCH_PATTERNS = ("bindsettings.extensions.*", "bindsettings.web*")


class SettingTypeError(TypeError):
    """A stored setting does not have the type the caller asked for."""

    def __init__(self, key: str, expected: type | tuple[type, ...], actual: type) -> None:
        self.key = key
        self.expected = expected
        self.actual = actual
        msg = f"Setting {key!r} holds a {actual.__name__}, expected {_type_names(expected)}"
        super().__init__(msg)


class Settings:
    """Configuration options for an injection kernel.

    Values live in a plain ``str -> object`` map; the named properties below are
    typed views over it. Unset keys always resolve to the caller's default.

    Pass ``codegen_available=False`` on platforms where injectors cannot be
    generated at runtime; reflection-based injection is then switched on.
    """

    def __init__(self, values: Mapping[str, Any] | None = None, *, codegen_available: bool = True) -> None:
        self._values: dict[str, Any] = dict(values) if values is not None else {}
        self._lock = threading.RLock()

        if not codegen_available:
            self.use_reflection_based_injection = True

    @overload
    def get(self, key: str, default: T, expected_type: None = ...) -> T: ...

    @overload
    def get(self, key: str, default: Any, expected_type: type[T]) -> T: ...

    @overload
    def get(self, key: str, default: Any, expected_type: tuple[type, ...]) -> Any: ...

    def get(self, key: str, default: Any, expected_type: type | tuple[type, ...] | None = None) -> Any:
        """Return the value stored for 'key', or 'default' if there is none.

        The stored value must be an instance of 'expected_type' or, when that is
        omitted, of ``type(default)``. A ``None`` default without 'expected_type'
        skips the check. Mismatches raise `SettingTypeError`.
        """
        with self._lock:
            value = self._values.get(key, _MISSING)

        if value is _MISSING:
            return default

        if expected_type is None and default is not None:
            expected_type = type(default)

        if expected_type is not None and not isinstance(value, expected_type):
            raise SettingTypeError(key, expected_type, type(value))

        return value

    def set(self, key: str, value: object) -> None:
        """Store 'value' under 'key', replacing any previous value."""
        with self._lock:
            self._values[key] = value
        logger.debug("Setting %r set to %r", key, value)

    def clone(self) -> Settings:
        """Return a snapshot copy; the values themselves are shared, not copied."""
        with self._lock:
            cloned = type(self)(self._values)
        logger.debug("Cloned settings with %d value(s)", len(cloned))
        return cloned

    def keys(self) -> KeysView[str]:
        with self._lock:
            return dict(self._values).keys()

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({sorted(self._values)!r})"

    @property
    def inject_attribute(self) -> type:
        """Marker type that flags a member for injection."""
        return self.get("inject_attribute", Inject, type)

    @inject_attribute.setter
    def inject_attribute(self, value: type) -> None:
        self.set("inject_attribute", value)

    @property
    def obsolete_attribute(self) -> type:
        """Marker type that flags a member as obsolete, so it is not injected."""
        return self.get("obsolete_attribute", Obsolete, type)

    @obsolete_attribute.setter
    def obsolete_attribute(self, value: type) -> None:
        self.set("obsolete_attribute", value)

    @property
    def cache_pruning_interval(self) -> timedelta:
        """How often the activation cache is pruned of collected scopes."""
        return self.get("cache_pruning_interval", DEFAULT_CACHE_PRUNING_INTERVAL, timedelta)

    @cache_pruning_interval.setter
    def cache_pruning_interval(self, value: timedelta) -> None:
        self.set("cache_pruning_interval", value)

    @property
    def default_scope_callback(self) -> ScopeCallback:
        """Scope used by bindings that do not pick one. Transient by default."""
        return self.get("default_scope_callback", StandardScopeCallbacks.transient, Callable)

    @default_scope_callback.setter
    def default_scope_callback(self, value: ScopeCallback) -> None:
        self.set("default_scope_callback", value)

    @property
    def load_extensions(self) -> bool:
        """Whether the kernel loads extensions at startup."""
        return self.get("load_extensions", True)

    @load_extensions.setter
    def load_extensions(self, value: bool) -> None:
        self.set("load_extensions", value)

    @property
    def extension_search_patterns(self) -> Sequence[str]:
        """Glob patterns of the modules searched for extensions."""
        return self.get("extension_search_patterns", DEFAULT_EXTENSION_SEARCH_PATTERNS, (list, tuple))

    @extension_search_patterns.setter
    def extension_search_patterns(self, value: Sequence[str]) -> None:
        self.set("extension_search_patterns", value)

    @property
    def use_reflection_based_injection(self) -> bool:
        """Whether to inject through reflection instead of generated injectors."""
        return self.get("use_reflection_based_injection", False)

    @use_reflection_based_injection.setter
    def use_reflection_based_injection(self, value: bool) -> None:
        self.set("use_reflection_based_injection", value)

    @property
    def inject_non_public(self) -> bool:
        """Whether underscore-prefixed members are injected too."""
        return self.get("inject_non_public", False)

    @inject_non_public.setter
    def inject_non_public(self, value: bool) -> None:
        self.set("inject_non_public", value)

    @property
    def inject_parent_private_properties(self) -> bool:
        """Whether private properties of base classes are injected.

        This makes activation slower; prefer constructor injection.
        """
        return self.get("inject_parent_private_properties", False)

    @inject_parent_private_properties.setter
    def inject_parent_private_properties(self, value: bool) -> None:
        self.set("inject_parent_private_properties", value)

    @property
    def activation_cache_disabled(self) -> bool:
        """Whether the activation cache is off.

        Uses less memory, but an instance reachable through two bindings may be
        activated (and deactivated) more than once.
        """
        return self.get("activation_cache_disabled", False)

    @activation_cache_disabled.setter
    def activation_cache_disabled(self, value: bool) -> None:
        self.set("activation_cache_disabled", value)

    @property
    def allow_null_injection(self) -> bool:
        """Whether ``None`` is a valid injected value instead of an activation error."""
        return self.get("allow_null_injection", False)

    @allow_null_injection.setter
    def allow_null_injection(self, value: bool) -> None:
        self.set("allow_null_injection", value)


def _type_names(expected: type | tuple[type, ...]) -> str:
    if isinstance(expected, tuple):
        return " | ".join(t.__name__ for t in expected)
    return expected.__name__
