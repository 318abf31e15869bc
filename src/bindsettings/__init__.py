"""Typed configuration options for a dependency injection kernel.

This package provides the settings object an injection kernel is configured
with: a string-keyed store of option values with typed accessors, defaults for
unset options, and snapshot cloning.

Exports:
- `Settings`: The settings store and its named options.
- `SettingTypeError`: Raised when a stored value does not have the requested type.
- `StandardScopeCallbacks`: Built-in scope callbacks (transient, singleton, thread).
- `Context`: Protocol of the activation context handed to scope callbacks.
- `Inject` / `Obsolete`: Default marker types for injectable and obsolete members.
- `has_marker`: Check an ``Annotated`` annotation for a marker.
"""

from ._markers import Inject, Obsolete, has_marker
from ._scope import Context, StandardScopeCallbacks
from ._settings import SettingTypeError, Settings


__all__ = [
    "Context",
    "Inject",
    "Obsolete",
    "SettingTypeError",
    "Settings",
    "StandardScopeCallbacks",
    "has_marker",
]
