from __future__ import annotations

import typing
from typing import Any, get_args, get_origin


class Inject:
    """Marks a member for injection.

    Use the class (or an instance) as ``Annotated`` metadata:

      class Service:
          repo: Annotated[Repo, Inject]
    """


class Obsolete:
    """Marks a member as obsolete; it should not be injected."""

    def __init__(self, reason: str = "") -> None:
        self.reason = reason


def has_marker(annotation: Any, marker: type) -> bool:
    """Return True when 'annotation' is ``Annotated[...]`` carrying 'marker' (class or instance)."""
    if get_origin(annotation) is not typing.Annotated:
        return False

    # first arg is the annotated type itself
    for meta in get_args(annotation)[1:]:
        if meta is marker or isinstance(meta, marker):
            return True

    return False
