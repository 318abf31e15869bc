from __future__ import annotations

import threading
from typing import Protocol


class Context(Protocol):
    """What a scope callback gets to look at when an instance is activated."""

    @property
    def kernel(self) -> object: ...


class StandardScopeCallbacks:
    """Built-in scope callbacks.

    A scope callback maps an activation context to the object an instance is
    cached against. ``None`` means the instance is never reused.
    """

    @staticmethod
    def transient(ctx: Context) -> None:
        return None

    @staticmethod
    def singleton(ctx: Context) -> object:
        return ctx.kernel

    @staticmethod
    def thread(ctx: Context) -> object:
        return threading.current_thread()
