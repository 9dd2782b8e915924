"""Publish-once slot for implementor tables.

Mirrors the handoff a fragment performs when it loads: if the page has
already installed its ``register_implementors`` hook the table goes straight
to it, otherwise the table waits in ``pending_implementors`` until the hook
arrives.
"""

from __future__ import annotations

from collections.abc import Callable

from rbglue.core.errors import AlreadyPublishedError
from rbglue.implementors.model import ImplementorTable

RegisterHook = Callable[[ImplementorTable], None]


class ImplementorSlot:
    """Single-assignment handoff between a fragment and its consumer.

    Example::

        slot = ImplementorSlot()
        slot.publish(table)            # no hook yet: buffered in slot.pending
        slot.install_hook(show_table)  # delivered now, buffer cleared
    """

    def __init__(self, hook: RegisterHook | None = None):
        self._hook = hook
        self._pending: ImplementorTable | None = None
        self._published = False
        self._delivered = False

    @property
    def hook(self) -> RegisterHook | None:
        return self._hook

    @property
    def pending(self) -> ImplementorTable | None:
        """Table waiting for a hook, if any."""
        return self._pending

    @property
    def published(self) -> bool:
        return self._published

    @property
    def delivered(self) -> bool:
        """True once a hook has received the table."""
        return self._delivered

    def publish(self, table: ImplementorTable) -> None:
        """Hand ``table`` to the hook, or buffer it until one is installed.

        Raises:
            AlreadyPublishedError: If a table was already published.
        """
        if self._published:
            raise AlreadyPublishedError("implementor table already published")
        self._published = True

        if self._hook is not None:
            self._deliver(self._hook, table)
        else:
            self._pending = table

    def install_hook(self, hook: RegisterHook) -> None:
        """Install the consumer hook, delivering any buffered table."""
        self._hook = hook
        if self._pending is not None:
            table, self._pending = self._pending, None
            self._deliver(hook, table)

    def _deliver(self, hook: RegisterHook, table: ImplementorTable) -> None:
        self._delivered = True
        hook(table)


__all__ = ["RegisterHook", "ImplementorSlot"]
