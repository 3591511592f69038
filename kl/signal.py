"""Thread-safe signals and slots with connections that can be blocked or dropped."""

from __future__ import annotations

import threading
import weakref
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

__all__ = [
    "ConnectPosition",
    "Blocker",
    "Connection",
    "ScopedConnection",
    "Signal",
    "stop_emission",
    "current_connection",
]


class ConnectPosition(Enum):
    """Where a new slot goes in the signal's call order."""

    AT_BACK = "at_back"
    AT_FRONT = "at_front"


class _Slot:
    """A connected callable together with its connection state."""

    def __init__(self, sender: Signal, target: Callable[..., Any]) -> None:
        self.sender: Signal | None = sender
        self.target = target
        self._blocking = 0
        self._lock = threading.Lock()

    def block(self) -> None:
        with self._lock:
            self._blocking += 1

    def unblock(self) -> None:
        with self._lock:
            if self._blocking <= 0:
                raise RuntimeError("slot is not blocked")
            self._blocking -= 1

    @property
    def blocked(self) -> bool:
        return self._blocking > 0

    @property
    def valid(self) -> bool:
        return self.sender is not None

    def rebind(self, sender: Signal | None) -> None:
        with self._lock:
            self.sender = sender

    def disconnect(self) -> None:
        with self._lock:
            sender, self.sender = self.sender, None
        if sender is not None:
            sender._remove_slot(self)


@dataclass
class _EmissionState:
    emission_stopped: bool = False
    current_slot: _Slot | None = None


_tls = threading.local()


def _emission_state() -> _EmissionState:
    state = getattr(_tls, "state", None)
    if state is None:
        state = _tls.state = _EmissionState()
    return state


class Connection:
    """A handle to one signal-to-slot connection.

    Connections compare equal when they refer to the same slot and can be
    used as dictionary keys or set members.
    """

    def __init__(self, _slot: _Slot | None = None) -> None:
        self._slot = _slot

    def disconnect(self) -> None:
        """Disconnect the slot. Does nothing if already disconnected."""
        if self._slot is None:
            return
        self._slot.disconnect()
        self._slot = None

    def connected(self) -> bool:
        return self._slot is not None and self._slot.valid

    def blocker(self) -> Blocker:
        """Return a blocker that keeps the slot from being called while held."""
        return Blocker(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Connection):
            return NotImplemented
        return self._slot is other._slot

    def __hash__(self) -> int:
        return hash(id(self._slot)) if self._slot is not None else hash(None)

    def __repr__(self) -> str:
        state = "connected" if self.connected() else "disconnected"
        return f"<Connection {state}>"


class Blocker:
    """Blocks a connection's slot from being invoked until released."""

    def __init__(self, connection: Connection) -> None:
        self._slot = connection._slot
        if self._slot is not None:
            self._slot.block()

    def blocking(self) -> bool:
        return self._slot is not None

    def release(self) -> None:
        """Stop blocking. Calling it again has no effect."""
        if self._slot is not None:
            self._slot.unblock()
            self._slot = None

    def __enter__(self) -> Blocker:
        return self

    def __exit__(self, *args: Any) -> None:
        self.release()


class ScopedConnection:
    """Owns a connection and disconnects it when the context exits."""

    def __init__(self, connection: Connection | None = None) -> None:
        self._connection = connection if connection is not None else Connection()

    def connection(self) -> Connection:
        return self._connection

    def release(self) -> Connection:
        """Give up ownership; the returned connection stays connected."""
        released, self._connection = self._connection, Connection()
        return released

    def disconnect(self) -> None:
        self._connection.disconnect()

    def __enter__(self) -> ScopedConnection:
        return self

    def __exit__(self, *args: Any) -> None:
        self.disconnect()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScopedConnection):
            return NotImplemented
        return self._connection == other._connection

    def __hash__(self) -> int:
        return hash(self._connection)


def _weak_target(ref: weakref.ref) -> Callable[..., None]:
    def call(*args: Any) -> None:
        target = ref()
        if target is not None:
            target(*args)

    return call


class Signal:
    """A list of slots called in order whenever the signal is emitted.

    Slots connected during an emission are not called by that emission;
    slots disconnected during an emission are skipped if not yet reached.
    A ``weakref.ref`` or ``weakref.WeakMethod`` may be connected; it is
    called only while its referent is alive.
    """

    def __init__(self) -> None:
        self._slots: list[_Slot] = []
        self._lock = threading.Lock()

    def connect(
        self,
        slot: Callable[..., Any] | None,
        at: ConnectPosition = ConnectPosition.AT_BACK,
    ) -> Connection:
        """Connect a callable; an empty slot (None) yields an empty connection."""
        if slot is None:
            return Connection()
        if isinstance(slot, weakref.ref):
            slot = _weak_target(slot)
        if not callable(slot):
            raise TypeError(f"slot {slot!r} is not callable")
        new_slot = _Slot(self, slot)
        with self._lock:
            if at is ConnectPosition.AT_FRONT:
                self._slots.insert(0, new_slot)
            else:
                self._slots.append(new_slot)
        return Connection(new_slot)

    def __call__(self, *args: Any) -> None:
        """Emit the signal, calling each connected, unblocked slot with args."""
        with self._lock:
            snapshot = list(self._slots)

        state = _emission_state()
        saved = _EmissionState(state.emission_stopped, state.current_slot)
        state.emission_stopped = False
        try:
            for slot in snapshot:
                if not slot.blocked and slot.sender is self:
                    state.current_slot = slot
                    slot.target(*args)
                if state.emission_stopped:
                    break
        finally:
            state.emission_stopped = saved.emission_stopped
            state.current_slot = saved.current_slot

    def disconnect_all_slots(self) -> None:
        with self._lock:
            slots, self._slots = self._slots, []
        for slot in slots:
            slot.rebind(None)

    def num_slots(self) -> int:
        with self._lock:
            return sum(1 for slot in self._slots if slot.valid)

    def empty(self) -> bool:
        return self.num_slots() == 0

    def swap(self, other: Signal) -> None:
        """Exchange the slots of two signals; connections follow their slots."""
        if other is self:
            return
        first, second = sorted((self, other), key=id)
        with first._lock, second._lock:
            self._slots, other._slots = other._slots, self._slots
            for slot in self._slots:
                slot.rebind(self)
            for slot in other._slots:
                slot.rebind(other)

    def _remove_slot(self, slot: _Slot) -> None:
        with self._lock:
            try:
                self._slots.remove(slot)
            except ValueError:
                pass


def stop_emission() -> None:
    """Stop the emission in progress on this thread after the current slot."""
    _emission_state().emission_stopped = True


def current_connection() -> Connection:
    """The connection of the slot being called on this thread, or an empty one."""
    slot = _emission_state().current_slot
    return Connection(slot) if slot is not None else Connection()