"""Handlers that step shared values and the key bindings that drive them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Callable, Generic, Hashable, Optional, Protocol, Sequence, TypeVar

from gosu.ctrl.settings import countdowns

T = TypeVar("T")


@dataclass
class Cell(Generic[T]):
    """A mutable holder so several handlers and settings can share one value."""

    value: T


class Handler(Protocol):
    def decrease(self) -> None: ...

    def increase(self) -> None: ...


class Direction(IntEnum):
    NONE = -1
    DECREASE = 0
    INCREASE = 1


@dataclass
class BoolHandler:
    """Both directions toggle the value."""

    value: Cell[bool]

    def decrease(self) -> None:
        self.value.value = not self.value.value

    def increase(self) -> None:
        self.value.value = not self.value.value


@dataclass
class FloatHandler:
    """Steps by unit, clamped to [min, max]."""

    value: Cell[float]
    min: float
    max: float
    unit: float

    def decrease(self) -> None:
        self.value.value = max(self.value.value - self.unit, self.min)

    def increase(self) -> None:
        self.value.value = min(self.value.value + self.unit, self.max)


@dataclass
class IntHandler:
    """Steps by one, wrapping around when loop is set and clamping otherwise."""

    value: Cell[int]
    min: int
    max: int
    loop: bool = False

    def decrease(self) -> None:
        self.value.value -= 1
        if self.value.value < self.min:
            self.value.value = self.max if self.loop else self.min

    def increase(self) -> None:
        self.value.value += 1
        if self.value.value > self.max:
            self.value.value = self.min if self.loop else self.max


@dataclass
class KeyHandler:
    """Drives a handler from a pair of keys, with key repeat while held.

    The handler works only while every modifier is pressed. A key of None is
    unbound. is_pressed reports the state of a key; play, when given, is called
    with the sound of the direction taken and the current volume.
    """

    handler: Handler
    is_pressed: Callable[[Any], bool]
    keys: Sequence[Optional[Hashable]]
    modifiers: Sequence[Hashable] = ()
    sounds: Sequence[bytes] = (b"", b"")
    volume: Cell[float] = field(default_factory=lambda: Cell(1.0))
    play: Optional[Callable[[bytes, float], None]] = None
    _hold: Direction = field(default=Direction.NONE, init=False)
    _countdown: int = field(default=0, init=False)
    _active: bool = field(default=False, init=False)

    def _pressed(self, key: Optional[Hashable]) -> bool:
        return key is not None and bool(self.is_pressed(key))

    def _reset(self) -> None:
        self._active = False
        self._hold = Direction.NONE

    def update(self) -> bool:
        """Advance one tick; return True when the handler was triggered."""
        if self._countdown > 0:
            self._countdown -= 1
            return False
        if not all(self._pressed(k) for k in self.modifiers):
            self._reset()
            return False
        if self._hold != Direction.NONE and not self._pressed(self.keys[self._hold]):
            self._reset()
        for index, key in enumerate(self.keys):
            if self._pressed(key):
                self._hold = Direction(index)
                break
        if self._hold == Direction.NONE:
            return False
        if self._hold == Direction.DECREASE:
            self.handler.decrease()
        else:
            self.handler.increase()
        if self.play is not None:
            self.play(self.sounds[self._hold], self.volume.value)
        ticks = countdowns()
        self._countdown = ticks.short if self._active else ticks.long
        self._active = True
        return True