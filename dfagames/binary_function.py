"""Boolean functions of two arguments, with their short-circuit properties."""

from __future__ import annotations

from typing import Callable, Optional


class BinaryFunction:
    """A two-argument boolean function used to combine automata leaves."""

    def __init__(self, function: Callable[[bool, bool], bool]) -> None:
        self._function = function

    def __call__(self, left: bool, right: bool) -> bool:
        return bool(self._function(bool(left), bool(right)))

    def has_left_sink(self, state: bool) -> bool:
        """True if a left argument of ``state`` fixes the result to ``state``."""
        state = bool(state)
        return self(state, False) == state and self(state, True) == state

    def has_right_sink(self, state: bool) -> bool:
        """True if a right argument of ``state`` fixes the result to ``state``."""
        state = bool(state)
        return self(False, state) == state and self(True, state) == state

    def left_sink(self) -> Optional[int]:
        """The left sink value (0 preferred over 1), or None if there is none."""
        for state in (0, 1):
            if self.has_left_sink(bool(state)):
                return state
        return None

    def right_sink(self) -> Optional[int]:
        """The right sink value (0 preferred over 1), or None if there is none."""
        for state in (0, 1):
            if self.has_right_sink(bool(state)):
                return state
        return None

    def is_commutative(self) -> bool:
        """True if swapping mixed arguments leaves the result unchanged."""
        return self(False, True) == self(True, False)