"""Typed model for front-panel LED signals."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from hal_utils.model.states import LedColor, LedState


@dataclass(frozen=True)
class LedSignal:
    """The (color, blink pattern) pair a physical status indicator displays.

    Unpacks like a pair, so ``color, state = signal`` works.

    Attributes:
        color: LED color.
        state: LED blink pattern.
    """

    color: LedColor
    state: LedState

    def __iter__(self) -> Iterator[LedColor | LedState]:
        yield self.color
        yield self.state

    @property
    def is_amber_blinking(self) -> bool:
        """``True`` for amber with a slow or fast blink."""
        return self.color == LedColor.AMBER and self.state in (
            LedState.BLINKING_SLOW,
            LedState.BLINKING_FAST,
        )


UNKNOWN_SIGNAL: LedSignal = LedSignal(LedColor.UNKNOWN, LedState.UNKNOWN)
