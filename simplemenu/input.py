"""Polling input events and reading their keys and joystick axes."""

from __future__ import annotations

import os
from collections.abc import Iterable
from typing import Any

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

JOYSTICK_DEAD_ZONE = 0


class InputPoller:
    """Takes events one at a time and answers questions about the last one.

    With no event source given, events come from the pygame event queue.
    """

    def __init__(self, events: Iterable[Any] | None = None) -> None:
        self._events = None if events is None else iter(events)
        self._event: Any = None

    def poll(self) -> bool:
        """Fetch the next event; return False when there is none."""
        if self._events is None:
            event = pygame.event.poll()
            if event.type == pygame.NOEVENT:
                return False
        else:
            event = next(self._events, None)
            if event is None:
                return False
        self._event = event
        return True

    def _current(self) -> Any:
        if self._event is None:
            raise RuntimeError("no event has been polled")
        return self._event

    def event_type(self) -> int:
        """Return the type of the last event."""
        return self._current().type

    def pressed_key(self) -> int:
        """Return the key of the last keyboard event."""
        return self._current().key

    def is_left_or_right(self) -> bool:
        """Whether the last joystick motion was on the horizontal axis."""
        return getattr(self._current(), "axis", None) == 0

    def is_up(self) -> bool:
        """Whether the last joystick motion pointed up."""
        event = self._current()
        return getattr(event, "axis", None) == 1 and event.value < JOYSTICK_DEAD_ZONE

    def is_down(self) -> bool:
        """Whether the last joystick motion pointed down."""
        event = self._current()
        return getattr(event, "axis", None) == 1 and event.value > JOYSTICK_DEAD_ZONE