"""Seat bookkeeping: drag-and-drop actions and keys still held down."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Collection, Iterator, List, Optional, Union

_U32_MASK = 0xFFFFFFFF


class DndAction(enum.Flag):
    """Drag-and-drop actions as protocol bit flags."""

    NONE = 0
    COPY = 1
    MOVE = 2
    ASK = 4


_KNOWN_ACTIONS = (DndAction.COPY, DndAction.MOVE, DndAction.ASK)


def convert_dnd_actions(actions: Union[DndAction, int]) -> DndAction:
    """Keep only the copy, move and ask bits of a set of actions."""
    if isinstance(actions, bool):
        raise TypeError("actions must be a DndAction or an int")
    bits = actions.value if isinstance(actions, DndAction) else int(actions)
    if bits < 0:
        raise ValueError("actions must not be negative")
    result = DndAction.NONE
    for action in _KNOWN_ACTIONS:
        if bits & action.value:
            result |= action
    return result


@dataclass(frozen=True)
class KeyPress:
    """A key pressed on a seat while a proxied surface had focus.

    ``time`` is the protocol timestamp of the press in milliseconds.
    """

    seat_name: str
    keycode: int
    time: int
    surface: object


def release_time(press: KeyPress) -> int:
    """Timestamp for the synthetic release: one past the press, wrapping."""
    return (press.time + 1) & _U32_MASK


class PressedKeys:
    """Keys pressed on proxied surfaces, oldest first."""

    def __init__(self) -> None:
        self._presses: List[KeyPress] = []

    def __len__(self) -> int:
        return len(self._presses)

    def __iter__(self) -> Iterator[KeyPress]:
        return iter(list(self._presses))

    def record(self, press: KeyPress) -> None:
        """Remember a key press."""
        self._presses.append(press)

    def take_stale(
        self,
        is_alive: Callable[[object], bool],
        seat_names: Collection[str],
    ) -> Optional[KeyPress]:
        """Remove and return the first press whose surface has gone away.

        Only the first such press is considered; it is taken only when its
        seat is among ``seat_names`` (the seats that have a keyboard).
        Otherwise nothing is removed and None is returned.
        """
        for index, press in enumerate(self._presses):
            if is_alive(press.surface):
                continue
            if press.seat_name not in seat_names:
                return None
            return self._presses.pop(index)
        return None