from typing import Callable, Optional, TypeVar

from ._action import Action, ActionType
from ._state import State


A = TypeVar("A")
S = TypeVar("S")


__all__ = (
    "Reducer",

    "reduce",
)


Reducer = Callable[[Optional[S], A], S]


def reduce(state: Optional[State], action: Action) -> State:
    if state is None:
        state = State()

    if action.type == ActionType.ADD:
        return State(count=state.count + 1)

    if action.type == ActionType.SUBTRACT:
        return State(count=state.count - 1)

    if action.type == ActionType.RESET:
        return State(count=0)

    return state
