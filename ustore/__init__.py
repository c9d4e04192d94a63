from ._action import Action, ActionType, add, reset, subtract
from ._reducer import Reducer, reduce
from ._state import State
from ._store import (
    InvalidStateError,
    Store,
    StoreError,
    Subscriber,
    create_store
)


__all__ = (
    "Action",
    "ActionType",
    "InvalidStateError",
    "Reducer",
    "State",
    "Store",
    "StoreError",
    "Subscriber",

    "add",
    "create_store",
    "reduce",
    "reset",
    "subtract"
)
