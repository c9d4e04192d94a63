from __future__ import annotations

import logging

from typing import Callable, Generic, Optional, TypeVar

from ._action import Action
from ._reducer import Reducer


__all__ = (
    "InvalidStateError",
    "Store",
    "StoreError",
    "Subscriber",

    "create_store"
)


A = TypeVar("A")
S = TypeVar("S")


logger = logging.getLogger(__name__)


class StoreError(Exception):
    pass


class InvalidStateError(StoreError):
    pass


Subscriber = Callable[[S], None]


class Store(Generic[S, A]):
    def get_state(self) -> S:
        raise NotImplementedError

    def dispatch(self, action: A) -> None:
        raise NotImplementedError

    def subscribe(self, subscriber: Subscriber[S]) -> None:
        raise NotImplementedError


def _ensure_state(state: Optional[S], reducer: Reducer) -> S:
    if state is None:
        raise InvalidStateError(
            f"Reducer {getattr(reducer, '__qualname__', reducer)!r} "
            "returned no state"
        )

    return state


class _DefaultStore(Store[S, A]):
    _reducer: Reducer
    _state: S
    _subscribers: list[Subscriber[S]]

    def __init__(self, reducer: Reducer) -> None:
        self._reducer = reducer
        self._state = _ensure_state(reducer(None, Action()), reducer)
        self._subscribers = []

    def _notify(self, state: S) -> None:
        # Subscribers registered while notifying wait for the next dispatch.
        for subscriber in list(self._subscribers):
            subscriber(state)

    def get_state(self) -> S:
        return self._state

    def dispatch(self, action: A) -> None:
        state = _ensure_state(self._reducer(self._state, action), self._reducer)
        self._state = state

        logger.debug(
            "Dispatched %r, notifying %d subscriber(s)",
            action,
            len(self._subscribers)
        )

        self._notify(state)

    def subscribe(self, subscriber: Subscriber[S]) -> None:
        if not callable(subscriber):
            raise TypeError(f"Subscriber must be callable, got {subscriber!r}")

        self._subscribers.append(subscriber)

        logger.debug("Subscribed %r", subscriber)


def create_store(reducer: Reducer) -> Store[S, A]:
    if not callable(reducer):
        raise TypeError(f"Reducer must be callable, got {reducer!r}")

    store: Store[S, A] = _DefaultStore(reducer)

    logger.debug("Created store with initial state %r", store.get_state())

    return store
