from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict


__all__ = (
    "Action",
    "ActionType",

    "add",
    "reset",
    "subtract"
)


class ActionType(str, Enum):
    ADD = "ADD"
    SUBTRACT = "SUBTRACT"
    RESET = "RESET"


class Action(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Unknown strings and a missing type are kept so the reducer can fall
    # through to its default branch instead of failing validation.
    type: Union[ActionType, str, None] = None


def add() -> Action:
    return Action(type=ActionType.ADD)


def subtract() -> Action:
    return Action(type=ActionType.SUBTRACT)


def reset() -> Action:
    return Action(type=ActionType.RESET)
