from pydantic import BaseModel, ConfigDict


__all__ = (
    "State",
)


class State(BaseModel):
    model_config = ConfigDict(frozen=True)

    count: int = 0
