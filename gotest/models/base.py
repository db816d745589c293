"""Base model for gotest configuration objects."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Immutable model; settings are fixed once built at startup."""

    model_config = ConfigDict(frozen=True)
