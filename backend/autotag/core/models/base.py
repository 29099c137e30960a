from __future__ import annotations

from pydantic import BaseModel as PydanticBaseModel
from pydantic import ConfigDict


class AppBaseModel(PydanticBaseModel):
    """Base model for all domain models."""

    model_config = ConfigDict(
        from_attributes=True,
        extra="forbid",
        populate_by_name=True,
    )


class RemotePayloadModel(PydanticBaseModel):
    """Base model for data decoded from third-party responses.

    Unknown keys are ignored so additions to the remote API do not break parsing.
    """

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
    )
