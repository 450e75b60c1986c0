from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SupportRequest(BaseModel):
    intensity: int = Field(5, ge=1, le=10)
    description: str = ""


class SupportOut(BaseModel):
    label: str
    message: str
    techniques: list[str]
    next_steps: list[str]

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
