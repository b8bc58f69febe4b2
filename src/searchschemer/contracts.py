"""Public configuration models for searchschemer package."""

from typing import Literal
from pydantic import BaseModel, ConfigDict


class ReaderOptions(BaseModel):
    """Options controlling one mapping read."""
    mode: Literal["permissive", "strict"] = "permissive"  # strict: a type without "properties" is an error
    expand_object_fields: bool = True  # walk nested "properties" of object fields

    model_config = ConfigDict(extra="forbid", frozen=True)

    @property
    def strict(self) -> bool:
        return self.mode == "strict"
