"""Pydantic model for a flattened field-attribute record."""

from typing import Optional
from pydantic import BaseModel, ConfigDict, PrivateAttr, field_validator

from searchschemer.errors import MappingValueError


# Store modes that keep the original value retrievable
STORED_MODES = frozenset({"yes", "true"})

# Index mode under which the field value is run through an analyzer
ANALYZED_MODE = "analyzed"


def parse_bool(property_name: str, value: str) -> bool:
    """Parse a mapping boolean (``true``/``false``, case-insensitive).

    Raises:
        MappingValueError: If the value is neither ``true`` nor ``false``
    """
    lowered = value.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise MappingValueError(property_name, value, "a boolean")


def parse_float(property_name: str, value: str) -> float:
    """Parse a mapping floating-point value.

    Raises:
        MappingValueError: If the value is not a number
    """
    try:
        return float(value)
    except ValueError as e:
        raise MappingValueError(property_name, value, "a floating-point number") from e


class FieldAttributes(BaseModel):
    """One leaf field of a mapping document and its indexing properties.

    Built incrementally while the document is walked, so the model is
    mutable (assignments are validated) until the reader seals it.
    """
    name: str  # Dotted path, e.g. "address.city"
    type: Optional[str] = None
    stored: bool = False
    analyzed: bool = True
    omit_term_freq_and_positions: bool = False
    omit_norms: bool = False
    boost: Optional[float] = None

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    _sealed: bool = PrivateAttr(default=False)

    def __setattr__(self, name, value):
        if self._sealed and not name.startswith("_"):
            raise TypeError(f"Field '{self.name}' is read-only once the read completes")
        super().__setattr__(name, value)

    def seal(self) -> None:
        """Make the record read-only."""
        self._sealed = True

    @property
    def sealed(self) -> bool:
        return self._sealed

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Field names must be non-empty."""
        if not v:
            raise ValueError("Field name must not be empty")
        return v

    def set_stored(self, mode: str) -> None:
        """Set the stored flag from a store mode string (``yes``/``no``)."""
        self.stored = mode.strip().lower() in STORED_MODES

    def set_analyzed(self, mode: str) -> None:
        """Set the analyzed flag from an index mode string.

        ``analyzed`` keeps the field analyzed; ``not_analyzed`` and ``no``
        clear the flag.
        """
        self.analyzed = mode.strip().lower() == ANALYZED_MODE

    def strip_prefix(self, prefix: str) -> bool:
        """Drop a leading ``prefix`` from the name. Returns True if renamed."""
        if self.name.startswith(prefix) and len(self.name) > len(prefix):
            self.name = self.name[len(prefix):]
            return True
        return False
