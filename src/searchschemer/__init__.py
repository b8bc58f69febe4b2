"""searchschemer: flatten search index mappings into field attribute records."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("searchschemer")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from searchschemer.api import read_fields, read_fields_from_stream, read_fields_from_text
from searchschemer.contracts import ReaderOptions
from searchschemer.errors import (
    MalformedMappingError,
    MappingReadError,
    MappingValueError,
    MissingPropertiesError,
)
from searchschemer.kernel.fields import FieldAttributes
from searchschemer.names import MappingName

__all__ = [
    "__version__",
    "read_fields",
    "read_fields_from_stream",
    "read_fields_from_text",
    "ReaderOptions",
    "FieldAttributes",
    "MappingName",
    "MappingReadError",
    "MalformedMappingError",
    "MappingValueError",
    "MissingPropertiesError",
]
