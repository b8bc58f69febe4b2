"""Public API for searchschemer.

High-level functions that read a mapping document and return its flattened
field records. Callers should use these instead of driving the reader
directly.
"""

import io
import os
from pathlib import Path
from typing import BinaryIO, Dict, List, Optional, Union

from searchschemer.contracts import ReaderOptions
from searchschemer.kernel.fields import FieldAttributes
from searchschemer.kernel.reader import FieldsReader
from searchschemer.kernel.tokens import TokenCursor
from searchschemer._internal.io.mapping_file import open_mapping_cursor


def _normalize_path(path: Union[str, os.PathLike, Path]) -> Path:
    """Normalize path input to Path object."""
    return Path(path) if not isinstance(path, Path) else path


def read_fields(
    path: Union[str, os.PathLike, Path],
    options: Optional[ReaderOptions] = None,
) -> List[FieldAttributes]:
    """
    Read the fields of a mapping file.

    Args:
        path: Path to the mapping JSON document
        options: Reader options (defaults to permissive mode)

    Returns:
        Field records in document order

    Raises:
        OSError: If the file cannot be opened or read
        MappingReadError: If the document is malformed or a value does not parse
    """
    with open_mapping_cursor(_normalize_path(path)) as cursor:
        return FieldsReader(cursor, options).read()


def read_fields_from_stream(
    stream: BinaryIO,
    options: Optional[ReaderOptions] = None,
) -> List[FieldAttributes]:
    """Read fields from an open binary stream. The caller keeps ownership of the stream."""
    return FieldsReader(TokenCursor(stream), options).read()


def read_fields_from_text(
    text: Union[str, bytes],
    options: Optional[ReaderOptions] = None,
) -> List[FieldAttributes]:
    """Read fields from a mapping document held in memory."""
    data = text.encode("utf-8") if isinstance(text, str) else text
    return read_fields_from_stream(io.BytesIO(data), options)


def fields_to_dicts(fields: List[FieldAttributes]) -> List[Dict]:
    """Convert field records to JSON-ready dicts, keeping their order."""
    return [field.model_dump() for field in fields]
