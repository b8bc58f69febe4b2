"""Mapping document I/O helpers (internal)."""

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Union

from searchschemer.kernel.tokens import TokenCursor


@contextmanager
def open_mapping_cursor(path: Union[str, Path]) -> Iterator[TokenCursor]:
    """Open a mapping file and yield a token cursor over it.

    The file is closed when the block exits, including on errors.
    """
    with open(Path(path), "rb") as f:
        yield TokenCursor(f)
