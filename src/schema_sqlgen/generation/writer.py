"""
Script Writer

Scoped acquisition of an output sink for generated SQL. The sink is closed
on every exit path; OS failures surface as ScriptWriteError.
"""

import io
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, TextIO, Union

from ..exceptions import ScriptWriteError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@contextmanager
def open_script(path: PathLike, encoding: str = 'utf-8') -> Iterator[TextIO]:
    """
    Open a script file for writing (create or truncate).

    Parent directories are not created; a missing directory is an error.

    Raises:
        ScriptWriteError: If the file cannot be opened or written
    """
    try:
        handle = open(path, 'w', encoding=encoding, newline='\n')
    except OSError as e:
        raise ScriptWriteError(str(path), e.strerror or str(e)) from e

    try:
        yield handle
    except OSError as e:
        raise ScriptWriteError(str(path), e.strerror or str(e)) from e
    finally:
        handle.close()


class ScriptWriter:
    """
    Collects generated statements and flushes them to a file or buffer.

    Usage:
        with ScriptWriter(path) as writer:
            writer.write(table_sql)
            writer.write(procedure_sql)
    """

    def __init__(self, path: PathLike = None, encoding: str = 'utf-8'):
        """
        Initialize the writer.

        Args:
            path: Target file; None collects into an in-memory buffer
            encoding: File encoding
        """
        self.path = Path(path) if path is not None else None
        self.encoding = encoding
        self._parts: List[str] = []
        self._buffer = io.StringIO()

    def __enter__(self) -> 'ScriptWriter':
        self._parts = []
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is None:
            self.flush()
        else:
            logger.debug(f"Discarding script output after {exc_type.__name__}")
            self._parts = []
        return False

    def write(self, text: str) -> None:
        """Queue a block of text; blocks are separated by a blank line."""
        if text:
            self._parts.append(text.rstrip('\n'))

    def getvalue(self) -> str:
        """Text flushed to the in-memory buffer."""
        return self._buffer.getvalue()

    def flush(self) -> None:
        """Write queued text to the target in one pass."""
        content = '\n\n'.join(self._parts)
        if content:
            content += '\n'
        self._parts = []

        if self.path is None:
            self._buffer.write(content)
            return

        with open_script(self.path, self.encoding) as handle:
            handle.write(content)
        logger.info(f"Wrote script {self.path} ({len(content)} chars)")
