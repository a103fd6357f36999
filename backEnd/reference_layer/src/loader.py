"""
Reference config load pipeline.

Steps:
1. Acquire the input (open the file, or take an injected stream)
2. Read lines, skipping blank and comment lines
3. Match each remaining line against the directive grammar
4. Insert matches into the store (first definition wins)
5. Release the input and report statistics

Acquisition failures are fatal and raised as ReferenceConfigLoadError.
A line that does not fit the grammar is logged, recorded and skipped.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional, TextIO

from .errors import ReferenceConfigLoadError
from .grammar import is_blank_or_comment, match_reference_line
from .schemas.reference import InvalidLine, LoadResult
from .store import ReferenceStore

logger = logging.getLogger(__name__)

STREAM_SOURCE = "<stream>"


class LoadState(str, Enum):
    """Lifecycle of a single load."""

    UNINITIALIZED = "uninitialized"
    ACQUIRED = "acquired"
    PARSING = "parsing"
    FINALIZED = "finalized"
    FAILED = "failed"


class ReferenceLoader:
    """
    Single-use loader for one reference config input.

    Usage:
        loader = ReferenceLoader(path=Path("/etc/basis/reference.config"))
        result = loader.load(store)

    Tests and hosts can inject any iterable of lines instead of a path:
        ReferenceLoader(stream=io.StringIO("config reference: cve http://...\\n"))

    A loader owns its stream and counters, so it must not be reused; build
    a fresh one for every load.
    """

    def __init__(
        self,
        path: Optional[Path] = None,
        stream: Optional[Iterable[str]] = None,
    ):
        """
        Initialize loader.

        Args:
            path: reference.config file to open
            stream: Already-open text input; stays owned by the caller

        Raises:
            ValueError: If neither or both of path and stream are given
        """
        if (path is None) == (stream is None):
            raise ValueError("Provide exactly one of path or stream")

        self.path = Path(path) if path is not None else None
        self._stream = stream
        self._owns_stream = False
        self.state = LoadState.UNINITIALIZED

    @property
    def source(self) -> str:
        """Human-readable name of the input for diagnostics."""
        return str(self.path) if self.path is not None else STREAM_SOURCE

    def load(self, store: ReferenceStore) -> LoadResult:
        """
        Run the full pipeline into a store.

        Args:
            store: Store to populate

        Returns:
            LoadResult with line statistics and invalid lines

        Raises:
            ReferenceConfigLoadError: If the input cannot be opened or read
            RuntimeError: If this loader was already used
        """
        if self.state != LoadState.UNINITIALIZED:
            raise RuntimeError(
                f"ReferenceLoader already used (state: {self.state.value}); "
                "create a new loader per load"
            )

        stream = self._acquire()
        try:
            self.state = LoadState.PARSING
            result = self._parse(stream, store)
        except (OSError, UnicodeDecodeError) as e:
            self.state = LoadState.FAILED
            raise ReferenceConfigLoadError(
                f"Error reading reference config {self.source}: {e}",
                path=self.path,
            ) from e
        finally:
            self._release()

        self.state = LoadState.FINALIZED
        logger.info(
            f"Added {result.references_added} reference types from {self.source}"
        )
        return result

    def _acquire(self) -> Iterable[str]:
        """Open the input stream, or hand back the injected one."""
        if self._stream is not None:
            self.state = LoadState.ACQUIRED
            return self._stream

        try:
            # Undecodable bytes must not abort the whole load
            stream: TextIO = open(self.path, "r", encoding="utf-8", errors="replace")
        except OSError as e:
            self.state = LoadState.FAILED
            logger.error(f"Error opening reference config file {self.path}: {e}")
            raise ReferenceConfigLoadError(
                f"Error opening reference config file \"{self.path}\": "
                f"{e.strerror or e}. Check the REFERENCE_CONFIG_FILE setting.",
                path=self.path,
            ) from e

        self._stream = stream
        self._owns_stream = True
        self.state = LoadState.ACQUIRED
        return stream

    def _parse(self, stream: Iterable[str], store: ReferenceStore) -> LoadResult:
        result = LoadResult(source=self.source)

        for line_number, line in enumerate(stream, 1):
            result.lines_read += 1

            if is_blank_or_comment(line):
                result.lines_skipped += 1
                continue

            match = match_reference_line(line)
            if match is None:
                text = line.rstrip("\r\n")
                logger.error(
                    f"Invalid reference config in {self.source} "
                    f"line {line_number}: {text!r}"
                )
                result.invalid_lines.append(
                    InvalidLine(line_number=line_number, text=text)
                )
                continue

            if store.insert(match.system, match.url):
                result.references_added += 1
            else:
                result.duplicates += 1

        return result

    def _release(self) -> None:
        """Close the stream if this loader opened it."""
        if self._owns_stream and self._stream is not None:
            self._stream.close()
        self._stream = None
        self._owns_stream = False
