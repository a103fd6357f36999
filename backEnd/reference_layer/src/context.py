"""
Reference context and lookup API for the rule engine.

The context owns the reference table and outlives individual loads.
Each load fills a fresh store and swaps it in only when parsing is done,
so a failed load keeps the previous table.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

from ..config.settings import Settings, get_settings
from .loader import ReferenceLoader
from .schemas.reference import LoadResult, Reference
from .store import ReferenceStore

logger = logging.getLogger(__name__)


class ReferenceContext:
    """Holds the loaded reference table for the rule engine."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.store = ReferenceStore()

    def reset(self) -> None:
        """Drop all loaded references."""
        self.store = ReferenceStore()

    def __repr__(self) -> str:
        return f"ReferenceContext(references={self.store.count()})"


def load_reference_config(
    context: ReferenceContext,
    stream: Optional[Iterable[str]] = None,
    path: Optional[Path] = None,
) -> LoadResult:
    """
    Load reference.config into the context's table.

    With neither stream nor path, the path comes from the context settings
    (REFERENCE_CONFIG_FILE, else the packaged default).

    Args:
        context: Context whose store is replaced on success
        stream: Injected text input (not closed by the loader)
        path: Explicit file path, overrides settings

    Returns:
        LoadResult with line statistics

    Raises:
        ReferenceConfigLoadError: If the input cannot be opened or read
        ValueError: If both stream and path are given
    """
    if stream is not None and path is not None:
        raise ValueError("Provide at most one of stream or path")

    if stream is None and path is None:
        path = context.settings.get_reference_config_path()

    loader = ReferenceLoader(path=path, stream=stream)
    store = ReferenceStore()
    result = loader.load(store)

    context.store = store
    if result.has_errors():
        logger.warning(
            f"{result.num_invalid} invalid line(s) skipped in {result.source}"
        )
    return result


def get_reference(context: ReferenceContext, name: str) -> Optional[Reference]:
    """
    Get a loaded reference by system name.

    Args:
        context: Loaded reference context
        name: System name, any letter case

    Returns:
        The stored Reference, or None if unknown
    """
    return context.store.lookup(name)
