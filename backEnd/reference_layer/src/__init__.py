"""
Reference Layer source modules.

Pipeline:
    grammar.py  - Line classification, directive matching, canonical names
    store.py    - Deduplicated in-memory reference table
    loader.py   - Input acquisition and line-by-line load
    context.py  - Context owning the table + lookup API
    errors.py   - Fatal load errors
"""

from .context import ReferenceContext, get_reference, load_reference_config
from .errors import ReferenceConfigError, ReferenceConfigLoadError
from .schemas import InvalidLine, LoadResult, Reference

__all__ = [
    "ReferenceContext",
    "get_reference",
    "load_reference_config",
    "ReferenceConfigError",
    "ReferenceConfigLoadError",
    "Reference",
    "InvalidLine",
    "LoadResult",
]
