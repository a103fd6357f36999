"""
In-memory reference table.

Keys are canonical system names. Insertion is first-write-wins: once a
system is stored, later definitions for the same name (in any letter case)
are dropped, never merged or overwritten.
"""

import logging
from typing import Dict, Iterator, Optional

from .grammar import canonicalize_system
from .schemas.reference import Reference

logger = logging.getLogger(__name__)


class ReferenceStore:
    """
    Deduplicated mapping of canonical system name → Reference.

    Usage:
        store = ReferenceStore()
        store.insert("CVE", "http://cve.mitre.org/cgi-bin/cvename.cgi?name=")
        store.lookup("cve").url
    """

    def __init__(self):
        self._references: Dict[str, Reference] = {}

    def insert(self, system: str, url: Optional[str] = None) -> bool:
        """
        Add a reference unless its system is already stored.

        Args:
            system: Reference system name, any letter case
            url: Value stored as-is

        Returns:
            True if the reference was added, False for a duplicate
        """
        key = canonicalize_system(system)
        if key in self._references:
            logger.debug(f"Duplicate reference {key!r} ignored")
            return False

        self._references[key] = Reference(system=key, url=url)
        return True

    def lookup(self, name: str) -> Optional[Reference]:
        """Get a reference by system name (case-insensitive)."""
        return self._references.get(canonicalize_system(name))

    def count(self) -> int:
        """Number of distinct systems stored."""
        return len(self._references)

    def systems(self) -> list[str]:
        """Canonical names of all stored systems."""
        return list(self._references)

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.lookup(name) is not None

    def __iter__(self) -> Iterator[Reference]:
        return iter(self._references.values())

    def __repr__(self) -> str:
        return f"ReferenceStore(count={self.count()})"
