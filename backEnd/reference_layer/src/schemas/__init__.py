"""
Pydantic schemas for reference layer artifacts.

Reference is the stored table entry; LoadResult and InvalidLine describe
what a single load did with its input.
"""

from .reference import InvalidLine, LoadResult, Reference

__all__ = [
    "Reference",
    "InvalidLine",
    "LoadResult",
]
