"""
Line grammar for reference.config files.

Each directive line looks like:
    config reference: <system> <url>

- "config" and "reference" are literal and case-sensitive
- <system> starts with a letter, then letters, digits, '-' or '_'
- <url> is the rest of the line, verbatim, minus trailing whitespace

Examples:
    "config reference: cve http://cve.mitre.org/cgi-bin/cvename.cgi?name="
        → ReferenceMatch(system="cve", url="http://cve.mitre.org/cgi-bin/cvename.cgi?name=")
    "config reference: four"            → None (missing url)
    "config_ reference: two http://b"   → None (bad keyword)
"""

import re
import string
from typing import NamedTuple, Optional

# Reference system identifier, before canonicalization
SYSTEM_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9_-]*", re.ASCII)

REFERENCE_PATTERN = re.compile(
    r"""
    ^\s*
    config\s+reference\s*:\s*           # Literal keywords, colon
    (?P<system>[A-Za-z][A-Za-z0-9_-]*)  # Reference system name
    \s+                                 # Mandatory separator
    (?P<url>\S.*?)                      # Value, must start with non-space
    \s*$                                # Trailing whitespace / newline
    """,
    re.VERBOSE | re.ASCII,
)

# Whitespace as isspace() sees it in the C locale
ASCII_WHITESPACE = " \t\n\r\f\v"

# Byte-wise tolower: only A-Z are folded
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


class ReferenceMatch(NamedTuple):
    """Substrings extracted from a directive line."""

    system: str
    url: str


def is_blank_or_comment(line: str) -> bool:
    """
    Check if a line is blank or a comment.

    Comment lines have '#' as their first non-whitespace character,
    e.g. "# comment" or "   # comment".
    """
    stripped = line.lstrip(ASCII_WHITESPACE)
    return not stripped or stripped.startswith("#")


def match_reference_line(line: str) -> Optional[ReferenceMatch]:
    """
    Match a line against the reference directive grammar.

    Args:
        line: Raw line, with or without its line ending

    Returns:
        ReferenceMatch with the raw (not yet canonical) system and the url,
        or None if the line does not fit the grammar
    """
    match = REFERENCE_PATTERN.match(line)
    if match is None:
        return None
    return ReferenceMatch(system=match.group("system"), url=match.group("url"))


def canonicalize_system(system: str) -> str:
    """Lowercase a reference system name to build its table key."""
    return system.translate(_ASCII_LOWER)


def is_valid_system(system: str) -> bool:
    """Check that a name satisfies the reference system identifier pattern."""
    return SYSTEM_PATTERN.fullmatch(system) is not None
