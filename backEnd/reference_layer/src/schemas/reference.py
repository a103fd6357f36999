"""
Reference entry and load report schemas.

A Reference is identified by its canonical system name only; the url
plays no role in identity and is kept exactly as written in the file.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..grammar import canonicalize_system, is_valid_system


class Reference(BaseModel):
    """
    A reference system loaded from reference.config.

    The system name is canonicalized (lowercased) on construction, so
    Reference(system="CVE") and Reference(system="cve") describe the same key.
    """

    model_config = ConfigDict(frozen=True)

    system: str = Field(
        ...,
        min_length=1,
        description="Canonical (lowercase) reference system name",
        examples=["cve", "bugtraq", "url"],
    )
    url: Optional[str] = Field(
        None,
        description="Free-form value, usually a url prefix; None for lookup probes",
        examples=["http://cve.mitre.org/cgi-bin/cvename.cgi?name="],
    )

    @field_validator("system")
    @classmethod
    def _canonical_system(cls, value: str) -> str:
        if not is_valid_system(value):
            raise ValueError(f"Invalid reference system name: {value!r}")
        return canonicalize_system(value)


class InvalidLine(BaseModel):
    """A non-blank, non-comment line that did not fit the directive grammar."""

    line_number: int = Field(..., ge=1, description="1-indexed line number")
    text: str = Field(..., description="Raw line without its line ending")


class LoadResult(BaseModel):
    """Statistics of one pass over a reference config input."""

    source: str = Field(..., description="File path or '<stream>' for injected input")
    lines_read: int = Field(default=0, ge=0)
    lines_skipped: int = Field(
        default=0, ge=0, description="Blank and comment lines"
    )
    references_added: int = Field(default=0, ge=0)
    duplicates: int = Field(
        default=0, ge=0, description="Valid lines whose system was already stored"
    )
    invalid_lines: list[InvalidLine] = Field(default_factory=list)

    @property
    def num_invalid(self) -> int:
        return len(self.invalid_lines)

    def has_errors(self) -> bool:
        """Check if any line failed the grammar."""
        return bool(self.invalid_lines)
