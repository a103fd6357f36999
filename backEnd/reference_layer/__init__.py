"""
Basis Reference Layer

Loads reference.config files into an in-memory lookup table keyed by the
canonical (lowercase) reference system name, for consultation by the
rule engine.

Each directive has the shape:
    config reference: <system> <url>
"""

__version__ = "0.1.0"
