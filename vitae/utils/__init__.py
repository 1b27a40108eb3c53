"""
Shared utilities for vitae.

Common functionality used across contexts:
- Logging setup with provenance tracking
- Timestamps for log session directories
"""

from vitae.utils.timestamp import now

__all__ = ["now"]
