"""Semantic version validation and comparison backed by semantic_version."""

from typing import Any

import semantic_version


def _strip_prefix(value: str) -> str:
    text = value.strip()
    if text[:1] in ("v", "V"):
        return text[1:]
    return text


def is_valid_semver(value: Any, strict: bool = True) -> bool:
    """Return True if value is a major.minor.patch version string.

    Args:
        value: Candidate; non-strings are never valid.
        strict: Reject a leading "v" and surrounding whitespace when True.

    Returns:
        bool: Validation result.
    """
    if not isinstance(value, str):
        return False
    text = value if strict else _strip_prefix(value)
    try:
        parsed = semantic_version.Version(text)
    except ValueError:
        return False
    # The parser's trailing "$" also matches before a final newline
    return str(parsed) == text


def compare_semver(a: str, b: str) -> int:
    """Compare two versions by precedence; returns -1, 0 or 1.

    A leading "v" is tolerated on either side. Build metadata does not
    affect precedence, so "1.0.0+a" and "1.0.0+b" compare equal.

    Raises:
        ValueError: If either side is not a valid version.
    """
    left = semantic_version.Version(_strip_prefix(a))
    right = semantic_version.Version(_strip_prefix(b))
    return (left > right) - (left < right)


def is_greater(candidate: str, current: Any) -> bool:
    """True if ``current`` is unset or ``candidate`` sorts strictly after it."""
    if not current:
        return True
    return compare_semver(candidate, current) > 0
