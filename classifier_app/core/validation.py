"""Credential validation."""

import re

from ..constants import IDENTIFIER_PATTERN, SECRET_PATTERN

_IDENTIFIER_RE = re.compile(IDENTIFIER_PATTERN)
_SECRET_RE = re.compile(SECRET_PATTERN)


def validate_identifier(value) -> bool:
    """Check 3-20 characters of letters, digits, underscore or hyphen."""
    if not isinstance(value, str):
        return False
    return _IDENTIFIER_RE.fullmatch(value) is not None


def validate_secret(value) -> bool:
    """
    Check password strength.

    At least 8 characters, with a letter, a digit and one of ``@$!%*#?&``.
    Characters outside letters, digits and those symbols are rejected.
    """
    if not isinstance(value, str):
        return False
    return _SECRET_RE.fullmatch(value) is not None
