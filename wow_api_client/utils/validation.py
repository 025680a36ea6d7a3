"""
Argument validation for resource accessors.

Checks are local and synchronous; they run before any request is made.
"""

from typing import Any, Iterable, Optional

from ..core.exceptions import InvalidParameterError, MissingParameterError


def is_missing(value: Any) -> bool:
    """Check whether an argument counts as absent."""
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def require(value: Any, name: str, kind: str) -> Any:
    """
    Reject an absent or empty required argument.

    Args:
        value: Argument value
        name: Parameter name reported in the error
        kind: Expected kind reported in the error ("number", "string", ...)

    Returns:
        The value unchanged

    Raises:
        MissingParameterError: If the value is None or a blank string
    """
    if is_missing(value):
        raise MissingParameterError(name, kind, value)
    return value


def require_choice(value: Any, name: str, choices: Iterable[str], kind: str = "string") -> str:
    """Require a value and check it belongs to ``choices``."""
    require(value, name, kind)
    allowed = frozenset(choices)
    normalized = str(value).strip().lower()
    if normalized not in allowed:
        raise InvalidParameterError(name, value, allowed)
    return normalized


def optional_params(**values: Optional[Any]) -> dict:
    """Drop unset optional query parameters, keeping argument order."""
    return {key: value for key, value in values.items() if value is not None}
