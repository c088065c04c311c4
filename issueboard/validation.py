"""
Request and body shape checks for the issues API.

Everything here runs before the store is touched, and every failure is a
ValidationError whose message goes back to the client verbatim.
"""
from typing import Any, Dict

from .schema import ISSUE_FIELDS, IssueStatus, is_known_status

INVALID_REQUEST = "Invalid request"
INVALID_ISSUE = "Invalid issue data"


class ValidationError(Exception):
    """Raised when a request or its body has the wrong shape."""
    pass


def validate_json_request(request) -> Any:
    """
    Check the content type and length of a Flask request and parse its body.

    Returns:
        The decoded JSON value (any type; shape checks come later).

    Raises:
        ValidationError if the body is not JSON or is empty.
    """
    if request.mimetype != "application/json" or request.content_length == 0:
        raise ValidationError(INVALID_REQUEST)
    try:
        return request.get_json(force=False, silent=False)
    except Exception:
        raise ValidationError(INVALID_REQUEST)


def _check_field(name: str, value: Any, strict_status: bool):
    if not isinstance(value, str):
        raise ValidationError(f"{INVALID_ISSUE}: {name} must be a string")
    if name == "status" and strict_status and not is_known_status(value):
        allowed = ", ".join(s.value for s in IssueStatus)
        raise ValidationError(
            f"{INVALID_ISSUE}: status must be one of {allowed}, got '{value}'"
        )


def validate_issue(data: Any, strict_status: bool = False) -> Dict[str, str]:
    """
    Validate a full issue body (create / replace).

    Returns:
        dict with exactly title, description and status.
    """
    if not isinstance(data, dict):
        raise ValidationError(INVALID_ISSUE)

    missing = [name for name in ISSUE_FIELDS if name not in data]
    if missing:
        raise ValidationError(f"{INVALID_ISSUE}: missing {', '.join(missing)}")

    for name in ISSUE_FIELDS:
        _check_field(name, data[name], strict_status)
    return {name: data[name] for name in ISSUE_FIELDS}


def validate_patch(data: Any, strict_status: bool = False) -> Dict[str, str]:
    """
    Validate a partial issue body.

    Unknown keys (including ``id``) are dropped; identity comes from the URL.
    """
    if not isinstance(data, dict):
        raise ValidationError(INVALID_ISSUE)

    result = {}
    for name in ISSUE_FIELDS:
        if name in data:
            _check_field(name, data[name], strict_status)
            result[name] = data[name]
    return result
