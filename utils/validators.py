"""
utils/validators.py
-----------------
Input checks for attendance check-ins and list filters.
"""

from datetime import datetime, timezone

from .errors import ValidationError

REQUIRED_FIELDS = ["email", "fullName", "isMemberOfMinistry"]

_TRUE = {"true", "1", "yes"}
_FALSE = {"false", "0", "no"}


def _clean_str(value):
    if value is None:
        return None
    if not isinstance(value, str):
        value = str(value)
    return value.strip() or None


def parse_bool(value, field_name):
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
    raise ValidationError(f"{field_name} must be a boolean", {"field": field_name})


def normalize_ministries(ministries, legacy_ministry=None):
    """Return the ministry list for a member.

    ``ministries`` may be a list or a single string. The legacy singular
    ``ministry`` value is used when the list holds no usable names.
    """
    if isinstance(ministries, str):
        ministries = [ministries]
    if ministries is None:
        ministries = []
    if not isinstance(ministries, (list, tuple)):
        raise ValidationError("ministries must be a list of strings", {"field": "ministries"})

    cleaned = []
    for name in ministries:
        if not isinstance(name, str):
            raise ValidationError("ministries must be a list of strings", {"field": "ministries"})
        name = name.strip()
        if name:
            cleaned.append(name)

    if not cleaned and legacy_ministry:
        cleaned = [legacy_ministry]
    if not cleaned:
        raise ValidationError("Ministries are required when isMemberOfMinistry is true")
    return cleaned


def validate_attendance(payload):
    """Validate a check-in payload and return the fields to store."""
    email = _clean_str(payload.get("email"))
    full_name = _clean_str(payload.get("fullName"))
    is_member = payload.get("isMemberOfMinistry")

    if isinstance(is_member, str) and not is_member.strip():
        is_member = None
    if not email or not full_name or is_member is None:
        raise ValidationError("Missing required fields", {"required": REQUIRED_FIELDS})

    is_member = parse_bool(is_member, "isMemberOfMinistry")

    if is_member:
        ministries = normalize_ministries(payload.get("ministries"), _clean_str(payload.get("ministry")))
    else:
        ministries = []

    return {
        "email": email,
        "fullName": full_name,
        "contact": _clean_str(payload.get("contact")),
        "isMemberOfMinistry": is_member,
        "ministries": ministries,
    }


def parse_date(value, field_name):
    """Parse a query date into a naive UTC datetime.

    Accepts ``YYYY-MM-DD`` (midnight UTC) and ISO-8601 datetimes; a
    trailing ``Z`` or an explicit offset is converted to UTC.
    """
    if value is None or not value.strip():
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        raise ValidationError(f"Invalid {field_name}", {"field": field_name, "value": value})

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed
