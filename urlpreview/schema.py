from typing import Any, Dict, List

BOOL_FIELDS = ["isEnforced"]
ID_FIELDS = ["urlTableId", "urlFieldId"]
KNOWN_FIELDS = set(BOOL_FIELDS) | set(ID_FIELDS)


def _is_non_empty_str(v: Any) -> bool:
    return isinstance(v, str) and v.strip() != ""


def validate_settings_payload(data: Dict[str, Any]) -> List[str]:
    """
    Returns a list of validation error messages. Empty list means valid.
    Structural checks only; whether the ids exist is settled against the base.
    """
    errors: List[str] = []

    for f in BOOL_FIELDS:
        if f in data and not isinstance(data[f], bool):
            errors.append(f"Field '{f}' must be true or false")

    # Ids may be unset (null) but never blank
    for f in ID_FIELDS:
        if f in data and data[f] is not None and not _is_non_empty_str(data[f]):
            errors.append(f"Field '{f}' must be a non-empty string or null")

    for f in sorted(set(data) - KNOWN_FIELDS):
        errors.append(f"Unknown setting: {f}")

    return errors
