"""
Field validators for request bodies.

Single-value checks return booleans; validate_schema() applies a schema of
per-field rules and returns a dict of field -> error message, empty when the
data is valid. ensure_valid() turns those errors into a BusinessLogicError.

A schema maps field names to rule dicts:

    {
        'prefix': {'required': True, 'pattern': PREFIX_PATTERN},
        'digits': {'custom': lambda value, data: None if ... else 'bad digits'},
    }

Rule keys:
    required: the value must be present and not blank
    pattern: compiled regex a string value must fully match
    custom: callable(value, data) returning an error message or None
    message: overrides the default message of the required/pattern checks
"""
import re
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, Optional

from alubill.exceptions import BusinessLogicError

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_PATTERN = re.compile(r"[0-9]{10,15}")
PHONE_SEPARATORS = re.compile(r"[\s-]")

Schema = Dict[str, Dict[str, Any]]


def _to_number(value) -> Optional[Decimal]:
    """Strict numeric read: numbers and numeric strings, else None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        number = Decimal(str(value))
    elif isinstance(value, str) and value.strip() and value.isascii():
        try:
            number = Decimal(value.strip())
        except InvalidOperation:
            return None
    else:
        return None
    return number if number.is_finite() else None


def required(value) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, (list, tuple)):
        return len(value) > 0
    return True


def email(value) -> bool:
    return isinstance(value, str) and EMAIL_PATTERN.fullmatch(value) is not None


def phone(value) -> bool:
    """10 to 15 digits once spaces and dashes are removed."""
    if not isinstance(value, str):
        return False
    return PHONE_PATTERN.fullmatch(PHONE_SEPARATORS.sub("", value)) is not None


def positive_number(value) -> bool:
    number = _to_number(value)
    return number is not None and number > 0


def non_negative_number(value) -> bool:
    number = _to_number(value)
    return number is not None and number >= 0


def decimal_places(value, places: int = 2) -> bool:
    """Unsigned decimal with at most `places` digits after the point ("12.5")."""
    if value is None or isinstance(value, bool):
        return False
    pattern = rf"[0-9]+(\.[0-9]{{1,{places}}})?"
    return re.fullmatch(pattern, str(value)) is not None


def min_length(value, minimum: int) -> bool:
    return isinstance(value, str) and len(value) >= minimum


def max_length(value, maximum: int) -> bool:
    return isinstance(value, str) and len(value) <= maximum


def number_in_range(value, minimum, maximum) -> bool:
    number = _to_number(value)
    return number is not None and Decimal(str(minimum)) <= number <= Decimal(str(maximum))


def optional(check: Callable[[Any], bool], message: str) -> Callable[[Any, Any], Optional[str]]:
    """Custom rule running `check` only when the field is present."""
    def rule(value, data):
        if value is None or value == "":
            return None
        return None if check(value) else message
    return rule


def validate_schema(data: Dict[str, Any], schema: Schema) -> Dict[str, str]:
    """
    Validate data against a schema.

    The first failing rule of a field wins; a missing required field is
    not checked further.
    """
    errors = {}

    for field, rules in schema.items():
        value = data.get(field)

        if rules.get('required') and not required(value):
            errors[field] = rules.get('message') or f"{field} is required"
            continue

        pattern = rules.get('pattern')
        if pattern is not None and isinstance(value, str) and pattern.fullmatch(value) is None:
            errors[field] = rules.get('message') or f"{field} has invalid format"
            continue

        custom = rules.get('custom')
        if custom is not None:
            error = custom(value, data)
            if error:
                errors[field] = error

    return errors


def ensure_valid(data: Dict[str, Any], schema: Schema) -> None:
    """Raise BusinessLogicError listing every field error."""
    errors = validate_schema(data, schema)
    if errors:
        message = '; '.join(errors.values())
        raise BusinessLogicError(message, payload={'errors': errors})
