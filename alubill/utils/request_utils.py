"""Helpers for reading JSON request bodies in the API blueprints."""
from flask import request

from alubill.exceptions import BusinessLogicError


def get_json_object() -> dict:
    """Request body as a dict; anything else is a 400."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise BusinessLogicError('Request body must be a JSON object.')
    return data


def get_list(data: dict, key: str, required: bool = False) -> list:
    """List field of a request body. Missing optional lists are empty."""
    value = data.get(key)
    if value is None and not required:
        return []
    if not isinstance(value, list):
        raise BusinessLogicError(f"'{key}' must be a list.")
    return value


def get_int(data: dict, key: str, default: int, minimum: int = 0) -> int:
    """Integer field of a request body with a default."""
    value = data.get(key)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        raise BusinessLogicError(f"'{key}' must be an integer >= {minimum}.")
    return value
