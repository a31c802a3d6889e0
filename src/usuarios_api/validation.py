"""Validation of incoming user names.

``validate_nombre`` never raises: it returns either a
:class:`ValidationSuccess` holding the accepted value or a
:class:`ValidationFailure` holding a :class:`ValidationError` whose message
names the broken constraint. Callers decide whether to raise.
"""

import logging
from dataclasses import dataclass
from typing import Any

import pydantic

from usuarios_api.errors import ValidationError
from usuarios_api.models.usuario import UsuarioIn

logger = logging.getLogger(__name__)

MIN_NOMBRE_LENGTH = 3

# Marks a field that was not supplied at all, as opposed to an explicit null
MISSING: Any = object()


@dataclass(frozen=True)
class ValidationSuccess:
    value: UsuarioIn
    ok: bool = True


@dataclass(frozen=True)
class ValidationFailure:
    error: ValidationError
    ok: bool = False


ValidationResult = ValidationSuccess | ValidationFailure


def _message_for(error: dict[str, Any], value: Any) -> str:
    field = ".".join(str(part) for part in error.get("loc", ())) or "nombre"
    error_type = error.get("type")

    if error_type == "missing":
        return f'"{field}" is required'
    if error_type == "string_type":
        return f'"{field}" must be a string'
    if error_type == "string_too_short":
        if value == "":
            return f'"{field}" is not allowed to be empty'
        min_length = error.get("ctx", {}).get("min_length", MIN_NOMBRE_LENGTH)
        return f'"{field}" length must be at least {min_length} characters long'
    return f'"{field}" is invalid: {error.get("msg", "unknown error")}'


def validate_nombre(nombre: Any = MISSING) -> ValidationResult:
    """Check a candidate user name.

    Args:
        nombre: Raw value from the request body. Leave it as ``MISSING``
            when the field was not supplied; an explicit ``None`` is a
            value and fails as a non-string.

    Returns:
        ValidationSuccess with the parsed payload, or ValidationFailure with
        the first violated constraint.
    """
    data = {} if nombre is MISSING else {"nombre": nombre}
    try:
        value = UsuarioIn.model_validate(data, strict=True)
    except pydantic.ValidationError as e:
        first = e.errors()[0]
        message = _message_for(first, nombre)
        logger.debug("Rejected nombre %r: %s", nombre, message)
        return ValidationFailure(error=ValidationError(message))
    return ValidationSuccess(value=value)
