"""Exceptions raised by the store and the validator."""

USUARIO_NOT_FOUND_MESSAGE = "El usuario no se encuentra"


class UsuariosAPIError(Exception):
    """Base class for errors the API answers with a plain-text message."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UsuarioNotFoundError(UsuariosAPIError):
    """No user record matches the requested id."""

    status_code = 404

    def __init__(self, usuario_id: object) -> None:
        super().__init__(USUARIO_NOT_FOUND_MESSAGE)
        self.usuario_id = usuario_id


class ValidationError(UsuariosAPIError):
    """A user payload broke the name rule."""

    status_code = 400

    def __init__(self, message: str, field: str = "nombre") -> None:
        super().__init__(message)
        self.field = field
