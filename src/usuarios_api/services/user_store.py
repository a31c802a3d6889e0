"""In-memory user store for the Usuarios API."""

import logging
import re
from collections.abc import Iterable

from usuarios_api.models.usuario import Usuario

logger = logging.getLogger(__name__)

SEED_USUARIOS: tuple[tuple[int, str], ...] = (
    (1, "Juan"),
    (2, "Ana"),
    (3, "Karen"),
    (4, "Luis"),
)

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_id(raw_id: object) -> int | None:
    """Parse an id the way a leading-integer parse does.

    ``"2"``, ``" 2"`` and ``"2abc"`` all give 2. Anything without leading
    digits gives ``None``.
    """
    if isinstance(raw_id, bool):
        return None
    if isinstance(raw_id, int):
        return raw_id
    match = _LEADING_INT.match(str(raw_id))
    if match is None:
        return None
    return int(match.group(1))


class UserStore:
    """Ordered collection of user records held in memory.

    Ids come from a counter that only moves forward, so an id is never
    handed out twice even after deletions.
    """

    def __init__(self, seed: Iterable[tuple[int, str]] = SEED_USUARIOS) -> None:
        self._seed = tuple(seed)
        self._usuarios: list[Usuario] = []
        self._last_id = 0
        self.reset()

    def reset(self) -> None:
        """Restore the seed records and the id counter."""
        self._usuarios = [Usuario(id=usuario_id, nombre=nombre) for usuario_id, nombre in self._seed]
        self._last_id = max((u.id for u in self._usuarios), default=0)

    def __len__(self) -> int:
        return len(self._usuarios)

    def list_usuarios(self) -> list[Usuario]:
        return list(self._usuarios)

    def find_by_id(self, raw_id: object) -> Usuario | None:
        usuario_id = parse_id(raw_id)
        if usuario_id is None:
            return None
        return next((u for u in self._usuarios if u.id == usuario_id), None)

    def create(self, nombre: str) -> Usuario:
        self._last_id += 1
        usuario = Usuario(id=self._last_id, nombre=nombre)
        self._usuarios.append(usuario)
        logger.info("Created usuario %s", usuario.id)
        return usuario

    def update(self, usuario: Usuario, nombre: str) -> Usuario:
        usuario.nombre = nombre
        logger.info("Updated usuario %s", usuario.id)
        return usuario

    def delete(self, usuario: Usuario) -> Usuario:
        """Remove the first record that is ``usuario`` itself."""
        for index, candidate in enumerate(self._usuarios):
            if candidate is usuario:
                del self._usuarios[index]
                logger.info("Deleted usuario %s", usuario.id)
                break
        return usuario
