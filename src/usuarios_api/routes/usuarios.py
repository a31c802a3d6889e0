"""Usuario API routes."""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request

from usuarios_api.errors import UsuarioNotFoundError
from usuarios_api.models.usuario import Usuario
from usuarios_api.services import get_user_store
from usuarios_api.services.user_store import UserStore
from usuarios_api.validation import MISSING, ValidationFailure, validate_nombre

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/usuarios", tags=["usuarios"], redirect_slashes=False)

_FORM_MEDIA_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def _media_type(request: Request) -> str:
    content_type = request.headers.get("content-type", "")
    return content_type.split(";", 1)[0].strip().lower()


def _is_json(media_type: str) -> bool:
    return media_type == "application/json" or media_type.endswith("+json")


async def read_body(request: Request) -> dict[str, Any]:
    """Read the request body as JSON or as a form.

    Only JSON and form media types are parsed. Any other body, and bodies
    that are empty, unparsable or not an object, come back as an empty dict,
    so the validator reports the name as missing.
    """
    media_type = _media_type(request)
    if media_type in _FORM_MEDIA_TYPES:
        form = await request.form()
        return dict(form)

    if not _is_json(media_type):
        return {}

    raw = await request.body()
    if not raw:
        return {}
    try:
        body = await request.json()
    except ValueError:
        logger.debug("Ignoring unparsable request body")
        return {}
    return body if isinstance(body, dict) else {}


def _get_or_404(store: UserStore, usuario_id: str) -> Usuario:
    usuario = store.find_by_id(usuario_id)
    if usuario is None:
        raise UsuarioNotFoundError(usuario_id)
    return usuario


def _validated_nombre(body: dict[str, Any]) -> str:
    result = validate_nombre(body.get("nombre", MISSING))
    if isinstance(result, ValidationFailure):
        raise result.error
    return result.value.nombre


@router.get("", response_model=list[Usuario])
@router.get("/", response_model=list[Usuario])
async def list_usuarios(store: UserStore = Depends(get_user_store)) -> list[Usuario]:
    return store.list_usuarios()


@router.get("/{usuario_id}", response_model=Usuario)
@router.get("/{usuario_id}/", response_model=Usuario)
async def get_usuario(usuario_id: str, store: UserStore = Depends(get_user_store)) -> Usuario:
    return _get_or_404(store, usuario_id)


@router.post("", response_model=Usuario)
@router.post("/", response_model=Usuario)
async def create_usuario(request: Request, store: UserStore = Depends(get_user_store)) -> Usuario:
    """Create a user from ``{"nombre": ...}``.

    Answers 200 (not 201) with the new record.
    """
    nombre = _validated_nombre(await read_body(request))
    return store.create(nombre)


@router.put("/{usuario_id}", response_model=Usuario)
@router.put("/{usuario_id}/", response_model=Usuario)
async def update_usuario(usuario_id: str, request: Request, store: UserStore = Depends(get_user_store)) -> Usuario:
    """Rename a user. The id is checked before the body is validated."""
    usuario = _get_or_404(store, usuario_id)
    nombre = _validated_nombre(await read_body(request))
    return store.update(usuario, nombre)


@router.delete("/{usuario_id}", response_model=Usuario)
@router.delete("/{usuario_id}/", response_model=Usuario)
async def delete_usuario(usuario_id: str, store: UserStore = Depends(get_user_store)) -> Usuario:
    usuario = _get_or_404(store, usuario_id)
    return store.delete(usuario)
