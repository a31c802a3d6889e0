"""Greeting route at the server root."""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from usuarios_api.config import Settings
from usuarios_api.services import get_app_settings

router = APIRouter(tags=["root"])


@router.get("/", response_class=PlainTextResponse)
async def greeting(settings: Settings = Depends(get_app_settings)) -> str:
    return settings.greeting
