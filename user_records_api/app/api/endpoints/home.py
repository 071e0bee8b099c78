"""Root endpoint returning a plain-text welcome message."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from ...core.config import settings

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def home_page() -> str:
    return f"Welcome to the {settings.project_name}!"
