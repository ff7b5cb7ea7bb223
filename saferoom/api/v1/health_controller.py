# External package imports
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse


router = APIRouter(tags=["health"])

HEALTH_MESSAGE = "Smart Safe Room AI backend is running ✅"


@router.get("/", response_class=PlainTextResponse)
async def health_check() -> str:
    """Liveness probe"""
    return HEALTH_MESSAGE
