# External package imports
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse


router = APIRouter(tags=["health"])


@router.get("/", response_class=PlainTextResponse)
async def root() -> str:
    return "OK"


@router.get("/v1/", response_class=PlainTextResponse)
async def api_root() -> str:
    return "hi"
