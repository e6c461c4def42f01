from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from ..scholarships.schemas import HealthResponse

router = APIRouter(tags=["System"])

HOMEPAGE_TEXT = "Homepage Endpoint"


def format_today(now: datetime) -> str:
    """Render a date as ``Today is: <day> <year> <Month>``."""
    return f"Today is: {now.day} {now.year} {now.strftime('%B')}"


@router.get("/", response_class=PlainTextResponse)
def homepage() -> str:
    return HOMEPAGE_TEXT


@router.get("/time", response_class=PlainTextResponse)
def time_page() -> str:
    return format_today(datetime.now())


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok")
