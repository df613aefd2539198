"""FastAPI dependencies."""
from fastapi import Request

from taskboard.config import settings
from taskboard.localization.helpers import get_locale_from_request


async def get_locale(request: Request) -> str:
    """Locale negotiated from the Accept-Language header."""
    return get_locale_from_request(request, default=settings.DEFAULT_LOCALE)
