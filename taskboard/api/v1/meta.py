"""Meta endpoints for localization and task list options."""
from __future__ import annotations

from typing import Dict

from fastapi import APIRouter, Depends

from taskboard.config import settings
from taskboard.core.exceptions import NotFoundError
from taskboard.dependencies import get_locale
from taskboard.localization.helpers import get_translation
from taskboard.localization.translations import TRANSLATIONS, get_available_locales
from taskboard.models.task import TaskPriority
from taskboard.schemas.view import LabeledOption, SortField, StatusFilter, ViewOptionsResponse

router = APIRouter()


@router.get("/locales", response_model=Dict[str, str])
async def available_locales():
    """Return list of supported locales."""
    return get_available_locales()


@router.get("/translations/{locale}", response_model=Dict[str, str])
async def translations(locale: str):
    """Return translation bundle for locale."""
    bundle = TRANSLATIONS.get(locale.lower())
    if not bundle:
        raise NotFoundError(
            get_translation("errors.locale_not_supported", settings.DEFAULT_LOCALE, code=locale)
        )
    return bundle


@router.get("/options", response_model=ViewOptionsResponse)
async def view_options(locale: str = Depends(get_locale)):
    """Filter, sort and paging choices for the task list, labelled for ``locale``."""
    return ViewOptionsResponse(
        locale=locale,
        priorities=[
            LabeledOption(value=p.value, label=get_translation(f"priority.{p.value}", locale))
            for p in TaskPriority
        ],
        statuses=[
            LabeledOption(value=s.value, label=get_translation(f"status.{s.value}", locale))
            for s in (StatusFilter.PENDING, StatusFilter.COMPLETED)
        ],
        sort_fields=[
            LabeledOption(value=f.value, label=get_translation(f"sort.{f.name}", locale))
            for f in SortField
        ],
        page_size_options=settings.PAGE_SIZE_OPTIONS,
        default_page_size=settings.DEFAULT_PAGE_SIZE,
        max_page_links=settings.MAX_PAGE_LINKS,
    )
