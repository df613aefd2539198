"""Page-link window for the task list pager."""
from __future__ import annotations

from typing import List, Optional

from taskboard.config import settings


def page_window(
    current_page: int,
    total_pages: int,
    max_links: Optional[int] = None,
) -> List[int]:
    """Page numbers to render as links.

    With ``total_pages <= max_links`` every page is returned. Otherwise a
    window of exactly ``max_links`` pages centred on ``current_page``; near
    either edge the window slides to stay inside ``1..total_pages``.
    """
    if max_links is None:
        max_links = settings.MAX_PAGE_LINKS
    if max_links < 1:
        raise ValueError(f"max_links must be >= 1, got {max_links}")

    if total_pages <= 0:
        return []
    if total_pages <= max_links:
        return list(range(1, total_pages + 1))

    start = current_page - (max_links - 1) // 2
    start = max(1, min(start, total_pages - max_links + 1))
    return list(range(start, start + max_links))
