from typing import Any, Dict, Iterable, Tuple
from urllib.parse import urlencode

from ..schemas.task import PageMetadata
from .flash import FLASH_PARAMS


def _page_url(query_items: Iterable[Tuple[str, str]], page_number: int) -> str:
    params = [(key, value) for key, value in query_items if key != "page" and key not in FLASH_PARAMS]
    params.append(("page", str(page_number)))
    return f"/?{urlencode(params)}"


def build_pagination(page: PageMetadata, query_items: Iterable[Tuple[str, str]]) -> Dict[str, Any]:
    """Build the pagination view-model for the task list.

    query_items are the current request's query pairs; page links keep the
    active filters and only swap the page number.
    """
    query_items = list(query_items)
    number = page.number
    total_pages = page.total_pages
    total_elements = page.total_elements

    is_first = number <= 0
    is_last = number >= total_pages - 1
    end_item = min((number + 1) * page.size, total_elements)
    # Past the last page the range collapses onto the last item.
    start_item = min(number * page.size + 1, end_item) if total_elements else 0

    return {
        "current_page": number,
        "total_pages": total_pages,
        "total_elements": total_elements,
        "size": page.size,
        "is_first": is_first,
        "is_last": is_last,
        "previous_url": None if is_first else _page_url(query_items, number - 1),
        "next_url": None if is_last else _page_url(query_items, number + 1),
        "items": [
            {"number": i + 1, "current": i == number, "href": _page_url(query_items, i)}
            for i in range(total_pages)
        ],
        "start_item": start_item,
        "end_item": end_item,
    }
