from typing import Mapping, Optional

from ..schemas.task import TaskSearchParams
from .dates import parse_date_parts


def _int_or_default(raw: Optional[str], default: int, minimum: int) -> int:
    try:
        value = int(raw) if raw is not None else default
    except ValueError:
        return default
    return value if value >= minimum else default


def extract_task_search_params(query: Mapping[str, str]) -> TaskSearchParams:
    """Extract task search parameters from the request query string."""
    search = (query.get("search") or "").strip()
    status = query.get("status") or None

    due_date_from = parse_date_parts(
        query.get("dueDateFrom-day"),
        query.get("dueDateFrom-month"),
        query.get("dueDateFrom-year"),
    )
    due_date_to = parse_date_parts(
        query.get("dueDateTo-day"),
        query.get("dueDateTo-month"),
        query.get("dueDateTo-year"),
    )

    return TaskSearchParams(
        page=_int_or_default(query.get("page"), 0, minimum=0),
        size=_int_or_default(query.get("size"), 20, minimum=1),
        search=search or None,
        status=status,
        due_date_from=due_date_from,
        due_date_to=due_date_to,
    )
