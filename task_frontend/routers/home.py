import logging

from fastapi import APIRouter, Depends, Request

from ..schemas.task import STATUS_OPTIONS, format_task
from ..services.task_service import TaskService, get_task_service
from ..templating import render
from ..utils.flash import read_flash
from ..utils.pagination import build_pagination
from ..utils.query import extract_task_search_params

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/")
async def list_tasks(request: Request, service: TaskService = Depends(get_task_service)):
    """Task list with search, filters and pagination."""
    query = request.query_params
    context = {
        "filters": dict(query),
        "status_options": STATUS_OPTIONS,
        **read_flash(query),
    }

    try:
        search_params = extract_task_search_params(query)
        page_data = await service.search_tasks(search_params)
        tasks = [format_task(task) for task in page_data.content]
        pagination = build_pagination(page_data.page, query.multi_items())
    except Exception:
        logger.exception("Error fetching tasks")
        return render(request, "home.html", {
            **context,
            "tasks": [],
            "pagination": None,
            "error": {
                "title": "There is a problem",
                "message": "Unable to load tasks. Please try again later.",
            },
        })

    return render(request, "home.html", {
        **context,
        "tasks": tasks,
        "pagination": pagination,
        "error": None,
    })
