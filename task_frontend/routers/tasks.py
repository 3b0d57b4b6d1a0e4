import logging
from typing import Dict, Optional

from fastapi import APIRouter, Depends, Request

from ..schemas.task import (
    STATUS_OPTIONS,
    CreateTaskRequest,
    TaskStatus,
    UpdateTaskRequest,
    format_task,
)
from ..services.task_service import TaskService, get_task_service
from ..templating import render, render_error, render_not_found
from ..utils.dates import extract_date_parts, parse_date_parts
from ..utils.errors import NotFound, OtherFailure, ValidationFailure, classify_error
from ..utils.flash import read_flash, redirect_with_flash
from ..utils.validation import construct_errors, validate_task_form

logger = logging.getLogger(__name__)

router = APIRouter()

# Task ids are numeric-only so these routes never shadow /tasks/new.
TASK_PATH = "/tasks/{task_id:int}"


async def _read_task_form(request: Request, task_id: Optional[int] = None) -> dict:
    form = await request.form()
    return {
        "id": task_id,
        "title": form.get("title", ""),
        "description": form.get("description", ""),
        "status": form.get("status", ""),
        "due_date_day": form.get("dueDate-day", ""),
        "due_date_month": form.get("dueDate-month", ""),
        "due_date_year": form.get("dueDate-year", ""),
    }


def _remote_form_errors(error: Exception, fallback_message: str) -> Dict[str, str]:
    result = classify_error(error)
    if isinstance(result, ValidationFailure):
        if result.validation_errors:
            return construct_errors(result.validation_errors)
        return {"_message": result.message}
    if isinstance(result, (NotFound, OtherFailure)):
        return {"_message": fallback_message}
    raise TypeError(f"Unhandled error result: {result!r}")


def _render_new(request: Request, task: dict, errors: Optional[Dict[str, str]] = None):
    return render(request, "tasks/new.html", {"task": task, "errors": errors})


def _render_edit(request: Request, task: dict, errors: Optional[Dict[str, str]] = None):
    return render(request, "tasks/edit.html", {
        "task": task,
        "status_options": STATUS_OPTIONS,
        "errors": errors,
    })


# ---------------------------------------------------------------- create

@router.get("/tasks/new")
async def new_task_form(request: Request):
    """Show the create task form."""
    return _render_new(request, {
        "title": "",
        "description": "",
        "due_date_day": "",
        "due_date_month": "",
        "due_date_year": "",
    })


@router.post("/tasks")
async def create_task(request: Request, service: TaskService = Depends(get_task_service)):
    """Submit the create task form."""
    form_data = await _read_task_form(request)
    day = form_data["due_date_day"]
    month = form_data["due_date_month"]
    year = form_data["due_date_year"]

    client_errors = validate_task_form(form_data["title"], day, month, year)
    if client_errors:
        return _render_new(request, form_data, client_errors)

    try:
        created = await service.create_task(CreateTaskRequest(
            title=form_data["title"],
            description=form_data["description"] or None,
            due_date=parse_date_parts(day, month, year),
            status=TaskStatus.PENDING,
        ))
    except Exception as e:
        logger.exception("Error creating task")
        return _render_new(request, form_data, _remote_form_errors(e, "Unable to create task. Please try again."))

    return redirect_with_flash(f"/tasks/{created.id}", "Task created successfully")


# ---------------------------------------------------------------- view

@router.get(TASK_PATH)
async def view_task(request: Request, task_id: int, service: TaskService = Depends(get_task_service)):
    """Show a single task."""
    try:
        task = format_task(await service.get_task_by_id(task_id))
    except Exception as e:
        logger.exception("Error fetching task %s", task_id)
        if isinstance(classify_error(e), NotFound):
            return render_not_found(request, "Task not found")
        return render(request, "tasks/view.html", {
            "task": None,
            "error": {
                "title": "There is a problem",
                "message": "Unable to load task. Please try again later.",
            },
        })

    return render(request, "tasks/view.html", {
        "task": task,
        "error": None,
        **read_flash(request.query_params),
    })


# ---------------------------------------------------------------- edit

@router.get(TASK_PATH + "/edit")
async def edit_task_form(request: Request, task_id: int, service: TaskService = Depends(get_task_service)):
    """Show the edit form pre-populated from the API."""
    try:
        task = await service.get_task_by_id(task_id)
        day, month, year = extract_date_parts(task.due_date)
    except Exception as e:
        logger.exception("Error fetching task %s for edit", task_id)
        if isinstance(classify_error(e), NotFound):
            return render_not_found(request, "Task not found")
        return render_error(request, "Unable to load task for editing")

    return _render_edit(request, {
        "id": task.id,
        "title": task.title,
        "description": task.description or "",
        "status": task.status.value,
        "due_date_day": day,
        "due_date_month": month,
        "due_date_year": year,
    })


@router.post(TASK_PATH + "/edit")
async def update_task(request: Request, task_id: int, service: TaskService = Depends(get_task_service)):
    """Submit the edit form."""
    form_data = await _read_task_form(request, task_id)
    day = form_data["due_date_day"]
    month = form_data["due_date_month"]
    year = form_data["due_date_year"]

    client_errors = validate_task_form(form_data["title"], day, month, year, status=form_data["status"])
    if client_errors:
        return _render_edit(request, form_data, client_errors)

    try:
        await service.update_task(task_id, UpdateTaskRequest(
            title=form_data["title"],
            description=form_data["description"] or None,
            due_date=parse_date_parts(day, month, year),
            status=TaskStatus(form_data["status"]),
        ))
    except Exception as e:
        logger.exception("Error updating task %s", task_id)
        return _render_edit(request, form_data, _remote_form_errors(e, "Unable to update task. Please try again."))

    return redirect_with_flash(f"/tasks/{task_id}", "Task updated successfully")


# ---------------------------------------------------------------- delete

@router.get(TASK_PATH + "/delete")
async def delete_task_confirmation(request: Request, task_id: int, service: TaskService = Depends(get_task_service)):
    """Show the delete confirmation page."""
    try:
        task = format_task(await service.get_task_by_id(task_id))
    except Exception as e:
        logger.exception("Error fetching task %s for deletion", task_id)
        if isinstance(classify_error(e), NotFound):
            return render_not_found(request, "Task not found")
        return render_error(request, "Unable to load task")

    return render(request, "tasks/delete.html", {"task": task, "error": None})


# HTML forms only support GET/POST, so deletion is a POST here; the service
# issues the actual DELETE to the API.
@router.post(TASK_PATH + "/delete")
async def delete_task(request: Request, task_id: int, service: TaskService = Depends(get_task_service)):
    """Delete the task and return to the list."""
    try:
        await service.delete_task(task_id)
    except Exception as e:
        logger.exception("Error deleting task %s", task_id)
        if isinstance(classify_error(e), NotFound):
            return render_not_found(request, "Task not found")

        # Re-render the confirmation page with an error if the task can still be loaded.
        try:
            task = format_task(await service.get_task_by_id(task_id))
        except Exception:
            logger.exception("Error re-fetching task %s after failed delete", task_id)
            return render_error(request, "Unable to delete task")

        return render(request, "tasks/delete.html", {
            "task": task,
            "error": {
                "title": "There is a problem",
                "message": "Unable to delete task. Please try again later.",
            },
        })

    return redirect_with_flash("/", "Task deleted successfully")
