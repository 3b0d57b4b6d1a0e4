from datetime import date
from typing import Dict, Mapping, Optional

from ..schemas.task import TaskStatus

_STATUS_VALUES = {status.value for status in TaskStatus}


def _is_real_date(day: str, month: str, year: str) -> bool:
    if not (day.isdecimal() and month.isdecimal() and year.isdecimal()):
        return False

    day_num = int(day)
    month_num = int(month)
    if not 1 <= day_num <= 31 or not 1 <= month_num <= 12 or len(year) != 4:
        return False

    # Catch dates that pass the range checks but don't exist (31 April, 30 February).
    try:
        date(int(year), month_num, day_num)
    except ValueError:
        return False
    return True


def validate_task_form(
    title: Optional[str],
    day: Optional[str],
    month: Optional[str],
    year: Optional[str],
    status: Optional[str] = None,
) -> Dict[str, str]:
    """Validate task form fields before submitting to the API.

    status is only checked when passed: None means the form has no status
    field (create), while an empty string means the field was left blank.

    Returns an errors dict keyed by field name, empty if the form is valid.
    """
    errors: Dict[str, str] = {}

    if not title:
        errors["title"] = "Enter a title"

    if not day or not month or not year:
        errors["dueDate"] = "Enter a due date"
    elif not _is_real_date(day, month, year):
        errors["dueDate"] = "Enter a real due date"

    if status is not None and status not in _STATUS_VALUES:
        errors["status"] = "Select a status"

    return errors


def construct_errors(validation_errors: Mapping[str, str]) -> Dict[str, str]:
    """Map the API's validationErrors to field messages for the form templates.

    Only known fields are included; unknown API fields are ignored.
    """
    errors: Dict[str, str] = {}

    if validation_errors.get("title"):
        errors["title"] = "Enter a title"

    if validation_errors.get("description"):
        errors["description"] = "Enter a description"

    if validation_errors.get("dueDate"):
        errors["dueDate"] = "Enter a valid due date"

    if validation_errors.get("status"):
        errors["status"] = "Select a status"

    return errors
