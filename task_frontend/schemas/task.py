from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import datetime
from typing import Generic, List, Optional, TypeVar
import enum

from ..utils.dates import format_date, format_date_time, parse_timestamp

T = TypeVar("T")


class TaskStatus(str, enum.Enum):
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"

    @property
    def display_name(self) -> str:
        return _STATUS_DISPLAY_NAMES[self]


_STATUS_DISPLAY_NAMES = {
    TaskStatus.PENDING: "Pending",
    TaskStatus.IN_PROGRESS: "In Progress",
    TaskStatus.COMPLETED: "Completed",
}

# Status options for form select inputs.
STATUS_OPTIONS = [{"value": status.value, "text": status.display_name} for status in TaskStatus]


class Task(BaseModel):
    """Task as returned by the remote task API."""
    id: int
    title: str
    description: Optional[str] = None
    status: TaskStatus
    due_date: datetime = Field(alias="dueDate")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("due_date", "created_at", "updated_at", mode="before")
    @classmethod
    def _parse_timestamps(cls, value):
        # Naive timestamps are UTC; fractions of any length are accepted.
        if isinstance(value, str):
            return parse_timestamp(value)
        return value


class PageMetadata(BaseModel):
    size: int
    number: int
    total_elements: int = Field(alias="totalElements")
    total_pages: int = Field(alias="totalPages")

    model_config = ConfigDict(populate_by_name=True)


class PageResponse(BaseModel, Generic[T]):
    """Page envelope used by the API for list endpoints."""
    content: List[T]
    page: PageMetadata


class TaskSearchParams(BaseModel):
    """Query parameters for the paged task search."""
    page: int = 0
    size: int = 20
    search: Optional[str] = None
    status: Optional[str] = None
    due_date_from: Optional[str] = Field(default=None, alias="dueDateFrom")
    due_date_to: Optional[str] = Field(default=None, alias="dueDateTo")

    model_config = ConfigDict(populate_by_name=True)

    def to_query_params(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class TaskRequestBase(BaseModel):
    """Body shared by task create and update requests."""
    title: str
    description: Optional[str] = None
    due_date: str = Field(alias="dueDate")
    status: TaskStatus

    model_config = ConfigDict(populate_by_name=True)

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")


class CreateTaskRequest(TaskRequestBase):
    """Schema for creating new tasks."""
    pass


class UpdateTaskRequest(TaskRequestBase):
    """Schema for updating existing tasks."""
    pass


def format_task(task: Task) -> dict:
    """Build the template view-model for a task.

    The due date is shown without time since users only enter the day;
    createdAt/updatedAt are shown as full timestamps.
    """
    return {
        "id": task.id,
        "title": task.title,
        "description": task.description,
        "status": task.status.value,
        "status_display": task.status.display_name,
        "due_date": task.due_date,
        "due_date_formatted": format_date(task.due_date),
        "created_at_formatted": format_date_time(task.created_at),
        "updated_at_formatted": format_date_time(task.updated_at),
    }
