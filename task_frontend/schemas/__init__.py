from .task import (
    STATUS_OPTIONS,
    CreateTaskRequest,
    PageMetadata,
    PageResponse,
    Task,
    TaskSearchParams,
    TaskStatus,
    UpdateTaskRequest,
    format_task,
)

# Export all schemas for easy importing
__all__ = [
    "STATUS_OPTIONS",
    "CreateTaskRequest",
    "PageMetadata",
    "PageResponse",
    "Task",
    "TaskSearchParams",
    "TaskStatus",
    "UpdateTaskRequest",
    "format_task",
]
