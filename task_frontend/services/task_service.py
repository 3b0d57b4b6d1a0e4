from fastapi import Request

from ..api import ApiClient
from ..schemas.task import (
    CreateTaskRequest,
    PageResponse,
    Task,
    TaskSearchParams,
    UpdateTaskRequest,
)


class TaskService:
    """Typed operations on the task API, one REST call each."""

    def __init__(self, client: ApiClient):
        self.client = client

    async def search_tasks(self, params: TaskSearchParams) -> PageResponse[Task]:
        data = await self.client.get("tasks", params=params.to_query_params())
        return PageResponse[Task].model_validate(data)

    async def get_task_by_id(self, task_id: int) -> Task:
        data = await self.client.get(f"tasks/{task_id}")
        return Task.model_validate(data)

    async def create_task(self, data: CreateTaskRequest) -> Task:
        created = await self.client.post("tasks", data.to_payload())
        return Task.model_validate(created)

    async def update_task(self, task_id: int, data: UpdateTaskRequest) -> Task:
        updated = await self.client.put(f"tasks/{task_id}", data.to_payload())
        return Task.model_validate(updated)

    async def delete_task(self, task_id: int) -> None:
        await self.client.delete(f"tasks/{task_id}")


def get_task_service(request: Request) -> TaskService:
    """Dependency to get the task service built at app startup."""
    return request.app.state.task_service
