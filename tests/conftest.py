import pytest
from fastapi.testclient import TestClient

from task_frontend.api import ApiClient
from task_frontend.config import ApiConfig, Settings
from task_frontend.main import create_app
from task_frontend.services.task_service import TaskService, get_task_service

from .fakes import FakeTaskApi


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        api=ApiConfig(base_url="http://task-api.test", base_path="/api"),
        app_env="test",
        log_level="WARNING",
    )


@pytest.fixture()
def task_api() -> FakeTaskApi:
    return FakeTaskApi()


@pytest.fixture()
def task_service(settings: Settings, task_api: FakeTaskApi) -> TaskService:
    return TaskService(ApiClient(settings.api, transport=task_api.transport))


@pytest.fixture()
def client(settings: Settings, task_service: TaskService):
    app = create_app(settings)
    app.dependency_overrides[get_task_service] = lambda: task_service
    with TestClient(app) as test_client:
        yield test_client
