"""
Tests for exception handlers
"""
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.core.exception import BaseAppError, NotFoundError
from src.core.handler import init as init_exception_handlers


class PickerStateError(BaseAppError):
    pass


@pytest.fixture
def failing_client():
    app = FastAPI()
    init_exception_handlers(app)

    @app.get("/crash")
    async def crash():
        raise RuntimeError("boom")

    @app.get("/app-error")
    async def app_error():
        raise PickerStateError("Picker already dismissed")

    @app.get("/missing")
    async def missing():
        raise NotFoundError("Country with code 'ZZ' not found")

    return TestClient(app, raise_server_exceptions=False)


def test_unhandled_error_returns_json_500(failing_client, caplog):
    """Unexpected errors keep the error JSON shape and are logged with a traceback"""
    with caplog.at_level("ERROR"):
        response = failing_client.get("/crash")

    assert response.status_code == 500
    assert response.headers["content-type"].startswith("application/json")
    assert response.json() == {"type": "InternalServerError", "error": "Internal server error"}
    assert any(record.exc_info for record in caplog.records if "boom" in record.getMessage())


def test_app_error_returns_400_with_class_name(failing_client):
    response = failing_client.get("/app-error")

    assert response.status_code == 400
    assert response.json() == {"type": "PickerStateError", "error": "Picker already dismissed"}


def test_not_found_error_keeps_404(failing_client):
    response = failing_client.get("/missing")

    assert response.status_code == 404
    assert response.json()["type"] == "NotFoundError"
