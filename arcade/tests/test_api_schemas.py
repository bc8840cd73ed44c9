"""
Tests for API schemas and OpenAPI generation.
"""

import subprocess
import sys
from pathlib import Path

import pytest
from pydantic import ValidationError


class TestPydanticSchemas:
    """Tests for request/response models."""

    def test_action_request_defaults(self):
        from arcade.api.schemas import ActionRequest, ActionName

        request = ActionRequest(type="tick")
        assert request.type == ActionName.TICK
        assert request.direction is None
        assert request.alternate_starter is False

    def test_negative_index_rejected(self):
        from arcade.api.schemas import ActionRequest

        with pytest.raises(ValidationError):
            ActionRequest(type="click", index=-1)

    def test_unknown_action_rejected(self):
        from arcade.api.schemas import ActionRequest

        with pytest.raises(ValidationError):
            ActionRequest(type="fly")

    def test_error_response_schema(self):
        from arcade.api.schemas import ErrorResponse, ErrorCode

        error = ErrorResponse(
            error="Session abc not found",
            error_code=ErrorCode.SESSION_NOT_FOUND,
        )
        data = error.model_dump(mode="json")
        assert data["error_code"] == "SESSION_NOT_FOUND"
        assert data["details"] is None


class TestErrorCodes:
    def test_error_code_values_are_strings(self):
        from arcade.api.schemas import ErrorCode

        for code in ErrorCode:
            assert isinstance(code.value, str)
            assert code.value == code.name


class TestPackageImport:
    def test_package_import_does_not_build_app(self):
        """Importing arcade.api leaves the app module (and its score store) unloaded."""
        code = "import sys, arcade.api; print('arcade.api.app' in sys.modules)"
        out = subprocess.run(
            [sys.executable, "-c", code],
            cwd=Path(__file__).resolve().parents[2],
            capture_output=True,
            text=True,
            check=True,
        )
        assert out.stdout.strip() == "False"


class TestOpenAPISchema:
    """Tests for OpenAPI schema generation."""

    @pytest.fixture
    def schema(self):
        from arcade.api.app import app
        from fastapi.openapi.utils import get_openapi

        return get_openapi(title=app.title, version=app.version, routes=app.routes)

    def test_paths_present(self, schema):
        paths = schema["paths"]
        assert "/api/v1/sessions" in paths
        assert "/api/v1/sessions/{session_id}" in paths
        assert "/api/v1/sessions/{session_id}/actions" in paths
        assert "/api/v1/sessions/{session_id}/solution" in paths
        assert "/api/v1/sessions/{session_id}/hint" in paths
        assert "/health" in paths

    def test_response_models_in_schema(self, schema):
        components = schema["components"]["schemas"]
        for name in ["SessionResponse", "ActionResponse", "SolutionResponse", "ErrorResponse"]:
            assert name in components
