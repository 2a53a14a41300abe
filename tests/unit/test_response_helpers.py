"""Unit tests for response helpers."""
import importlib
import json
import warnings

from snippet_registry.core.exceptions import MissingBindingError, NotFoundError
from snippet_registry.utils import response_helpers
from snippet_registry.utils.response_helpers import ResponseHelper

class TestResponseHelper:
    """Test error envelopes and status mapping."""

    def test_module_imports_without_deprecation_warnings(self):
        """Test building the status mapping uses no deprecated status names."""
        with warnings.catch_warnings():
            warnings.simplefilter("error", DeprecationWarning)
            module = importlib.reload(response_helpers)

        assert module.ResponseHelper.STATUS_MAPPING["MISSING_BINDING"] == 422
        assert module.ResponseHelper.STATUS_MAPPING["MALFORMED_TEMPLATE"] == 422

    def test_missing_binding_response(self):
        """Test a missing binding maps to 422 with the placeholder in details."""
        response = ResponseHelper.create_error_from_exception(MissingBindingError("greet", "name"), "req_1")
        body = json.loads(response.body)

        assert response.status_code == 422
        assert body["success"] is False
        assert body["error"]["code"] == "MISSING_BINDING"
        assert body["error"]["details"]["placeholder"] == "name"
        assert body["metadata"]["request_id"] == "req_1"

    def test_not_found_response(self):
        """Test an unknown template maps to 404."""
        response = ResponseHelper.create_error_from_exception(NotFoundError("missing"))

        assert response.status_code == 404
