"""
Unit tests for the error taxonomy.
"""

from admin_core.core.exceptions import (
    AdminError,
    ApiError,
    ClientValidationError,
    InvalidImportError,
    SaveInProgressError,
    SchemaImportError,
    TransportError,
)


class TestExceptions:
    """Tests for exception attributes and hierarchy."""

    def test_all_derive_from_admin_error(self):
        """Test every error is catchable as AdminError."""
        for error in (
            TransportError("down"),
            ApiError(500),
            ClientValidationError("name", "required"),
            InvalidImportError(),
            SchemaImportError("bad"),
            SaveInProgressError(),
        ):
            assert isinstance(error, AdminError)

    def test_api_error(self):
        """Test status, message and payload are kept."""
        error = ApiError(404, "Template not found", {"error": "Template not found"})

        assert error.status_code == 404
        assert error.message == "Template not found"
        assert error.payload == {"error": "Template not found"}
        assert error.is_not_found
        assert str(error) == "Template not found"

    def test_defaults(self):
        """Test default messages."""
        assert InvalidImportError().message == "Invalid JSON"
        assert ApiError(500).message == "Request failed"
        assert SchemaImportError("bad").errors == []

    def test_client_validation_field(self):
        """Test the offending field is recorded."""
        assert ClientValidationError("email", "Invalid").field == "email"
