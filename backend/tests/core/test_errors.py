"""Error Hierarchy — verifies codes, statuses and response envelopes.

Tests:
    - ValidationError → 400, NotFoundError → 404, StoreError → 500
    - MalformedIdentifierError is a StoreError
    - StoreError response never contains the internal detail
"""

from maze_api.core.errors import (
    MazeApiError, ValidationError, NotFoundError, StoreError,
    MalformedIdentifierError, ErrorCategory,
)


def test_validation_error_is_400():
    err = ValidationError("bad walls", field="walls")
    assert err.http_status == 400
    assert err.code == "VALIDATION_ERROR"
    assert err.field == "walls"
    assert err.category == ErrorCategory.VALIDATION


def test_not_found_error_message_and_status():
    err = NotFoundError("abc1234")
    assert err.http_status == 404
    assert err.message == "Maze not found with this ID."
    assert err.context.maze_id == "abc1234"


def test_store_error_hides_detail():
    err = StoreError("connection refused on 10.0.0.5", "create",
                     message="Server error while saving maze.")
    body = err.to_response()
    assert err.http_status == 500
    assert body["error"]["message"] == "Server error while saving maze."
    assert "10.0.0.5" not in str(body)
    assert err.detail == "connection refused on 10.0.0.5"


def test_malformed_identifier_is_store_error():
    err = MalformedIdentifierError("not/valid")
    assert isinstance(err, StoreError)
    assert isinstance(err, MazeApiError)
    assert err.maze_id == "not/valid"
    assert err.operation == "find_by_id"


def test_response_envelope_shape():
    body = NotFoundError("abc1234").to_response()
    assert set(body["error"]) == {
        "code", "message", "category", "severity", "timestamp",
    }
    assert body["error"]["category"] == "resource_not_found"
