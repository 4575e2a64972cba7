import pytest
from pydantic import ValidationError

from krea_mcp.schemas.result import ErrorKind, OperationFailed, OperationResult


def test_ok_carries_value_only():
    result = OperationResult.ok(False)

    assert result.success is True
    assert result.value is False
    assert result.error is None
    assert result.unwrap() is False


def test_fail_carries_error_only():
    result = OperationResult.fail(ErrorKind.NOT_FOUND, "Job not found", status_code=404)

    assert result.success is False
    assert result.value is None
    assert result.error.kind == ErrorKind.NOT_FOUND
    assert result.error.status_code == 404


def test_unwrap_raises_on_failure():
    result = OperationResult.fail(ErrorKind.TIMEOUT, "Request timed out")

    with pytest.raises(OperationFailed) as exc_info:
        result.unwrap()

    assert exc_info.value.error.kind == ErrorKind.TIMEOUT


@pytest.mark.parametrize(
    "kwargs",
    [
        {"success": True},
        {"success": True, "value": 1, "error": {"kind": "timeout", "message": "x"}},
        {"success": False},
        {"success": False, "value": 1, "error": {"kind": "timeout", "message": "x"}},
    ],
)
def test_exactly_one_side_is_populated(kwargs):
    with pytest.raises(ValidationError):
        OperationResult(**kwargs)
