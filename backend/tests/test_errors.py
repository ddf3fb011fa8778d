import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from sitebuilder.domain.exceptions import StorageError
from sitebuilder.domain.invariants.exceptions import InvariantViolation
from sitebuilder.domain.invariants.section import assert_dense_positions, assert_unique_anchors
from sitebuilder.utils.transaction import transactional


def test_transient_failures_are_retryable():
    error = StorageError.from_exception(OperationalError("SELECT 1", {}, Exception("gone away")))
    assert error.retryable is True
    assert error.status_code == 503


def test_constraint_failures_are_not_retryable():
    error = StorageError.from_exception(IntegrityError("INSERT", {}, Exception("duplicate")))
    assert error.retryable is False


def test_transactional_wraps_storage_errors(app):
    with pytest.raises(StorageError) as excinfo:
        with transactional():
            raise OperationalError("UPDATE sections", {}, Exception("locked"))
    assert excinfo.value.retryable is True


def test_transactional_lets_domain_errors_through(app):
    with pytest.raises(InvariantViolation):
        with transactional():
            assert_dense_positions([0, 2])


def test_dense_positions():
    assert_dense_positions([])
    assert_dense_positions([2, 0, 1])
    for positions in ([1], [0, 0], [0, 1, 3]):
        with pytest.raises(InvariantViolation):
            assert_dense_positions(positions)


def test_unique_anchors():
    assert_unique_anchors(["a", None, None, "b"])
    with pytest.raises(InvariantViolation):
        assert_unique_anchors(["a", "b", "a"])
