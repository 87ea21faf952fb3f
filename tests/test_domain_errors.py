"""
Tests for the domain error taxonomy and the status mapping table.

No external dependencies or IO required.
"""

import pytest

from app.domain.errors import (
    STATUS_BY_KIND,
    BadRequestError,
    ConflictError,
    DomainError,
    ErrorKind,
    ForbiddenError,
    InternalServerError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
    is_legacy_validation_message,
    kind_from_name,
    status_of,
)

EXPECTED_STATUS = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.BAD_REQUEST: 400,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
    ErrorKind.INTERNAL: 500,
}


class TestStatusTable:
    """Tests for STATUS_BY_KIND and status_of."""

    @pytest.mark.parametrize("kind, status", EXPECTED_STATUS.items())
    def test_every_kind_maps_to_its_status(self, kind: ErrorKind, status: int) -> None:
        assert status_of(kind) == status

    def test_table_is_total_over_the_closed_set(self) -> None:
        assert set(STATUS_BY_KIND) == set(ErrorKind)

    def test_table_cannot_be_mutated(self) -> None:
        with pytest.raises(TypeError):
            STATUS_BY_KIND[ErrorKind.NOT_FOUND] = 410  # type: ignore[index]

    @pytest.mark.parametrize(
        "name, status",
        [
            ("NotFound", 404),
            ("NotFoundError", 404),
            ("ValidationError", 400),
            ("Conflict", 409),
            ("InternalServerError", 500),
        ],
    )
    def test_status_by_name(self, name: str, status: int) -> None:
        assert status_of(name) == status

    @pytest.mark.parametrize("name", ["Teapot", "notfound", "", "Validation failed"])
    def test_unknown_names_fall_back_to_500(self, name: str) -> None:
        assert status_of(name) == 500


class TestKindFromName:
    def test_resolves_kind_and_error_names(self) -> None:
        assert kind_from_name("Forbidden") is ErrorKind.FORBIDDEN
        assert kind_from_name("ForbiddenError") is ErrorKind.FORBIDDEN

    def test_non_strings_never_match(self) -> None:
        assert kind_from_name(None) is None
        assert kind_from_name(404) is None


class TestDomainErrors:
    """Tests for the DomainError subclasses."""

    @pytest.mark.parametrize(
        "error_cls, kind, name",
        [
            (ValidationError, ErrorKind.VALIDATION, "ValidationError"),
            (NotFoundError, ErrorKind.NOT_FOUND, "NotFoundError"),
            (BadRequestError, ErrorKind.BAD_REQUEST, "BadRequestError"),
            (UnauthorizedError, ErrorKind.UNAUTHORIZED, "UnauthorizedError"),
            (ForbiddenError, ErrorKind.FORBIDDEN, "ForbiddenError"),
            (ConflictError, ErrorKind.CONFLICT, "ConflictError"),
            (InternalServerError, ErrorKind.INTERNAL, "InternalServerError"),
        ],
    )
    def test_subclass_fixes_kind_and_name(
        self, error_cls: type[DomainError], kind: ErrorKind, name: str
    ) -> None:
        error = error_cls("something happened")
        assert isinstance(error, DomainError)
        assert error.kind is kind
        assert error.name == name
        assert error.message == "something happened"
        assert str(error) == "something happened"
        assert error.status_code == EXPECTED_STATUS[kind]


class TestLegacyMarker:
    def test_substring_anywhere_matches(self) -> None:
        assert is_legacy_validation_message("Validation failed: Name is required")
        assert is_legacy_validation_message("upstream said: Validation failed")

    def test_other_text_does_not_match(self) -> None:
        assert not is_legacy_validation_message("validation failed")
        assert not is_legacy_validation_message("Not found")
