from discography.core.exceptions import NotFoundError, PersistenceError, ValidationError
from discography.main import format_validation_errors


def test_not_found_response():
    err = NotFoundError("album", 3)
    assert err.status_code == 404
    assert err.to_response() == {"message": "Cannot find album with id 3"}


def test_validation_response_uses_error_key():
    err = ValidationError("body.year: Field required")
    assert err.status_code == 422
    assert err.to_response() == {"error": "body.year: Field required"}


def test_persistence_response_hides_detail():
    err = PersistenceError("UNIQUE constraint failed: albums.title", "create")
    assert err.status_code == 500
    assert err.to_response() == {"message": "An internal server error occurred."}


def test_format_validation_errors_joins_fields():
    errors = [
        {"loc": ("body", "title"), "msg": "Field required"},
        {"loc": ("body", "year"), "msg": "Input should be a valid integer"},
    ]
    assert format_validation_errors(errors) == (
        "body.title: Field required; body.year: Input should be a valid integer"
    )


def test_format_validation_errors_empty():
    assert format_validation_errors([]) == "Invalid request"
