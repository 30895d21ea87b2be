"""Unit tests for book candidate validation."""

from datetime import date

import pytest

from src.catalog.entities.service.book import BookCandidate, validate_candidate


def _errors(candidate: BookCandidate) -> dict[str, str]:
    return {error.field: error.message for error in validate_candidate(candidate)}


class TestValidateCandidate:
    def test_valid_candidate_has_no_errors(self, make_candidate):
        assert validate_candidate(make_candidate()) == []

    def test_optional_fields_may_be_missing(self, make_candidate):
        candidate = make_candidate(genre=None, description=None, available=None)

        assert validate_candidate(candidate) == []

    def test_empty_candidate_reports_required_fields(self):
        assert _errors(BookCandidate()) == {
            "title": "Title is required",
            "author": "Author is required",
            "isbn": "ISBN is required",
            "publicationDate": "Publication date is required",
        }

    @pytest.mark.parametrize("blank", ["", "   ", "\t"])
    def test_blank_title_and_author(self, make_candidate, blank):
        errors = _errors(make_candidate(title=blank, author=blank))

        assert errors["title"] == "Title is required"
        assert errors["author"] == "Author is required"

    def test_length_limits(self, make_candidate):
        errors = _errors(
            make_candidate(
                title="t" * 201,
                author="a" * 101,
                genre="g" * 51,
                description="d" * 1001,
            )
        )

        assert errors == {
            "title": "Title must be between 1 and 200 characters",
            "author": "Author must be between 1 and 100 characters",
            "genre": "Genre must not exceed 50 characters",
            "description": "Description must not exceed 1000 characters",
        }

    def test_length_limits_are_inclusive(self, make_candidate):
        candidate = make_candidate(
            title="t" * 200,
            author="a" * 100,
            genre="g" * 50,
            description="d" * 1000,
        )

        assert validate_candidate(candidate) == []

    @pytest.mark.parametrize(
        "isbn, valid",
        [
            ("123456789", False),
            ("1234567890", True),
            ("1234567890123", True),
            ("12345678901234", False),
        ],
    )
    def test_isbn_length(self, make_candidate, isbn, valid):
        errors = _errors(make_candidate(isbn=isbn))

        assert ("isbn" not in errors) is valid


class TestBookCandidateParsing:
    def test_accepts_camel_case_wire_names(self):
        candidate = BookCandidate.model_validate(
            {"title": "T", "publicationDate": "2008-08-01"}
        )

        assert candidate.publication_date == date(2008, 8, 1)
        assert candidate.available is None

    def test_accepts_snake_case_names(self):
        candidate = BookCandidate.model_validate({"publication_date": "2008-08-01"})

        assert candidate.publication_date == date(2008, 8, 1)
