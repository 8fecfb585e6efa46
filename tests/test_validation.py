from book_store_api.app.services.validation import (
    AUTHOR_ERROR,
    TITLE_ERROR,
    YEAR_ERROR,
    normalize_book,
    validate_book,
)


def test_valid_minimal_book():
    assert validate_book({"title": "T", "author": "A"}) == []


def test_missing_title_and_author_are_both_reported():
    assert validate_book({}) == [TITLE_ERROR, AUTHOR_ERROR]


def test_whitespace_and_non_string_values_rejected():
    errors = validate_book({"title": "   ", "author": 42})
    assert errors == [TITLE_ERROR, AUTHOR_ERROR]


def test_all_violations_collected():
    errors = validate_book({"title": "", "author": "", "year": -1})
    assert errors == [TITLE_ERROR, AUTHOR_ERROR, YEAR_ERROR]


def test_year_bounds():
    assert validate_book({"title": "T", "author": "A", "year": 0}, current_year=2024) == []
    assert validate_book({"title": "T", "author": "A", "year": 2024}, current_year=2024) == []
    assert validate_book({"title": "T", "author": "A", "year": 2025}, current_year=2024) == [YEAR_ERROR]
    assert validate_book({"title": "T", "author": "A", "year": -5}, current_year=2024) == [YEAR_ERROR]


def test_year_type_checks():
    base = {"title": "T", "author": "A"}
    assert validate_book({**base, "year": 1999.0}) == []
    assert validate_book({**base, "year": 1999.5}) == [YEAR_ERROR]
    assert validate_book({**base, "year": "1999"}) == [YEAR_ERROR]
    assert validate_book({**base, "year": True}) == [YEAR_ERROR]
    assert validate_book({**base, "year": None}) == []


def test_genre_is_unconstrained():
    assert validate_book({"title": "T", "author": "A", "genre": 123}) == []


def test_normalize_trims_and_defaults():
    fields = normalize_book({"title": "  Dune ", "author": " Frank Herbert", "genre": "  Sci-Fi "})
    assert fields == {"title": "Dune", "author": "Frank Herbert", "year": None, "genre": "Sci-Fi"}


def test_normalize_keeps_zero_year_and_drops_empty_genre():
    fields = normalize_book({"title": "T", "author": "A", "year": 0, "genre": ""})
    assert fields["year"] == 0
    assert fields["genre"] is None


def test_normalize_converts_integral_float_year():
    assert normalize_book({"title": "T", "author": "A", "year": 1965.0})["year"] == 1965


def test_normalize_drops_non_string_genre():
    assert normalize_book({"title": "T", "author": "A", "genre": ["x"]})["genre"] is None
    assert normalize_book({"title": "T", "author": "A", "genre": 7})["genre"] is None
