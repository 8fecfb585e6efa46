"""
Field validation and normalization for books.

``validate_book`` checks a candidate set of fields and returns a list
of human readable messages, one per violated rule.  It never raises
and never short‑circuits, so a client sees every problem at once.
``normalize_book`` turns validated fields into their stored form.
"""

from datetime import date
from typing import Any, Dict, List, Mapping, Optional

TITLE_ERROR = "Title is required and must be a non-empty string"
AUTHOR_ERROR = "Author is required and must be a non-empty string"
YEAR_ERROR = "Year must be a valid integer between 0 and current year"


def _is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def _as_integer(value: Any) -> Optional[int]:
    """Return ``value`` as an int if it is integral, else ``None``.

    JSON numbers such as ``1999.0`` count as integers; booleans do not.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def validate_book(fields: Mapping[str, Any], current_year: Optional[int] = None) -> List[str]:
    """Validate candidate book fields.

    Parameters
    ----------
    fields : Mapping[str, Any]
        Candidate values keyed by field name.  Missing keys are treated
        as absent.
    current_year : Optional[int]
        Upper bound for ``year``.  Defaults to the calendar year at the
        time of the call.

    Returns
    -------
    List[str]
        Error messages; empty when the candidate is valid.
    """
    if current_year is None:
        current_year = date.today().year

    errors: List[str] = []
    if not _is_non_empty_string(fields.get("title")):
        errors.append(TITLE_ERROR)
    if not _is_non_empty_string(fields.get("author")):
        errors.append(AUTHOR_ERROR)

    year = fields.get("year")
    if year is not None:
        year_value = _as_integer(year)
        if year_value is None or not 0 <= year_value <= current_year:
            errors.append(YEAR_ERROR)

    # genre is unconstrained
    return errors


def normalize_book(fields: Mapping[str, Any]) -> Dict[str, Any]:
    """Return the stored form of validated fields.

    Title and author are trimmed.  A non‑empty string genre is trimmed;
    an empty or non‑string genre is stored as ``None``.  A year of
    ``None`` stays ``None``; zero is kept as zero.
    """
    year = fields.get("year")
    genre = fields.get("genre")
    return {
        "title": fields["title"].strip(),
        "author": fields["author"].strip(),
        "year": _as_integer(year) if year is not None else None,
        "genre": genre.strip() if isinstance(genre, str) and genre else None,
    }
