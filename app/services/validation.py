"""
Field Validators

One validator per logical operation. Each takes the submitted JSON object
and returns the list of violation messages, in the order the fields were
checked. Validators never stop at the first problem and never touch the
store; an empty list means the record is acceptable.

Usage:
    from app.services.validation import validate_book

    errors = validate_book({"title": "", "author": "X", "genre": "Y", "price": 5})
    # ["Title is required"]
"""

import math
import re
from collections.abc import Mapping
from typing import Any

# local-part, "@", domain with a dotted suffix of 2-3 characters. ASCII only.
# Separators are mandatory inside the repeated groups to keep matching linear.
EMAIL_PATTERN = re.compile(
    r"^\w+(?:[.-]\w+)*@\w+(?:[.-]\w+)*(?:\.\w{2,3})+$", re.ASCII
)

MIN_PASSWORD_LENGTH = 6


def is_blank(value: Any) -> bool:
    """True when value is missing, not text, or only whitespace."""
    return not isinstance(value, str) or not value.strip()


def as_number(value: Any) -> float | None:
    """
    Interpret value as a finite number.

    Numbers and numeric strings are accepted; booleans, NaN and anything
    else yield None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    # float() also takes digit separators ("1_000"), which are not numbers here
    elif isinstance(value, str) and value.strip() and "_" not in value:
        try:
            number = float(value)
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def validate_registration(record: Mapping[str, Any]) -> list[str]:
    """Check a registration payload (name, email, password)."""
    errors = []

    if is_blank(record.get("name")):
        errors.append("Name is required")

    email = record.get("email")
    if is_blank(email):
        errors.append("Email is required")
    elif not EMAIL_PATTERN.fullmatch(email):
        errors.append("Please provide a valid email address")

    password = record.get("password")
    if not isinstance(password, str) or len(password) < MIN_PASSWORD_LENGTH:
        errors.append(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
        )

    return errors


def validate_login(record: Mapping[str, Any]) -> list[str]:
    """Check a login payload (email, password)."""
    errors = []

    if is_blank(record.get("email")):
        errors.append("Email is required")

    if is_blank(record.get("password")):
        errors.append("Password is required")

    return errors


def validate_book(record: Mapping[str, Any]) -> list[str]:
    """
    Check the content of a book record.

    Presence of price is not checked here: an absent price is accepted,
    a present one must be a number >= 0.
    """
    errors = []

    if is_blank(record.get("title")):
        errors.append("Title is required")

    if is_blank(record.get("author")):
        errors.append("Author is required")

    if is_blank(record.get("genre")):
        errors.append("Genre is required")

    if "price" in record:
        price = as_number(record["price"])
        if price is None or price < 0:
            errors.append("Price must be a positive number")

    return errors
