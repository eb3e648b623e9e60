# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

"""Domain exceptions and translation of database constraint violations.

Every unique, check and foreign-key constraint in the three schemas has a
deterministic name (see ``NAMING_CONVENTION`` in ``models/base.py``). When
the database rejects a write, :func:`translate_integrity_error` recovers the
constraint name from the driver error and turns it into one of the
:class:`ConstraintViolationError` subclasses with a message callers can show.
"""

from __future__ import annotations

import re

from sqlalchemy.exc import IntegrityError


class AppSchemasError(Exception):
    """Base class for every error raised by this package."""


class NotFoundError(AppSchemasError):
    def __init__(self, entity: str, entity_id: object) -> None:
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class ConstraintViolationError(AppSchemasError):
    def __init__(self, message: str, constraint: str | None = None) -> None:
        super().__init__(message)
        self.constraint = constraint


class DuplicateError(ConstraintViolationError):
    pass


class CheckViolationError(ConstraintViolationError):
    pass


class MissingReferenceError(ConstraintViolationError):
    pass


class InvalidTransitionError(AppSchemasError):
    pass


class RuleViolationError(AppSchemasError):
    """A write breaks an application rule the database cannot express."""


class CapacityError(AppSchemasError):
    """Not enough seats, or more guests than the listing allows."""


class UnavailableError(AppSchemasError):
    """The requested dates or listing cannot be booked."""


CONSTRAINT_MESSAGES: dict[str, str] = {
    # shared
    "uq_users_username": "duplicate username",
    "uq_users_email": "duplicate email",
    "uq_bookings_booking_reference": "duplicate booking reference",
    # qna
    "uq_topics_name": "duplicate topic name",
    "ck_comments_single_parent": (
        "comment must target exactly one parent type"
    ),
    "ck_comments_not_self_parent": "comment cannot reply to itself",
    "ck_likes_single_target": "like must target exactly one content type",
    "uq_likes_user_id_question_id": "question already liked by this user",
    "uq_likes_user_id_answer_id": "answer already liked by this user",
    "uq_likes_user_id_comment_id": "comment already liked by this user",
    "uq_question_topics_question_id_topic_id": (
        "topic already assigned to this question"
    ),
    "ck_user_follows_no_self_follow": "users cannot follow themselves",
    "uq_user_follows_follower_id_following_id": "already following this user",
    "uq_topic_follows_user_id_topic_id": "already following this topic",
    # movies
    "uq_movie_reviews_user_id_movie_id": "movie already reviewed by this user",
    "uq_theatre_reviews_user_id_theatre_id": (
        "theatre already reviewed by this user"
    ),
    "ck_movie_reviews_rating_range": "rating must be between 1 and 10",
    "ck_theatre_reviews_rating_range": "rating must be between 1 and 10",
    "ck_bookings_booking_status": "invalid booking status",
    "ck_bookings_payment_status": "invalid payment status",
    # rentals
    "ck_bookings_stay_dates": "check-out date must be after check-in date",
    "ck_bookings_guests_positive": "guests must be a positive number",
    "uq_property_amenities_property_id_amenity_id": (
        "amenity already listed for this property"
    ),
    "uq_property_reviews_booking_id": "booking already reviewed",
    "uq_host_reviews_booking_id_host_id": (
        "host already reviewed the guest for this booking"
    ),
    "ck_host_reviews_rating_range": "rating must be between 1 and 5",
    "uq_wishlists_user_id_property_id": "property already in wishlist",
}

for _column in ("overall", "cleanliness", "communication", "checkin",
                "accuracy", "location", "value"):
    CONSTRAINT_MESSAGES[f"ck_property_reviews_{_column}_range"] = (
        f"{_column} rating must be between 1 and 5"
    )

# SQLite: "UNIQUE constraint failed: likes.user_id, likes.question_id"
_SQLITE_UNIQUE = re.compile(r"UNIQUE constraint failed: ([\w.]+(?:, [\w.]+)*)")
# SQLite: "CHECK constraint failed: ck_likes_single_target"
_SQLITE_CHECK = re.compile(r"CHECK constraint failed: (\w+)")
# MySQL: "Duplicate entry '1-2' for key 'likes.uq_likes_user_id_question_id'"
_MYSQL_KEY = re.compile(r"for key '(?:\w+\.)?(\w+)'")
# MySQL: "Check constraint 'ck_bookings_stay_dates' is violated."
_MYSQL_CHECK = re.compile(r"Check constraint '(\w+)' is violated")


def constraint_name(exc: IntegrityError) -> str | None:
    """Best-effort name of the constraint behind ``exc``."""
    orig = exc.orig
    # asyncpg/psycopg expose the name directly (asyncpg via the adapted cause).
    for candidate in (orig, getattr(orig, "__cause__", None)):
        name = getattr(candidate, "constraint_name", None)
        if name:
            return str(name)
        diag = getattr(candidate, "diag", None)
        if diag is not None and getattr(diag, "constraint_name", None):
            return str(diag.constraint_name)

    message = str(orig)
    match = _SQLITE_UNIQUE.search(message)
    if match:
        qualified = [part.strip() for part in match.group(1).split(",")]
        table = qualified[0].split(".")[0]
        columns = [part.split(".", 1)[1] for part in qualified]
        return f"uq_{table}_{'_'.join(columns)}"
    for pattern in (_SQLITE_CHECK, _MYSQL_CHECK, _MYSQL_KEY):
        match = pattern.search(message)
        if match:
            return match.group(1)
    return None


def translate_integrity_error(exc: IntegrityError) -> ConstraintViolationError:
    """Map a database ``IntegrityError`` to a domain exception."""
    name = constraint_name(exc)
    message = CONSTRAINT_MESSAGES.get(name or "")
    if name is not None and name.startswith("uq_"):
        return DuplicateError(message or f"duplicate value violates {name}", name)
    if name is not None and name.startswith("ck_"):
        return CheckViolationError(message or f"value violates {name}", name)
    if (name is not None and name.startswith("fk_")) or "FOREIGN KEY" in str(
        exc.orig
    ).upper():
        return MissingReferenceError(
            "referenced row does not exist or is still referenced", name
        )
    if "NOT NULL" in str(exc.orig).upper():
        return CheckViolationError("required value is missing", name)
    return ConstraintViolationError(message or "constraint violated", name)
