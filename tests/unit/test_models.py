# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

from datetime import date

import pytest
from sqlalchemy.dialects import mysql, postgresql, sqlite
from sqlalchemy.engine import Dialect
from sqlalchemy.schema import CreateTable

from appschemas.models import SCHEMAS, TimestampMixin
from appschemas.models import movies, qna, rentals
from appschemas.models.qna import LikeTargetKind
from appschemas.models.rentals.review import SUB_RATINGS
from appschemas.schemas.qna import CommentParent, LikeTarget


def _constraint_names(model: type) -> set[str]:
    return {str(c.name) for c in model.__table__.constraints if c.name is not None}


class TestSchemaRegistries:
    def test_each_schema_has_its_own_tables(self) -> None:
        assert set(SCHEMAS["qna"].tables) == {
            "users",
            "topics",
            "questions",
            "answers",
            "comments",
            "likes",
            "question_topics",
            "user_follows",
            "topic_follows",
        }
        assert set(SCHEMAS["movies"].tables) == {
            "users",
            "cities",
            "theatres",
            "movies",
            "showtimes",
            "bookings",
            "movie_reviews",
            "theatre_reviews",
        }
        assert set(SCHEMAS["rentals"].tables) == {
            "users",
            "cities",
            "property_types",
            "amenities",
            "properties",
            "property_images",
            "property_amenities",
            "bookings",
            "property_reviews",
            "host_reviews",
            "wishlists",
        }

    @pytest.mark.parametrize("schema", ["qna", "movies", "rentals"])
    def test_surrogate_keys_are_never_reused_on_sqlite(self, schema: str) -> None:
        for table in SCHEMAS[schema].tables.values():
            assert table.dialect_options["sqlite"]["autoincrement"] is True
            assert [c.name for c in table.primary_key.columns] == ["id"]


class TestQnaModels:
    def test_comment_for_answer(self) -> None:
        comment = qna.Comment.for_parent(1, CommentParent.answer(7), "hi")
        assert comment.answer_id == 7
        assert comment.parent_comment_id is None
        assert comment.parent_ref == CommentParent.answer(7)
        assert not comment.is_reply

    def test_comment_reply(self) -> None:
        comment = qna.Comment.for_parent(1, CommentParent.comment(3), "re")
        assert comment.answer_id is None
        assert comment.parent_ref == CommentParent.comment(3)
        assert comment.is_reply

    def test_reattaching_clears_the_old_parent(self) -> None:
        comment = qna.Comment.for_parent(1, CommentParent.comment(3), "re")
        comment.attach_to(CommentParent.answer(5))
        assert (comment.answer_id, comment.parent_comment_id) == (5, None)

    def test_comment_without_parent_has_no_ref(self) -> None:
        with pytest.raises(ValueError):
            qna.Comment(user_id=1, content="orphan").parent_ref

    def test_comment_constraints(self) -> None:
        names = _constraint_names(qna.Comment)
        assert "ck_comments_single_parent" in names
        assert "ck_comments_not_self_parent" in names

    @pytest.mark.parametrize(
        ("dialect", "emitted"),
        [
            (sqlite.dialect(), True),
            (postgresql.dialect(), True),
            (mysql.dialect(), False),
        ],
    )
    def test_self_parent_check_skipped_on_mysql(
        self, dialect: Dialect, emitted: bool
    ) -> None:
        ddl = str(CreateTable(qna.Comment.__table__).compile(dialect=dialect))
        assert ("ck_comments_not_self_parent" in ddl) is emitted
        assert "ck_comments_single_parent" in ddl

    def test_like_sets_exactly_one_target(self) -> None:
        like = qna.Like.for_target(1, LikeTarget.answer(9))
        assert like.answer_id == 9
        assert like.question_id is None
        assert like.comment_id is None
        assert like.target == LikeTarget.answer(9)

    def test_like_target_columns(self) -> None:
        assert [k.column for k in LikeTargetKind] == [
            "question_id",
            "answer_id",
            "comment_id",
        ]

    def test_like_constraints(self) -> None:
        names = _constraint_names(qna.Like)
        assert {
            "ck_likes_single_target",
            "uq_likes_user_id_question_id",
            "uq_likes_user_id_answer_id",
            "uq_likes_user_id_comment_id",
        } <= names

    def test_follow_constraints(self) -> None:
        names = _constraint_names(qna.UserFollow)
        assert "ck_user_follows_no_self_follow" in names
        assert "uq_user_follows_follower_id_following_id" in names
        assert "uq_topic_follows_user_id_topic_id" in _constraint_names(
            qna.TopicFollow
        )

    def test_unique_user_columns(self) -> None:
        names = _constraint_names(qna.User)
        assert {"uq_users_username", "uq_users_email"} <= names


class TestMoviesModels:
    def test_showtime_seat_defaults(self) -> None:
        table = movies.Showtime.__table__
        assert table.c["total_seats"].default.arg == 100
        assert table.c["available_seats"].default.arg == 100
        assert table.c["ticket_price"].type.scale == 2

    def test_city_country_default(self) -> None:
        assert movies.City.__table__.c["country"].default.arg == "India"

    def test_theatre_total_screens_default(self) -> None:
        assert movies.Theatre.__table__.c["total_screens"].default.arg == 1

    def test_booking_status_defaults(self) -> None:
        table = movies.Booking.__table__
        assert table.c["booking_status"].default.arg == "pending"
        assert table.c["payment_status"].default.arg == "pending"
        names = _constraint_names(movies.Booking)
        assert {
            "ck_bookings_booking_status",
            "ck_bookings_payment_status",
            "uq_bookings_booking_reference",
        } <= names

    def test_reviews_one_per_user(self) -> None:
        assert "uq_movie_reviews_user_id_movie_id" in _constraint_names(
            movies.MovieReview
        )
        assert "ck_movie_reviews_rating_range" in _constraint_names(
            movies.MovieReview
        )
        assert "uq_theatre_reviews_user_id_theatre_id" in _constraint_names(
            movies.TheatreReview
        )

    def test_status_enums(self) -> None:
        assert [s.value for s in movies.BookingStatus] == [
            "pending",
            "confirmed",
            "cancelled",
        ]
        assert [s.value for s in movies.PaymentStatus] == [
            "pending",
            "completed",
            "failed",
        ]


class TestRentalsModels:
    def test_user_full_name(self) -> None:
        user = rentals.User(
            email="a@example.com",
            password_hash="x",
            first_name="Ada",
            last_name="Lovelace",
        )
        assert user.full_name == "Ada Lovelace"
        assert rentals.User.__table__.c["is_host"].default.arg is False

    def test_catalogue_rows_are_restricted(self) -> None:
        fks = {
            fk.parent.name: fk.ondelete
            for fk in rentals.Property.__table__.foreign_keys
        }
        assert fks == {
            "host_id": "CASCADE",
            "property_type_id": None,
            "city_id": None,
        }

    def test_primary_image(self) -> None:
        listing = rentals.Property(title="t", address="a")
        first = rentals.PropertyImage(image_url="a.jpg", is_primary=False)
        second = rentals.PropertyImage(image_url="b.jpg", is_primary=True)
        listing.images.extend([first, second])
        assert listing.primary_image is second

    def test_primary_image_none(self) -> None:
        assert rentals.Property(title="t", address="a").primary_image is None

    def test_booking_constraints(self) -> None:
        names = _constraint_names(rentals.Booking)
        assert {
            "ck_bookings_stay_dates",
            "ck_bookings_guests_positive",
            "ck_bookings_booking_status",
            "ck_bookings_payment_status",
        } <= names

    def test_review_rating_checks(self) -> None:
        names = _constraint_names(rentals.PropertyReview)
        for column in ("overall_rating", *SUB_RATINGS):
            name = column.removesuffix("_rating")
            assert f"ck_property_reviews_{name}_range" in names
        assert "uq_property_reviews_booking_id" in names
        assert "uq_host_reviews_booking_id_host_id" in _constraint_names(
            rentals.HostReview
        )

    def test_blocking_statuses(self) -> None:
        assert rentals.BLOCKING_STATUSES == ("pending", "confirmed")

    def test_stay_booking_fields(self) -> None:
        booking = rentals.Booking(
            check_in_date=date(2026, 1, 1), check_out_date=date(2026, 1, 3)
        )
        assert booking.special_requests is None


class TestTimestampMixin:
    def test_updated_at_on_mutable_tables(self) -> None:
        for model in (qna.Question, qna.Answer, qna.Comment, movies.Booking,
                      rentals.Property, rentals.Booking):
            table = model.__table__
            assert issubclass(model, TimestampMixin)
            assert table.c["created_at"].server_default is not None
            assert table.c["updated_at"].onupdate is not None
