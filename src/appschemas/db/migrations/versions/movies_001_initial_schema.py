# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

"""Movie booking schema: catalogue, venues, showtimes, bookings, reviews.

Revision ID: movies_001
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision: str = "movies_001"
down_revision: str | None = None
branch_labels: tuple[str, ...] | None = ("movies",)
depends_on: tuple[str, ...] | None = None


def _id() -> sa.Column:
    return sa.Column("id", sa.Integer(), autoincrement=True, nullable=False)


def _timestamp(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.DateTime(timezone=True),
        nullable=True,
        server_default=sa.text("CURRENT_TIMESTAMP"),
    )


def _fk(owner: str, column: str, table: str) -> sa.Column:
    return sa.Column(
        column,
        sa.Integer(),
        sa.ForeignKey(
            f"{table}.id",
            ondelete="CASCADE",
            name=f"fk_{owner}_{column}_{table}",
        ),
        nullable=False,
    )


def upgrade() -> None:
    # ------------------------------------------------------------------
    # 1. users
    # ------------------------------------------------------------------
    op.create_table(
        "users",
        _id(),
        sa.Column("username", sa.String(50), nullable=False),
        sa.Column("email", sa.String(100), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("full_name", sa.String(100), nullable=True),
        sa.Column("phone", sa.String(15), nullable=True),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id", name="pk_users"),
        sa.UniqueConstraint("username", name="uq_users_username"),
        sa.UniqueConstraint("email", name="uq_users_email"),
        sqlite_autoincrement=True,
    )

    # ------------------------------------------------------------------
    # 2. cities, theatres
    # ------------------------------------------------------------------
    op.create_table(
        "cities",
        _id(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("state", sa.String(100), nullable=True),
        sa.Column("country", sa.String(100), nullable=True, server_default="India"),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id", name="pk_cities"),
        sqlite_autoincrement=True,
    )

    op.create_table(
        "theatres",
        _id(),
        sa.Column("name", sa.String(150), nullable=False),
        sa.Column("address", sa.Text(), nullable=True),
        _fk("theatres", "city_id", "cities"),
        sa.Column("phone", sa.String(15), nullable=True),
        sa.Column("total_screens", sa.Integer(), nullable=True, server_default="1"),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id", name="pk_theatres"),
        sqlite_autoincrement=True,
    )
    op.create_index("idx_theatres_city_id", "theatres", ["city_id"])

    # ------------------------------------------------------------------
    # 3. movies, showtimes
    # ------------------------------------------------------------------
    op.create_table(
        "movies",
        _id(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("duration_minutes", sa.Integer(), nullable=True),
        sa.Column("genre", sa.String(100), nullable=True),
        sa.Column("language", sa.String(50), nullable=True),
        sa.Column("release_date", sa.Date(), nullable=True),
        sa.Column("rating", sa.String(10), nullable=True),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id", name="pk_movies"),
        sqlite_autoincrement=True,
    )

    op.create_table(
        "showtimes",
        _id(),
        _fk("showtimes", "movie_id", "movies"),
        _fk("showtimes", "theatre_id", "theatres"),
        sa.Column("show_date", sa.Date(), nullable=False),
        sa.Column("show_time", sa.Time(), nullable=False),
        sa.Column("screen_number", sa.Integer(), nullable=True),
        sa.Column("total_seats", sa.Integer(), nullable=True, server_default="100"),
        sa.Column(
            "available_seats", sa.Integer(), nullable=True, server_default="100"
        ),
        sa.Column("ticket_price", sa.Numeric(10, 2), nullable=True),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id", name="pk_showtimes"),
        sqlite_autoincrement=True,
    )
    op.create_index("idx_showtimes_movie_id", "showtimes", ["movie_id"])
    op.create_index("idx_showtimes_theatre_id", "showtimes", ["theatre_id"])
    op.create_index("idx_showtimes_date", "showtimes", ["show_date"])

    # ------------------------------------------------------------------
    # 4. bookings
    # ------------------------------------------------------------------
    op.create_table(
        "bookings",
        _id(),
        _fk("bookings", "user_id", "users"),
        _fk("bookings", "showtime_id", "showtimes"),
        sa.Column("seats_booked", sa.Integer(), nullable=False),
        sa.Column("total_amount", sa.Numeric(10, 2), nullable=True),
        sa.Column(
            "booking_status", sa.String(20), nullable=True, server_default="pending"
        ),
        sa.Column(
            "payment_status", sa.String(20), nullable=True, server_default="pending"
        ),
        sa.Column("booking_reference", sa.String(50), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id", name="pk_bookings"),
        sa.UniqueConstraint(
            "booking_reference", name="uq_bookings_booking_reference"
        ),
        sa.CheckConstraint(
            "booking_status IN ('pending', 'confirmed', 'cancelled')",
            name="ck_bookings_booking_status",
        ),
        sa.CheckConstraint(
            "payment_status IN ('pending', 'completed', 'failed')",
            name="ck_bookings_payment_status",
        ),
        sqlite_autoincrement=True,
    )
    op.create_index("idx_bookings_user_id", "bookings", ["user_id"])
    op.create_index("idx_bookings_showtime_id", "bookings", ["showtime_id"])
    op.create_index("idx_bookings_status", "bookings", ["booking_status"])

    # ------------------------------------------------------------------
    # 5. reviews (one per user per movie / theatre, rated 1..10)
    # ------------------------------------------------------------------
    op.create_table(
        "movie_reviews",
        _id(),
        _fk("movie_reviews", "user_id", "users"),
        _fk("movie_reviews", "movie_id", "movies"),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column("comment", sa.Text(), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id", name="pk_movie_reviews"),
        sa.UniqueConstraint(
            "user_id", "movie_id", name="uq_movie_reviews_user_id_movie_id"
        ),
        sa.CheckConstraint(
            "rating >= 1 AND rating <= 10", name="ck_movie_reviews_rating_range"
        ),
        sqlite_autoincrement=True,
    )
    op.create_index("idx_movie_reviews_movie_id", "movie_reviews", ["movie_id"])

    op.create_table(
        "theatre_reviews",
        _id(),
        _fk("theatre_reviews", "user_id", "users"),
        _fk("theatre_reviews", "theatre_id", "theatres"),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column("comment", sa.Text(), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id", name="pk_theatre_reviews"),
        sa.UniqueConstraint(
            "user_id", "theatre_id", name="uq_theatre_reviews_user_id_theatre_id"
        ),
        sa.CheckConstraint(
            "rating >= 1 AND rating <= 10", name="ck_theatre_reviews_rating_range"
        ),
        sqlite_autoincrement=True,
    )
    op.create_index(
        "idx_theatre_reviews_theatre_id", "theatre_reviews", ["theatre_id"]
    )


def downgrade() -> None:
    op.drop_table("theatre_reviews")
    op.drop_table("movie_reviews")
    op.drop_table("bookings")
    op.drop_table("showtimes")
    op.drop_table("movies")
    op.drop_table("theatres")
    op.drop_table("cities")
    op.drop_table("users")
