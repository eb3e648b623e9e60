# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

"""Rental marketplace schema: listings, catalogue, stays, reviews, wishlists.

Revision ID: rentals_001
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision: str = "rentals_001"
down_revision: str | None = None
branch_labels: tuple[str, ...] | None = ("rentals",)
depends_on: tuple[str, ...] | None = None

SUB_RATINGS = (
    "cleanliness",
    "communication",
    "checkin",
    "accuracy",
    "location",
    "value",
)


def _id() -> sa.Column:
    return sa.Column("id", sa.Integer(), autoincrement=True, nullable=False)


def _timestamp(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.DateTime(timezone=True),
        nullable=True,
        server_default=sa.text("CURRENT_TIMESTAMP"),
    )


def _fk(
    owner: str, column: str, table: str, *, ondelete: str | None = "CASCADE"
) -> sa.Column:
    return sa.Column(
        column,
        sa.Integer(),
        sa.ForeignKey(
            f"{table}.id",
            ondelete=ondelete,
            name=f"fk_{owner}_{column}_{table}",
        ),
        nullable=False,
    )


def _rating_range(table: str, name: str, column: str) -> sa.CheckConstraint:
    return sa.CheckConstraint(
        f"{column} >= 1 AND {column} <= 5", name=f"ck_{table}_{name}_range"
    )


def upgrade() -> None:
    # ------------------------------------------------------------------
    # 1. users
    # ------------------------------------------------------------------
    op.create_table(
        "users",
        _id(),
        sa.Column("email", sa.String(100), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("first_name", sa.String(50), nullable=False),
        sa.Column("last_name", sa.String(50), nullable=False),
        sa.Column("phone", sa.String(15), nullable=True),
        sa.Column("profile_image", sa.String(255), nullable=True),
        sa.Column("date_of_birth", sa.Date(), nullable=True),
        sa.Column("is_host", sa.Boolean(), nullable=True, server_default=sa.false()),
        sa.Column(
            "is_verified", sa.Boolean(), nullable=True, server_default=sa.false()
        ),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id", name="pk_users"),
        sa.UniqueConstraint("email", name="uq_users_email"),
        sqlite_autoincrement=True,
    )

    # ------------------------------------------------------------------
    # 2. catalogue: cities, property_types, amenities
    # ------------------------------------------------------------------
    op.create_table(
        "cities",
        _id(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("state", sa.String(100), nullable=True),
        sa.Column("country", sa.String(100), nullable=False),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id", name="pk_cities"),
        sqlite_autoincrement=True,
    )
    op.create_table(
        "property_types",
        _id(),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id", name="pk_property_types"),
        sqlite_autoincrement=True,
    )
    op.create_table(
        "amenities",
        _id(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("icon", sa.String(50), nullable=True),
        sa.Column("category", sa.String(50), nullable=True),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id", name="pk_amenities"),
        sqlite_autoincrement=True,
    )

    # ------------------------------------------------------------------
    # 3. properties, images, amenity links
    # ------------------------------------------------------------------
    op.create_table(
        "properties",
        _id(),
        _fk("properties", "host_id", "users"),
        # Catalogue rows in use by a listing cannot be deleted.
        _fk("properties", "property_type_id", "property_types", ondelete=None),
        _fk("properties", "city_id", "cities", ondelete=None),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("address", sa.Text(), nullable=False),
        sa.Column("latitude", sa.Numeric(10, 8), nullable=True),
        sa.Column("longitude", sa.Numeric(11, 8), nullable=True),
        sa.Column("bedrooms", sa.Integer(), nullable=True, server_default="1"),
        sa.Column("bathrooms", sa.Integer(), nullable=True, server_default="1"),
        sa.Column("max_guests", sa.Integer(), nullable=True, server_default="2"),
        sa.Column("price_per_night", sa.Numeric(10, 2), nullable=False),
        sa.Column(
            "cleaning_fee", sa.Numeric(10, 2), nullable=True, server_default="0"
        ),
        sa.Column("is_active", sa.Boolean(), nullable=True, server_default=sa.true()),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id", name="pk_properties"),
        sqlite_autoincrement=True,
    )
    op.create_index("idx_properties_city_id", "properties", ["city_id"])
    op.create_index("idx_properties_host_id", "properties", ["host_id"])
    op.create_index("idx_properties_type_id", "properties", ["property_type_id"])
    op.create_index("idx_properties_price", "properties", ["price_per_night"])
    op.create_index("idx_properties_active", "properties", ["is_active"])

    op.create_table(
        "property_images",
        _id(),
        _fk("property_images", "property_id", "properties"),
        sa.Column("image_url", sa.String(255), nullable=False),
        sa.Column(
            "is_primary", sa.Boolean(), nullable=True, server_default=sa.false()
        ),
        sa.Column("caption", sa.String(255), nullable=True),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id", name="pk_property_images"),
        sqlite_autoincrement=True,
    )
    op.create_index(
        "idx_property_images_property_id", "property_images", ["property_id"]
    )

    op.create_table(
        "property_amenities",
        _id(),
        _fk("property_amenities", "property_id", "properties"),
        _fk("property_amenities", "amenity_id", "amenities"),
        sa.PrimaryKeyConstraint("id", name="pk_property_amenities"),
        sa.UniqueConstraint(
            "property_id",
            "amenity_id",
            name="uq_property_amenities_property_id_amenity_id",
        ),
        sqlite_autoincrement=True,
    )

    # ------------------------------------------------------------------
    # 4. bookings (half-open stays; overlap is checked by the service layer)
    # ------------------------------------------------------------------
    op.create_table(
        "bookings",
        _id(),
        _fk("bookings", "property_id", "properties"),
        _fk("bookings", "guest_id", "users"),
        sa.Column("check_in_date", sa.Date(), nullable=False),
        sa.Column("check_out_date", sa.Date(), nullable=False),
        sa.Column("guests", sa.Integer(), nullable=False),
        sa.Column("nights", sa.Integer(), nullable=False),
        sa.Column("price_per_night", sa.Numeric(10, 2), nullable=False),
        sa.Column(
            "cleaning_fee", sa.Numeric(10, 2), nullable=True, server_default="0"
        ),
        sa.Column("total_amount", sa.Numeric(10, 2), nullable=False),
        sa.Column(
            "booking_status", sa.String(20), nullable=True, server_default="pending"
        ),
        sa.Column(
            "payment_status", sa.String(20), nullable=True, server_default="pending"
        ),
        sa.Column("booking_reference", sa.String(50), nullable=True),
        sa.Column("special_requests", sa.Text(), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id", name="pk_bookings"),
        sa.UniqueConstraint(
            "booking_reference", name="uq_bookings_booking_reference"
        ),
        sa.CheckConstraint(
            "check_out_date > check_in_date", name="ck_bookings_stay_dates"
        ),
        sa.CheckConstraint("guests > 0", name="ck_bookings_guests_positive"),
        sa.CheckConstraint(
            "booking_status IN ('pending', 'confirmed', 'cancelled', 'completed')",
            name="ck_bookings_booking_status",
        ),
        sa.CheckConstraint(
            "payment_status IN ('pending', 'paid', 'refunded')",
            name="ck_bookings_payment_status",
        ),
        sqlite_autoincrement=True,
    )
    op.create_index("idx_bookings_property_id", "bookings", ["property_id"])
    op.create_index("idx_bookings_guest_id", "bookings", ["guest_id"])
    op.create_index(
        "idx_bookings_dates", "bookings", ["check_in_date", "check_out_date"]
    )
    op.create_index("idx_bookings_status", "bookings", ["booking_status"])

    # ------------------------------------------------------------------
    # 5. reviews, wishlists
    # ------------------------------------------------------------------
    op.create_table(
        "property_reviews",
        _id(),
        _fk("property_reviews", "property_id", "properties"),
        _fk("property_reviews", "guest_id", "users"),
        _fk("property_reviews", "booking_id", "bookings"),
        sa.Column("overall_rating", sa.Integer(), nullable=False),
        *(
            sa.Column(f"{name}_rating", sa.Integer(), nullable=True)
            for name in SUB_RATINGS
        ),
        sa.Column("comment", sa.Text(), nullable=True),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id", name="pk_property_reviews"),
        sa.UniqueConstraint("booking_id", name="uq_property_reviews_booking_id"),
        *(
            _rating_range("property_reviews", name, f"{name}_rating")
            for name in ("overall", *SUB_RATINGS)
        ),
        sqlite_autoincrement=True,
    )
    op.create_index("idx_reviews_property_id", "property_reviews", ["property_id"])

    op.create_table(
        "host_reviews",
        _id(),
        _fk("host_reviews", "host_id", "users"),
        _fk("host_reviews", "guest_id", "users"),
        _fk("host_reviews", "booking_id", "bookings"),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column("comment", sa.Text(), nullable=True),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id", name="pk_host_reviews"),
        sa.UniqueConstraint(
            "booking_id", "host_id", name="uq_host_reviews_booking_id_host_id"
        ),
        _rating_range("host_reviews", "rating", "rating"),
        sqlite_autoincrement=True,
    )

    op.create_table(
        "wishlists",
        _id(),
        _fk("wishlists", "user_id", "users"),
        _fk("wishlists", "property_id", "properties"),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id", name="pk_wishlists"),
        sa.UniqueConstraint(
            "user_id", "property_id", name="uq_wishlists_user_id_property_id"
        ),
        sqlite_autoincrement=True,
    )


def downgrade() -> None:
    op.drop_table("wishlists")
    op.drop_table("host_reviews")
    op.drop_table("property_reviews")
    op.drop_table("bookings")
    op.drop_table("property_amenities")
    op.drop_table("property_images")
    op.drop_table("properties")
    op.drop_table("amenities")
    op.drop_table("property_types")
    op.drop_table("cities")
    op.drop_table("users")
