# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

import pytest

from appschemas.errors import InvalidTransitionError
from appschemas.services.booking_states import MOVIE_BOOKINGS, STAY_BOOKINGS


class TestMovieBookings:
    def test_confirm_requires_completed_payment(self) -> None:
        assert not MOVIE_BOOKINGS.can_move_booking("pending", "pending", "confirmed")
        assert MOVIE_BOOKINGS.can_move_booking("pending", "completed", "confirmed")

    def test_cancel_from_pending_or_confirmed(self) -> None:
        assert MOVIE_BOOKINGS.can_move_booking("pending", "pending", "cancelled")
        assert MOVIE_BOOKINGS.can_move_booking("confirmed", "completed", "cancelled")

    def test_cancelled_is_terminal(self) -> None:
        for target in ("pending", "confirmed", "cancelled"):
            assert not MOVIE_BOOKINGS.can_move_booking("cancelled", "pending", target)

    def test_payment_only_moves_while_pending(self) -> None:
        assert MOVIE_BOOKINGS.can_move_payment("pending", "pending", "completed")
        assert MOVIE_BOOKINGS.can_move_payment("pending", "pending", "failed")
        assert not MOVIE_BOOKINGS.can_move_payment("cancelled", "pending", "completed")

    def test_failed_payment_can_be_retried(self) -> None:
        assert MOVIE_BOOKINGS.can_move_payment("pending", "failed", "pending")
        assert not MOVIE_BOOKINGS.can_move_payment("pending", "completed", "failed")

    def test_check_raises_with_context(self) -> None:
        with pytest.raises(InvalidTransitionError, match="'pending' to 'confirmed'"):
            MOVIE_BOOKINGS.check_booking("pending", "failed", "confirmed")


class TestStayBookings:
    def test_happy_path(self) -> None:
        assert STAY_BOOKINGS.can_move_payment("pending", "pending", "paid")
        assert STAY_BOOKINGS.can_move_booking("pending", "paid", "confirmed")
        assert STAY_BOOKINGS.can_move_booking("confirmed", "paid", "completed")

    def test_cannot_complete_unconfirmed_stay(self) -> None:
        assert not STAY_BOOKINGS.can_move_booking("pending", "paid", "completed")

    def test_refund_only_after_cancellation(self) -> None:
        assert not STAY_BOOKINGS.can_move_payment("confirmed", "paid", "refunded")
        assert STAY_BOOKINGS.can_move_payment("cancelled", "paid", "refunded")

    def test_completed_and_cancelled_are_terminal(self) -> None:
        for status in ("completed", "cancelled"):
            for target in ("pending", "confirmed", "cancelled", "completed"):
                assert not STAY_BOOKINGS.can_move_booking(status, "paid", target)

    def test_check_payment_raises(self) -> None:
        with pytest.raises(InvalidTransitionError):
            STAY_BOOKINGS.check_payment("pending", "pending", "refunded")
