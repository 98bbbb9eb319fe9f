from datetime import datetime, time
from unittest.mock import MagicMock

import pytest

from theater.shared.domain import InvalidInputException, Money
from theater.showing.domain.entity import Showing
from theater.showing.domain.service import default_discount_policy


class TestShowing:
    @pytest.mark.parametrize(
        "ticket_price, sequence_of_day, start, special_code, expected",
        [
            ("22.50", 5, time(18, 0), 0, "22.50"),
            ("20.00", 4, time(18, 0), 1, "16.00"),
            ("18.00", 1, time(8, 0), 0, "15.00"),
            ("18.00", 7, time(18, 0), 0, "17.00"),
            ("10.00", 1, time(11, 30), 0, "7.00"),
            ("20.00", 2, time(15, 0), 1, "15.00"),
            ("20", 1, time(8, 0), 0, "17.00"),
            ("22", 2, time(10, 0), 1, "17.60"),
        ],
    )
    def test_final_price(
        self, create_showing, ticket_price, sequence_of_day, start, special_code, expected
    ):
        showing = create_showing(
            ticket_price=ticket_price,
            sequence_of_day=sequence_of_day,
            start=start,
            special_code=special_code,
        )
        assert showing.final_price() == Money.usd(expected)

    def test_final_price_has_two_decimal_places(self, create_showing):
        showing = create_showing(ticket_price="22.5", sequence_of_day=5)
        assert str(showing.final_price().amount) == "22.50"

    def test_final_price_rounds_half_up(self, create_showing):
        # 10.02 - 2.505 = 7.515
        showing = create_showing(ticket_price="10.02", sequence_of_day=4, start=time(12, 0))
        assert str(showing.final_price().amount) == "7.52"

    def test_discount_above_price_gives_zero(self, create_showing):
        showing = create_showing(ticket_price="2.00", sequence_of_day=1, start=time(9, 0))
        assert showing.final_price() == Money.usd("0.00")

    def test_final_price_delegates_to_policy(self, create_movie):
        policy = MagicMock()
        policy.compute_discount.return_value = Money.usd("1.25")
        showing = Showing(
            movie=create_movie(ticket_price="10"),
            sequence_of_day=3,
            start_time=datetime(2024, 3, 15, 18, 0),
            discount_policy=policy,
        )

        assert showing.final_price() == Money.usd("8.75")
        policy.compute_discount.assert_called_once_with(showing)

    def test_missing_ticket_price_raises_error(self, create_showing):
        with pytest.raises(InvalidInputException):
            create_showing(ticket_price=None).final_price()

    def test_uses_default_policy_when_none_given(self, create_movie):
        showing = Showing(create_movie(), 1, datetime(2024, 3, 15, 9, 0))
        assert showing._discount_policy is default_discount_policy

    def test_showing_properties(self, create_movie):
        movie = create_movie()
        start_time = datetime(2024, 3, 15, 9, 0)
        showing = Showing(movie, 1, start_time)
        assert showing.movie is movie
        assert showing.sequence_of_day == 1
        assert showing.start_time == start_time

    def test_equality(self, create_showing):
        assert create_showing() == create_showing()
        assert create_showing(sequence_of_day=1) != create_showing(sequence_of_day=2)
        assert hash(create_showing()) == hash(create_showing())
