from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from theater.movie.domain.value_object import Movie
from theater.reservation.domain import Customer
from theater.schedule.domain.entity import Theater
from theater.shared.domain import Money
from theater.shared.utils import fixed_clock
from theater.showing.domain.entity import Showing
from theater.showing.domain.service import DiscountPolicy

TODAY = date(2024, 3, 15)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def clock():
    """Clock pinned to the morning of TODAY"""
    return fixed_clock(datetime.combine(TODAY, time(8, 0)))


@pytest.fixture
def discount_policy(clock):
    return DiscountPolicy(clock=clock)


@pytest.fixture
def customer():
    return Customer(name="John Doe", id="customer-123")


@pytest.fixture
def create_movie():
    """Movie factory fixture (factories as fixtures)"""

    def _factory(
        title: str = "Spider-Man: No Way Home",
        description: str = "Spider-Man movie description.",
        running_minutes: int = 90,
        ticket_price: Decimal | str | None = "22.50",
        special_code: int = 0,
    ) -> Movie:
        return Movie(
            title=title,
            description=description,
            running_time=timedelta(minutes=running_minutes),
            ticket_price=None if ticket_price is None else Money.usd(ticket_price),
            special_code=special_code,
        )

    return _factory


@pytest.fixture
def create_showing(create_movie, discount_policy):
    """Showing factory fixture, start time defaults to TODAY"""

    def _factory(
        ticket_price: Decimal | str | None = "22.50",
        sequence_of_day: int = 5,
        start: time = time(18, 0),
        special_code: int = 0,
        on: date = TODAY,
        movie: Movie | None = None,
    ) -> Showing:
        return Showing(
            movie=movie
            or create_movie(ticket_price=ticket_price, special_code=special_code),
            sequence_of_day=sequence_of_day,
            start_time=datetime.combine(on, start),
            discount_policy=discount_policy,
        )

    return _factory


@pytest.fixture
def mock_repository():
    """Repository mock"""
    return MagicMock()


@pytest.fixture
def lambda_context():
    """Minimal LambdaContext for handlers decorated with inject_lambda_context"""

    @dataclass
    class LambdaContext:
        function_name: str = "test"
        memory_limit_in_mb: int = 128
        invoked_function_arn: str = "arn:aws:lambda:us-east-1:123456789012:function:test"
        aws_request_id: str = "request-123"

    return LambdaContext()


@pytest.fixture
def create_theater(create_movie, create_showing, today):
    """Two-showing Theater factory fixture"""

    def _factory(schedule_date=today) -> Theater:
        regular = create_movie(
            title="Test Movie 1",
            description="Test Movie Desc 1",
            running_minutes=100,
            ticket_price="20",
            special_code=0,
        )
        special = create_movie(
            title="Test Movie 2",
            description="Test Movie Desc 2",
            running_minutes=100,
            ticket_price="22",
            special_code=1,
        )
        return Theater(
            schedule=[
                create_showing(movie=regular, sequence_of_day=1, start=time(8, 0)),
                create_showing(movie=special, sequence_of_day=2, start=time(10, 0)),
            ],
            schedule_date=schedule_date,
        )

    return _factory
