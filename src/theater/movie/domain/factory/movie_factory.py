from datetime import timedelta
from decimal import Decimal
from typing import TypedDict

from theater.movie.domain.value_object import Movie
from theater.shared.domain import Currency, Money
from theater.shared.utils import to_decimal
from theater.shared.utils.config import get_currency_code


class MovieDetails(TypedDict):
    """Primitive input for a movie"""

    title: str
    description: str
    running_time_minutes: int
    ticket_price: Decimal | int | str
    special_code: int


class MovieFactory:
    """Movie factory

    - converts primitives into value objects
    - prices use the configured theater currency
    """

    def __init__(self, currency: Currency | None = None) -> None:
        self._currency = currency

    def create(self, movie_details: MovieDetails) -> Movie:
        currency = self._currency or Currency(get_currency_code())
        return Movie(
            title=movie_details["title"],
            description=movie_details["description"],
            running_time=timedelta(minutes=movie_details["running_time_minutes"]),
            ticket_price=Money(
                amount=to_decimal(movie_details["ticket_price"]),
                currency=currency,
            ),
            special_code=movie_details["special_code"],
        )
