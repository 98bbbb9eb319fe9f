from datetime import datetime

from theater.movie.domain.value_object import Movie
from theater.shared.domain import Money
from theater.showing.domain.service import DiscountPolicy, default_discount_policy


class Showing:
    """One screening of a movie

    Immutable once created. ``sequence_of_day`` is the 1-based position of
    the showing in the day's schedule.
    """

    def __init__(
        self,
        movie: Movie,
        sequence_of_day: int,
        start_time: datetime,
        discount_policy: DiscountPolicy | None = None,
    ) -> None:
        self._movie = movie
        self._sequence_of_day = sequence_of_day
        self._start_time = start_time
        self._discount_policy = discount_policy or default_discount_policy

    @property
    def movie(self) -> Movie:
        return self._movie

    @property
    def sequence_of_day(self) -> int:
        return self._sequence_of_day

    @property
    def start_time(self) -> datetime:
        return self._start_time

    def discount(self) -> Money:
        return self._discount_policy.compute_discount(self)

    def final_price(self) -> Money:
        """Ticket price after the largest discount, rounded half-up to cents

        A discount larger than the ticket price yields a zero price.
        """
        discount = self.discount()
        price = self._movie.ticket_price
        if discount.is_greater_than(price):
            return Money.zero(price.currency).rounded()
        return price.subtract(discount).rounded()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Showing):
            return False
        return (
            self._movie == other._movie
            and self._sequence_of_day == other._sequence_of_day
            and self._start_time == other._start_time
        )

    def __hash__(self) -> int:
        return hash((self._movie, self._sequence_of_day, self._start_time))

    def __repr__(self) -> str:
        return (
            f"Showing(movie={self._movie!r}, "
            f"sequence_of_day={self._sequence_of_day}, "
            f"start_time={self._start_time.isoformat()})"
        )
