from datetime import datetime
from typing import TypedDict

from theater.movie.domain.factory import MovieDetails, MovieFactory
from theater.movie.domain.value_object import Movie
from theater.showing.domain.entity import Showing
from theater.showing.domain.service import DiscountPolicy


class ShowingDetails(TypedDict):
    """Primitive input for a showing"""

    movie: MovieDetails
    sequence_of_day: int
    start_time: str


class ShowingFactory:
    """Showing factory

    - parses the ISO 8601 start time
    - every showing it builds shares one discount policy
    """

    def __init__(
        self,
        movie_factory: MovieFactory | None = None,
        discount_policy: DiscountPolicy | None = None,
    ) -> None:
        self._movie_factory = movie_factory or MovieFactory()
        self._discount_policy = discount_policy

    def create(self, showing_details: ShowingDetails) -> Showing:
        movie = self._movie_factory.create(showing_details["movie"])
        return self.create_for_movie(
            movie,
            showing_details["sequence_of_day"],
            _parse_start_time(showing_details["start_time"]),
        )

    def create_for_movie(
        self, movie: Movie, sequence_of_day: int, start_time: datetime
    ) -> Showing:
        return Showing(
            movie=movie,
            sequence_of_day=sequence_of_day,
            start_time=start_time,
            discount_policy=self._discount_policy,
        )


def _parse_start_time(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except ValueError as e:
        raise ValueError(f"Invalid ISO 8601 datetime: {value}") from e
