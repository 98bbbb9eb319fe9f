from datetime import date, datetime, time
from typing import TypedDict

from theater.movie.domain.factory import MovieDetails, MovieFactory
from theater.movie.domain.value_object import Movie
from theater.schedule.domain.entity import Theater
from theater.showing.domain.factory import ShowingFactory


class LineupEntry(TypedDict):
    """One showing of the day: the movie and its start time ("HH:MM")"""

    movie: MovieDetails
    start_time: str


class ScheduleFactory:
    """Builds a day's Theater from a lineup

    - sequence of day follows lineup order, starting at 1
    - entries with identical movie details share one Movie instance
    """

    def __init__(
        self,
        movie_factory: MovieFactory | None = None,
        showing_factory: ShowingFactory | None = None,
    ) -> None:
        self._movie_factory = movie_factory or MovieFactory()
        self._showing_factory = showing_factory or ShowingFactory(
            movie_factory=self._movie_factory
        )

    def create(self, schedule_date: date, lineup: list[LineupEntry]) -> Theater:
        movies: dict[tuple, Movie] = {}
        showings = []
        for sequence, entry in enumerate(lineup, start=1):
            details = entry["movie"]
            key = _movie_key(details)
            movie = movies.get(key)
            if movie is None:
                movie = self._movie_factory.create(details)
                movies[key] = movie
            start_time = datetime.combine(schedule_date, _parse_time(entry["start_time"]))
            showings.append(
                self._showing_factory.create_for_movie(movie, sequence, start_time)
            )
        return Theater(schedule=showings, schedule_date=schedule_date)


def _parse_time(value: str) -> time:
    try:
        return time.fromisoformat(value)
    except ValueError as e:
        raise ValueError(f"Invalid start time: {value}") from e


def _movie_key(details: MovieDetails) -> tuple:
    # Same title with a different price or special code is a different movie
    return tuple(sorted(details.items()))
