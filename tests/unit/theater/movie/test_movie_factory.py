from datetime import timedelta
from decimal import Decimal

from theater.movie.domain.factory import MovieDetails, MovieFactory
from theater.shared.domain import Currency


class TestMovieFactory:
    def test_create_movie(self, monkeypatch):
        monkeypatch.delenv("THEATER_CURRENCY", raising=False)
        factory = MovieFactory()
        movie_details: MovieDetails = {
            "title": "Turning Red",
            "description": "This is a Disney movie.",
            "running_time_minutes": 85,
            "ticket_price": 11,
            "special_code": 0,
        }

        movie = factory.create(movie_details)

        assert movie.title == "Turning Red"
        assert movie.running_time == timedelta(minutes=85)
        assert movie.ticket_price.amount == Decimal("11")
        assert movie.ticket_price.currency == Currency.usd()
        assert not movie.is_special

    def test_currency_comes_from_config(self, monkeypatch):
        monkeypatch.setenv("THEATER_CURRENCY", "EUR")
        movie = MovieFactory().create(
            {
                "title": "The Batman",
                "description": "This is a DC Comics movie",
                "running_time_minutes": 95,
                "ticket_price": "9",
                "special_code": 0,
            }
        )
        assert movie.ticket_price.currency == Currency("EUR")

    def test_explicit_currency_wins(self, monkeypatch):
        monkeypatch.setenv("THEATER_CURRENCY", "EUR")
        factory = MovieFactory(currency=Currency("PLN"))
        movie = factory.create(
            {
                "title": "The Batman",
                "description": "This is a DC Comics movie",
                "running_time_minutes": 95,
                "ticket_price": Decimal("9"),
                "special_code": 0,
            }
        )
        assert movie.ticket_price.currency == Currency("PLN")
