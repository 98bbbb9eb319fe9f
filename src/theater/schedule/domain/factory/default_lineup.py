from theater.movie.domain.factory import MovieDetails
from theater.schedule.domain.factory.schedule_factory import LineupEntry

SPIDER_MAN: MovieDetails = {
    "title": "Spider-Man: No Way Home",
    "description": "Spider-Man movie description.",
    "running_time_minutes": 90,
    "ticket_price": "12.5",
    "special_code": 1,
}

TURNING_RED: MovieDetails = {
    "title": "Turning Red",
    "description": "This is a Disney movie.",
    "running_time_minutes": 85,
    "ticket_price": "11",
    "special_code": 0,
}

THE_BATMAN: MovieDetails = {
    "title": "The Batman",
    "description": "This is a DC Comics movie",
    "running_time_minutes": 95,
    "ticket_price": "9",
    "special_code": 0,
}

DEFAULT_LINEUP: list[LineupEntry] = [
    {"movie": TURNING_RED, "start_time": "09:00"},
    {"movie": SPIDER_MAN, "start_time": "11:00"},
    {"movie": THE_BATMAN, "start_time": "12:50"},
    {"movie": TURNING_RED, "start_time": "14:30"},
    {"movie": SPIDER_MAN, "start_time": "16:10"},
    {"movie": THE_BATMAN, "start_time": "17:50"},
    {"movie": TURNING_RED, "start_time": "19:30"},
    {"movie": SPIDER_MAN, "start_time": "21:10"},
    {"movie": THE_BATMAN, "start_time": "23:00"},
]
