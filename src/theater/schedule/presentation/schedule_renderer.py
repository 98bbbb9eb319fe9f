from datetime import timedelta

import simplejson

from theater.schedule.domain.entity import Theater
from theater.schedule.presentation.response_models import (
    MovieData,
    ScheduleData,
    ShowingData,
)
from theater.showing.domain.entity import Showing

RULE = "=" * 51
EMPTY_SCHEDULE_MESSAGE = "No shows scheduled."


def format_running_time(running_time: timedelta) -> str:
    """Running time as "(H hours M minutes)", singular when exactly 1"""
    total_minutes = int(running_time.total_seconds()) // 60
    hours, minutes = divmod(total_minutes, 60)
    return f"({hours} hour{_plural(hours)} {minutes} minute{_plural(minutes)})"


def _plural(value: int) -> str:
    return "" if value == 1 else "s"


def format_showing_line(showing: Showing) -> str:
    movie = showing.movie
    price = movie.ticket_price.amount if movie.ticket_price is not None else None
    return (
        f"{showing.sequence_of_day}: "
        f"{showing.start_time.isoformat(timespec='minutes')} "
        f"{movie.title} {format_running_time(movie.running_time)} ${price}"
    )


def render_schedule_text(theater: Theater) -> str:
    schedule = theater.schedule
    if not schedule:
        return EMPTY_SCHEDULE_MESSAGE
    lines = [theater.schedule_date.isoformat(), RULE]
    lines.extend(format_showing_line(showing) for showing in schedule)
    lines.append(RULE)
    return "\n".join(lines)


def to_schedule_data(theater: Theater) -> ScheduleData:
    showings = [_to_showing_data(showing) for showing in theater.schedule]
    return ScheduleData({theater.schedule_date.isoformat(): showings})


def _to_showing_data(showing: Showing) -> ShowingData:
    movie = showing.movie
    return ShowingData(
        movie=MovieData(
            title=movie.title,
            description=movie.description,
            running_time=movie.running_time,
            ticket_price=(
                movie.ticket_price.amount if movie.ticket_price is not None else None
            ),
            special_code=movie.special_code,
        ),
        sequence_of_day=showing.sequence_of_day,
        start_time=showing.start_time,
        final_showing_price=showing.final_price().amount,
    )


def render_schedule_json(theater: Theater) -> str:
    """Schedule as compact JSON, prices written as numbers with their scale"""
    data = to_schedule_data(theater).model_dump(mode="python", by_alias=True)
    return simplejson.dumps(data, use_decimal=True, separators=(",", ":"))


def print_schedule(theater: Theater) -> None:
    print(render_schedule_text(theater))


def print_schedule_json(theater: Theater) -> None:
    print(render_schedule_json(theater))
