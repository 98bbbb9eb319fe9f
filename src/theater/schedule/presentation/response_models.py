from datetime import datetime, timedelta
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer, RootModel, TypeAdapter
from pydantic.alias_generators import to_camel

_duration_adapter = TypeAdapter(timedelta)

# Prices stay Decimal so the encoder can keep their scale (17.00, not 17.0)
IsoDateTime = Annotated[
    datetime, PlainSerializer(lambda v: v.isoformat(), return_type=str)
]
IsoDuration = Annotated[
    timedelta,
    PlainSerializer(
        lambda v: _duration_adapter.dump_python(v, mode="json"), return_type=str
    ),
]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MovieData(CamelModel):
    """Movie as shown in the schedule"""

    title: str
    description: str
    running_time: IsoDuration
    ticket_price: Decimal | None
    special_code: int


class ShowingData(CamelModel):
    """Showing with its final ticket price"""

    movie: MovieData
    sequence_of_day: int
    start_time: IsoDateTime
    final_showing_price: Decimal


class ScheduleData(RootModel[dict[str, list[ShowingData]]]):
    """Showings keyed by schedule date (YYYY-MM-DD)"""

    pass
