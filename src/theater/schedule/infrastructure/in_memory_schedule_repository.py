from datetime import date

from theater.schedule.domain.entity import Theater
from theater.schedule.domain.repository import ScheduleRepository


class InMemoryScheduleRepository(ScheduleRepository):
    """ScheduleRepository kept in process memory"""

    def __init__(self) -> None:
        self._schedules: dict[date, Theater] = {}

    def save(self, theater: Theater) -> None:
        self._schedules[theater.schedule_date] = theater

    def find_by_id(self, schedule_date: date) -> Theater | None:
        return self._schedules.get(schedule_date)
