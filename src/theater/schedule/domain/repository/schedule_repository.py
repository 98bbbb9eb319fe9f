from abc import abstractmethod
from datetime import date

from theater.schedule.domain.entity import Theater
from theater.shared.domain import Repository


class ScheduleRepository(Repository[Theater, date]):
    """Stores one schedule per day, keyed by schedule date"""

    @abstractmethod
    def save(self, theater: Theater) -> None:
        """Store the day's schedule, replacing any previous one"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, schedule_date: date) -> Theater | None:
        """Schedule for the given date"""
        raise NotImplementedError
