from theater.schedule.domain.entity import Theater
from theater.schedule.domain.factory import DEFAULT_LINEUP, LineupEntry, ScheduleFactory
from theater.schedule.domain.repository import ScheduleRepository
from theater.shared.utils.clock import Clock, system_clock


class GetScheduleService:
    """Schedule lookup service

    Today's schedule is built from the lineup and saved the first time it is
    requested.
    """

    def __init__(
        self,
        repository: ScheduleRepository,
        factory: ScheduleFactory,
        clock: Clock = system_clock,
        lineup: list[LineupEntry] | None = None,
    ) -> None:
        self._repository = repository
        self._factory = factory
        self._clock = clock
        self._lineup = DEFAULT_LINEUP if lineup is None else lineup

    def get_today(self) -> Theater:
        today = self._clock().date()
        theater = self._repository.find_by_id(today)
        if theater is None:
            theater = self._factory.create(today, self._lineup)
            self._repository.save(theater)
        return theater
