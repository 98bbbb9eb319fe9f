from datetime import date

from theater.reservation.domain import Customer, Reservation
from theater.shared.domain import InvalidInputException, ResourceNotFoundException
from theater.showing.domain.entity import Showing


class Theater:
    """A single day's schedule of showings

    List position ``n`` holds the showing reserved through sequence ``n + 1``.
    The showing's own ``sequence_of_day`` is not checked against it.
    """

    def __init__(self, schedule: list[Showing], schedule_date: date) -> None:
        self._schedule = list(schedule)
        self._schedule_date = schedule_date

    @property
    def schedule(self) -> list[Showing]:
        return list(self._schedule)

    @schedule.setter
    def schedule(self, schedule: list[Showing]) -> None:
        self._schedule = list(schedule)

    @property
    def schedule_date(self) -> date:
        return self._schedule_date

    def find_showing(self, sequence: int) -> Showing:
        """Showing at the 1-based position ``sequence``"""
        if sequence < 1 or sequence > len(self._schedule):
            raise ResourceNotFoundException(
                f"Not able to find any showing for given sequence {sequence}"
            )
        return self._schedule[sequence - 1]

    def create_reservation(
        self, customer: Customer, sequence: int, ticket_amount: int
    ) -> Reservation:
        if ticket_amount <= 0:
            raise InvalidInputException("Ticket amount cannot be less than 1")
        showing = self.find_showing(sequence)
        return Reservation(customer, showing, ticket_amount)
