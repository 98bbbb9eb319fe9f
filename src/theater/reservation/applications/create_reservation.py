from theater.reservation.domain import Customer, Reservation
from theater.schedule.applications import GetScheduleService


class CreateReservationService:
    """Reservation service

    Books tickets against today's schedule.
    """

    def __init__(self, schedule_service: GetScheduleService) -> None:
        self._schedule_service = schedule_service

    def create(self, customer: Customer, sequence: int, ticket_amount: int) -> Reservation:
        theater = self._schedule_service.get_today()
        return theater.create_reservation(customer, sequence, ticket_amount)
