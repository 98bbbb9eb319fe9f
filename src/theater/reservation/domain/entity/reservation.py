from theater.reservation.domain.value_object import Customer
from theater.shared.domain import InvalidInputException, Money
from theater.showing.domain.entity import Showing


class Reservation:
    """Tickets for one showing booked by a customer

    The showing and the audience count can be changed after creation by the
    reservation's owner. The audience count is always at least one.
    """

    def __init__(self, customer: Customer, showing: Showing, audience_count: int) -> None:
        self._validate_audience_count(audience_count)
        self._customer = customer
        self._showing = showing
        self._audience_count = audience_count

    @property
    def customer(self) -> Customer:
        return self._customer

    @property
    def showing(self) -> Showing:
        return self._showing

    @showing.setter
    def showing(self, showing: Showing) -> None:
        self._showing = showing

    @property
    def audience_count(self) -> int:
        return self._audience_count

    @audience_count.setter
    def audience_count(self, audience_count: int) -> None:
        self._validate_audience_count(audience_count)
        self._audience_count = audience_count

    def total_fee(self) -> Money:
        """Final showing price times audience count, rounded half-up to cents"""
        return self._showing.final_price().multiply(self._audience_count).rounded()

    @staticmethod
    def _validate_audience_count(audience_count: int) -> None:
        if audience_count <= 0:
            raise InvalidInputException(
                "Cannot have a reservation with negative or zero audience count"
            )
