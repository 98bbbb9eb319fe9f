from typing import Optional

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.parser import event_parser
from aws_lambda_powertools.utilities.typing import LambdaContext

from theater.reservation.applications import CreateReservationService
from theater.reservation.domain import Customer, Reservation
from theater.reservation.handlers.request_models import CreateReservationRequest
from theater.reservation.handlers.response_models import (
    ErrorResponse,
    ReservationData,
    SuccessResponse,
)
from theater.schedule.applications import GetScheduleService
from theater.schedule.domain.factory import ScheduleFactory
from theater.schedule.infrastructure import InMemoryScheduleRepository
from theater.shared.domain import InvalidInputException, ResourceNotFoundException

logger = Logger()

repository = InMemoryScheduleRepository()
factory = ScheduleFactory()
schedule_service = GetScheduleService(repository=repository, factory=factory)
service = CreateReservationService(schedule_service=schedule_service)


@logger.inject_lambda_context
@event_parser(model=CreateReservationRequest)
def lambda_handler(event: CreateReservationRequest, context: LambdaContext) -> dict:
    """Reservation Lambda handler

    The payload shape is validated by ``@event_parser`` before it gets here,
    the ticket amount and sequence are checked by the theater.
    Domain errors come back as an error response instead of raising.
    """

    logger.info(
        "Received create reservation request",
        extra={"sequence": event.sequence, "ticket_amount": event.ticket_amount},
    )

    customer = Customer(name=event.customer.name, id=event.customer.id)
    try:
        reservation = service.create(customer, event.sequence, event.ticket_amount)
    except InvalidInputException as e:
        logger.warning("Invalid reservation request", extra={"reason": str(e)})
        return _error_response("INVALID_INPUT", str(e))
    except ResourceNotFoundException as e:
        logger.warning("Showing not found", extra={"reason": str(e)})
        return _error_response("NOT_FOUND", str(e))

    return _to_response(reservation)


def _to_response(reservation: Reservation) -> dict:
    """Turn the entity into the response shape"""
    showing = reservation.showing
    total_fee = reservation.total_fee()
    return SuccessResponse(
        data=ReservationData(
            customer_id=reservation.customer.id,
            customer_name=reservation.customer.name,
            sequence_of_day=showing.sequence_of_day,
            movie_title=showing.movie.title,
            start_time=showing.start_time.isoformat(),
            audience_count=reservation.audience_count,
            final_showing_price=str(showing.final_price().amount),
            total_fee=str(total_fee.amount),
            currency=str(total_fee.currency),
        )
    ).model_dump()


def _error_response(
    error_code: str, message: str, details: Optional[list] = None
) -> dict:
    return ErrorResponse(
        error_code=error_code,
        message=message,
        details=details,
    ).model_dump(exclude_none=True)
