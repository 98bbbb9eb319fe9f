from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from theater.schedule.applications import GetScheduleService
from theater.schedule.domain.factory import ScheduleFactory
from theater.schedule.infrastructure import InMemoryScheduleRepository
from theater.schedule.presentation import render_schedule_json
from theater.shared.utils import api_response

logger = Logger()

repository = InMemoryScheduleRepository()
factory = ScheduleFactory()
service = GetScheduleService(repository=repository, factory=factory)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """Schedule lookup Lambda handler

    Returns today's schedule. The theater only runs a single day.
    """

    logger.info("Fetching today's schedule", extra={"path": event.raw_path})

    try:
        theater = service.get_today()
        return api_response(200, render_schedule_json(theater))

    except Exception:
        logger.exception("Failed to fetch schedule")
        return api_response(500, {"message": "Internal server error"})
