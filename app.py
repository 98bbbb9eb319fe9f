#!/usr/bin/env python3

import argparse

from theater.schedule.applications import GetScheduleService
from theater.schedule.domain.factory import ScheduleFactory
from theater.schedule.infrastructure import InMemoryScheduleRepository
from theater.schedule.presentation import print_schedule, print_schedule_json
from theater.shared.utils import get_logger

logger = get_logger("theater")


def main() -> None:
    parser = argparse.ArgumentParser(description="Print today's theater schedule")
    parser.add_argument("--json", action="store_true", help="print the schedule as JSON")
    args = parser.parse_args()

    service = GetScheduleService(
        repository=InMemoryScheduleRepository(),
        factory=ScheduleFactory(),
    )
    theater = service.get_today()
    logger.debug("Loaded schedule", extra={"showings": len(theater.schedule)})

    if args.json:
        print_schedule_json(theater)
    else:
        print_schedule(theater)


if __name__ == "__main__":
    main()
