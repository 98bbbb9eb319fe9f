from .in_memory_schedule_repository import (
    InMemoryScheduleRepository as InMemoryScheduleRepository,
)
