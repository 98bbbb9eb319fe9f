from .schedule_repository import ScheduleRepository as ScheduleRepository
