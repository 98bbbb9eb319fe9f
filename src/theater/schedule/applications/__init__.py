from .get_schedule import GetScheduleService as GetScheduleService
