from .default_lineup import DEFAULT_LINEUP as DEFAULT_LINEUP
from .schedule_factory import LineupEntry as LineupEntry
from .schedule_factory import ScheduleFactory as ScheduleFactory
