from .entity import Theater as Theater
from .factory import DEFAULT_LINEUP as DEFAULT_LINEUP
from .factory import LineupEntry as LineupEntry
from .factory import ScheduleFactory as ScheduleFactory
from .repository import ScheduleRepository as ScheduleRepository
