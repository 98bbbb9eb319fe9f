from .clock import Clock as Clock
from .clock import fixed_clock as fixed_clock
from .clock import system_clock as system_clock
from .http_response import api_response as api_response
from .logger import get_logger as get_logger
from .validators import to_decimal as to_decimal
