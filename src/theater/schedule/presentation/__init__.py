from .schedule_renderer import format_running_time as format_running_time
from .schedule_renderer import print_schedule as print_schedule
from .schedule_renderer import print_schedule_json as print_schedule_json
from .schedule_renderer import render_schedule_json as render_schedule_json
from .schedule_renderer import render_schedule_text as render_schedule_text
