import os
from zoneinfo import ZoneInfo

DEFAULT_CURRENCY = "USD"


def get_timezone() -> ZoneInfo | None:
    """Timezone of the theater clock, ``None`` for host local time"""
    name = os.getenv("THEATER_TIMEZONE")
    if not name:
        return None
    return ZoneInfo(name)


def get_currency_code() -> str:
    return os.getenv("THEATER_CURRENCY", DEFAULT_CURRENCY)
