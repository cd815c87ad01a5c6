from datetime import datetime, time, timedelta

import pytz


BANGKOK = pytz.timezone("Asia/Bangkok")

# Trading windows as hour * 100 + minute, both ends inclusive
MORNING_SESSION = (1000, 1230)
AFTERNOON_SESSION = (1400, 1630)


def utc_now() -> datetime:
    """Naive UTC timestamp, the form every datetime column is stored in."""
    return datetime.now(pytz.utc).replace(tzinfo=None)


def to_bangkok(moment: datetime) -> datetime:
    # naive values are UTC
    if moment.tzinfo is None:
        moment = pytz.utc.localize(moment)
    return moment.astimezone(BANGKOK)


def is_market_open(now: datetime | None = None) -> bool:
    """Whether the SET is trading at ``now`` (defaults to the current time)."""
    local = to_bangkok(now if now is not None else utc_now())

    # Saturday, Sunday
    if local.weekday() >= 5:
        return False

    hhmm = local.hour * 100 + local.minute
    is_morning = MORNING_SESSION[0] <= hhmm <= MORNING_SESSION[1]
    is_afternoon = AFTERNOON_SESSION[0] <= hhmm <= AFTERNOON_SESSION[1]
    return is_morning or is_afternoon


def local_day_bounds(moment: datetime) -> tuple[datetime, datetime]:
    """Naive UTC [start, end) of the Bangkok calendar day containing ``moment``."""
    local_day = to_bangkok(moment).date()
    start = BANGKOK.localize(datetime.combine(local_day, time.min))
    end = BANGKOK.localize(datetime.combine(local_day + timedelta(days=1), time.min))
    return (
        start.astimezone(pytz.utc).replace(tzinfo=None),
        end.astimezone(pytz.utc).replace(tzinfo=None),
    )


def to_utc_naive(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment
    return moment.astimezone(pytz.utc).replace(tzinfo=None)
