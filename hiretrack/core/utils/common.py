# @hiretrack_docs
from decimal import Decimal, ROUND_HALF_UP

from django.utils import timezone


def get_today(with_time=False, reset_hours=False):
    """
    Returns today's date.

    Setting `with_time` to True returns a datetime.datetime object.
    Setting `with_time` to False returns a datetime.date object.

    Setting `reset_hours` to True resets the time to the start of the day but
    `with_time` must be set to True while using `reset_hours`.
    """
    datetime_now = timezone.localtime() if with_time else timezone.localdate()
    if reset_hours and with_time:
        datetime_now = datetime_now.replace(hour=0, minute=0, second=0, microsecond=0)
    return datetime_now


def local_date(value):
    """Date part of an aware datetime in the current time zone."""
    return timezone.localdate(value) if value else None


def days_between(start, end):
    """
    Whole calendar days from `start` to `end`, both datetimes or dates.
    """
    start = local_date(start) if hasattr(start, 'tzinfo') else start
    end = local_date(end) if hasattr(end, 'tzinfo') else end
    return (end - start).days


def format_timezone(dt, format_string="%Y-%m-%d %I:%M %p"):
    """
    Returns a date formatted after its converted to local time
    :param dt: datetime (in UTC)
    :param format_string: string format to be formatted to
    :return: formatted timestamp
    """
    return timezone.localtime(dt).strftime(format_string)


def append_note(existing, note):
    """Join a new note onto existing notes, separated by a blank line."""
    if not note:
        return existing
    return "\n\n".join(filter(None, [existing, note]))


def round_half_up(value, places=1):
    """
    Round like a person would (2.25 -> 2.3), rather than to the nearest even.
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))
