"""Small formatting helpers for display output."""

from __future__ import annotations

from datetime import datetime, timedelta

_SECOND = timedelta(seconds=1)
_MINUTE = timedelta(minutes=1)
_HOUR = timedelta(hours=1)
_DAY = timedelta(days=1)
_MONTH = timedelta(days=30)
_YEAR = timedelta(days=365)

_PERIODS = (
    (_SECOND, "about a second", "{} seconds"),
    (_MINUTE, "about a minute", "{} minutes"),
    (_HOUR, "about an hour", "{} hours"),
    (_DAY, "one day", "{} days"),
    (_MONTH, "one month", "{} months"),
    (_YEAR, "one year", "{} years"),
)
_ZERO_TEXT = "about a second"
_MAX_RELATIVE = timedelta(hours=73)
_DEFAULT_LAYOUT = "%Y-%m-%d"


def _duration_text(delta: timedelta) -> str:
    if delta < _PERIODS[0][0]:
        return _ZERO_TEXT
    chosen = _PERIODS[0]
    for period in _PERIODS:
        if delta >= period[0]:
            chosen = period
    unit, one_text, many_text = chosen
    count = int(delta / unit + 0.5)
    if count <= 1:
        return one_text
    return many_text.format(count)


def _relative(moment: datetime, reference: datetime) -> str:
    delta = reference - moment
    if delta > _MAX_RELATIVE or delta < -_MAX_RELATIVE:
        return moment.strftime(_DEFAULT_LAYOUT)
    if delta >= timedelta(0):
        return f"{_duration_text(delta)} ago"
    return f"in {_duration_text(-delta)}"


def safe_time(moment: datetime | None) -> str:
    """Describe a moment relative to now, or return an empty string for None."""
    if moment is None:
        return ""
    now = datetime.now(moment.tzinfo) if moment.tzinfo else datetime.now()
    return _relative(moment, now)


def trim_template(instance_template: str, instance_type: str) -> str:
    """Remove the '<type>-instance-template-' prefix from a template name."""
    return instance_template.replace(f"{instance_type}-instance-template-", "")


def safe_if_above_zero(number: int) -> str:
    """Return the number as text when positive, otherwise an empty string."""
    return str(number) if number > 0 else ""