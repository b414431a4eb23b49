"""Long-form date formatting for email copy."""

from datetime import UTC, datetime

_MONTHS: dict[str, tuple[str, ...]] = {
    "en": (
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
    "pt-br": (
        "janeiro", "fevereiro", "março", "abril", "maio", "junho",
        "julho", "agosto", "setembro", "outubro", "novembro", "dezembro",
    ),
}

_LONG_DATE_PATTERNS: dict[str, str] = {
    "en": "{month} {day}, {year}",
    "pt-br": "{day} de {month} de {year}",
}


def to_utc(value: datetime) -> datetime:
    """Naive datetimes are taken as UTC; aware ones are converted."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def format_long_date(value: datetime, locale: str = "pt-br") -> str:
    """Format a timestamp as a long localized date, e.g. ``August 4, 2024``.

    Naive datetimes are treated as UTC; aware ones are converted to UTC first.
    """
    key = locale.lower().replace("_", "-")
    if key not in _LONG_DATE_PATTERNS:
        raise ValueError(f"Unsupported date locale: {locale}")

    value = to_utc(value)

    return _LONG_DATE_PATTERNS[key].format(
        day=value.day,
        month=_MONTHS[key][value.month - 1],
        year=value.year,
    )


def supported_locales() -> list[str]:
    return sorted(_LONG_DATE_PATTERNS)
