from datetime import datetime, timedelta, timezone

import pytest

from core.dates import format_long_date, supported_locales


def test_english_long_date():
    assert format_long_date(datetime(2024, 8, 4, tzinfo=timezone.utc), "en") == "August 4, 2024"


def test_portuguese_long_date():
    assert format_long_date(datetime(2024, 8, 4, tzinfo=timezone.utc), "pt-br") == "4 de agosto de 2024"


def test_locale_aliases():
    value = datetime(2024, 3, 1, tzinfo=timezone.utc)
    assert format_long_date(value, "pt_BR") == "1 de março de 2024"
    assert format_long_date(value, "EN") == "March 1, 2024"


def test_naive_datetime_treated_as_utc():
    assert format_long_date(datetime(2024, 12, 31, 23, 59), "en") == "December 31, 2024"


def test_aware_datetime_converted_to_utc():
    # 22:00 on Aug 3 in São Paulo is already Aug 4 in UTC
    sao_paulo = timezone(timedelta(hours=-3))
    assert format_long_date(datetime(2024, 8, 3, 22, 0, tzinfo=sao_paulo), "en") == "August 4, 2024"


def test_unknown_locale():
    with pytest.raises(ValueError, match="Unsupported date locale"):
        format_long_date(datetime(2024, 8, 4), "fr")


def test_supported_locales():
    assert supported_locales() == ["en", "pt-br"]
