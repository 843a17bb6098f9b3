from datetime import datetime, timezone
from decimal import Decimal

import pytest

from core.infrastructure.formatting import PricingService, TimezoneService, create_timezone_service


def test_convert_config_time_to_utc(timezone_service):
    assert timezone_service.convert_config_time_to_utc("2024-03-10 12:00:00") == "2024-03-10 16:00:00"


def test_convert_config_time_to_utc_rejects_bad_input(timezone_service):
    with pytest.raises(ValueError):
        timezone_service.convert_config_time_to_utc("yesterday")


def test_date_treats_naive_value_as_utc(timezone_service):
    local = timezone_service.date(datetime(2024, 1, 1, 12, 0, 0))

    assert local.hour == 7
    assert local.astimezone(timezone.utc).hour == 12


def test_default_zone_comes_from_settings(settings):
    settings.TIME_ZONE = "Asia/Tokyo"
    assert TimezoneService().convert_config_time_to_utc("2024-01-01 09:00:00") == "2024-01-01 00:00:00"


def test_invalid_zone_falls_back_to_utc():
    service = create_timezone_service("Mars/Olympus_Mons")
    assert service.config_timezone == "UTC"


@pytest.mark.parametrize("value,expected", [
    (Decimal("1234.5"), "$1,234.50"),
    ("19.999", "$20.00"),
    (0, "$0.00"),
    (-5, "-$5.00"),
])
def test_currency_without_container(pricing_service, value, expected):
    assert pricing_service.currency(value, True, False) == expected


def test_currency_with_container(pricing_service):
    assert pricing_service.currency("10", True, True) == '<span class="price">$10.00</span>'


def test_currency_unformatted_returns_rounded_decimal(pricing_service):
    assert pricing_service.currency("10.005", False) == Decimal("10.01")


def test_currency_symbol_and_places_are_configurable():
    service = PricingService(currency_code="EUR", currency_symbol="€", decimal_places=1)
    assert service.currency("3.14", True, False) == "€3.1"
