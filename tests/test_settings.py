import calendar
from datetime import time

import pytest
from pydantic import ValidationError

from my_garden.shared.config.settings import Settings


def make(**values) -> Settings:
    return Settings(_env_file=None, **values)


def test_defaults():
    settings = make()

    assert settings.FIRST_WEEKDAY == calendar.SUNDAY
    assert settings.PLANTS_STORAGE_KEY == "plants_key"
    assert settings.WATERING_FREQUENCY_MIN == 1
    assert settings.WATERING_FREQUENCY_MAX == 30
    assert settings.REMINDER_TIME == time(9, 0)
    assert settings.IMAGE_JPEG_QUALITY == 80


@pytest.mark.parametrize("value, expected", [("monday", 0), ("Sunday", 6), ("2", 2), (5, 5)])
def test_first_weekday_accepts_names_and_numbers(value, expected):
    assert make(FIRST_WEEKDAY=value).FIRST_WEEKDAY == expected


@pytest.mark.parametrize(
    "field, value",
    [
        ("FIRST_WEEKDAY", "someday"),
        ("FIRST_WEEKDAY", 7),
        ("STORAGE_BACKEND", "sqlite"),
        ("ENVIRONMENT", "moon"),
        ("LOG_LEVEL", "LOUD"),
        ("IMAGE_JPEG_QUALITY", 100),
    ],
)
def test_invalid_values_are_rejected(field, value):
    with pytest.raises(ValidationError):
        make(**{field: value})


def test_environment_reads_variables(monkeypatch):
    monkeypatch.setenv("STORAGE_BACKEND", "REDIS")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")

    settings = make()

    assert settings.STORAGE_BACKEND == "redis"
    assert settings.cors_origins_list == ["http://a.test", "http://b.test"]
