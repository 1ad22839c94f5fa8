"""Shared test configuration and lightweight fixtures."""

import logging
import os
from collections.abc import Iterator
from datetime import date, time, timedelta
from typing import Any
from zoneinfo import ZoneInfo

import pytest

from cast_schedule.config.settings import reset_settings
from cast_schedule.layout import CalendarLayout, CalendarViewConfig, DrawingBounds, Style

TEST_ZONE = ZoneInfo("America/Los_Angeles")
TEST_DAY = date(2022, 9, 1)
TEST_START_TIME = time(8, 0)
TEST_DAY_DURATION = timedelta(hours=10)  # 08:00-18:00, 600 minutes


@pytest.fixture
def test_bounds() -> DrawingBounds:
    """Two 100px wide, 100px tall day columns."""
    return DrawingBounds(left=0, top=0, width=200, height=100)


@pytest.fixture
def base_style() -> Style:
    return Style.filled("#666666")


@pytest.fixture
def view_config(base_style: Style) -> CalendarViewConfig:
    """Two-day 08:00-18:00 view starting 2022-09-01 in Los Angeles."""
    return CalendarViewConfig(
        start_date=TEST_DAY,
        num_days=2,
        day_start_time=TEST_START_TIME,
        day_duration=TEST_DAY_DURATION,
        time_zone=TEST_ZONE,
        base_style=base_style,
    )


@pytest.fixture
def test_layout(view_config: CalendarViewConfig) -> CalendarLayout:
    return CalendarLayout(view_config)


@pytest.fixture
def clean_settings_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Any) -> Iterator[None]:
    """Isolate settings from the developer's environment and config files."""
    for key in list(os.environ):
        if key.startswith("CAST_SCHEDULE_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("CAST_SCHEDULE_CONFIG_DIR", str(tmp_path / "config"))
    monkeypatch.setenv("CAST_SCHEDULE_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def reset_package_logger() -> Iterator[logging.Logger]:
    """Undo setup_logging() so handlers do not leak between tests."""
    logger = logging.getLogger("cast_schedule")
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def pytest_configure(config: Any) -> None:
    """Configure pytest with project markers."""
    config.addinivalue_line("markers", "unit: Fast unit tests")
    config.addinivalue_line("markers", "critical_path: Core functionality tests")
