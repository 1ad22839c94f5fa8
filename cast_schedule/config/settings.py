"""Settings management using Pydantic for type validation and configuration."""

import logging
from datetime import date, datetime, time, timedelta
from pathlib import Path
from typing import Annotated, Any, Optional, cast

import yaml
from pydantic import AfterValidator, BaseModel, Field, PrivateAttr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..layout.calendar_layout import CalendarViewConfig
from ..layout.drawing import Stroke, Style
from ..render.colors import ScheduleColors, parse_hex_color

logger = logging.getLogger(__name__)

ENV_PREFIX = "CAST_SCHEDULE_"


def _validate_hex(v: str) -> str:
    parse_hex_color(v)
    return v


HexColor = Annotated[str, AfterValidator(_validate_hex)]


class LoggingSettings(BaseModel):
    """Logging configuration settings."""

    # Console Logging
    console_level: str = Field(
        default="INFO",
        description="Console log level: DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL",
    )
    console_colors: bool = Field(
        default=True, description="Enable colored console output (auto-detected)"
    )

    # File Logging
    file_enabled: bool = Field(default=False, description="Enable file logging")
    file_level: str = Field(
        default="DEBUG",
        description="File log level: DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL",
    )
    file_directory: Optional[str] = Field(
        default=None, description="Custom log directory (defaults to data_dir/logs)"
    )
    file_prefix: str = Field(default="cast_schedule", description="Log file prefix")
    max_log_files: int = Field(default=5, description="Maximum number of log files to keep")

    # Third-party Libraries
    third_party_level: str = Field(
        default="WARNING", description="Log level for third-party libraries"
    )


class CalendarViewSettings(BaseModel):
    """Which days and hours the calendar shows, and how events look."""

    num_days: int = Field(default=2, gt=0, description="Number of day columns")
    day_start_time: time = Field(default=time(8, 0), description="Top of each day column")
    day_end_time: time = Field(default=time(18, 0), description="Bottom of each day column")
    time_zone: str = Field(default="America/Los_Angeles", description="IANA time zone name")

    fill_color: HexColor = Field(default=ScheduleColors.EVENT_FILL, description="Event fill color")
    stroke_color: Optional[HexColor] = Field(
        default=ScheduleColors.EVENT_OUTLINE, description="Event outline color, null for none"
    )
    stroke_width: int = Field(default=1, ge=0, description="Event outline width in pixels")

    @property
    def day_duration(self) -> timedelta:
        """Length of the visible window; an end at or before the start wraps past midnight."""
        anchor = date(2000, 1, 1)
        duration = datetime.combine(anchor, self.day_end_time) - datetime.combine(
            anchor, self.day_start_time
        )
        if duration <= timedelta(0):
            duration += timedelta(days=1)
        return duration

    def base_style(self) -> Style:
        stroke = None
        if self.stroke_color is not None and self.stroke_width > 0:
            stroke = Stroke(width=self.stroke_width, color=self.stroke_color)
        return Style.filled(self.fill_color, stroke=stroke)

    def to_view_config(self, start_date: date, time_zone: Optional[str] = None) -> CalendarViewConfig:
        """Build the layout configuration for views starting on ``start_date``.

        Raises:
            pydantic.ValidationError: If the time zone is unknown
        """
        return CalendarViewConfig(
            start_date=start_date,
            num_days=self.num_days,
            day_start_time=self.day_start_time,
            day_duration=self.day_duration,
            time_zone=time_zone or self.time_zone,
            base_style=self.base_style(),
        )


class DisplaySettings(BaseModel):
    """Output image configuration."""

    width: int = Field(default=720, gt=0, description="Image width in pixels")
    height: int = Field(default=480, gt=0, description="Image height in pixels")
    image_mode: str = Field(default="RGB", description="PIL image mode: 1, L, RGB")
    background_color: HexColor = Field(default=ScheduleColors.BACKGROUND, description="Frame background")
    border_color: HexColor = Field(default=ScheduleColors.BORDER, description="Frame border color")
    border_width: int = Field(default=5, ge=0, description="Frame border width in pixels")
    output_path: str = Field(default="cast_schedule.png", description="Where preview images go")

    @field_validator("image_mode")
    @classmethod
    def validate_image_mode(cls, v: str) -> str:
        if v not in ("1", "L", "RGB"):
            raise ValueError(f"Unsupported image mode: {v}")
        return v


class CastScheduleSettings(BaseSettings):
    """Application settings with environment variable and YAML support."""

    # Private attributes
    _explicit_args: set = PrivateAttr(default_factory=set)

    app_name: str = Field(default="CastSchedule", description="Application name")

    # File Paths
    config_dir: Path = Field(default_factory=lambda: Path.home() / ".config" / "cast_schedule")
    data_dir: Path = Field(default_factory=lambda: Path.home() / ".local" / "share" / "cast_schedule")
    config_file_path: Optional[Path] = Field(
        default=None, description="Explicit YAML config file, searched for when unset"
    )

    calendar_view: CalendarViewSettings = Field(
        default_factory=CalendarViewSettings, description="Calendar view settings"
    )
    display: DisplaySettings = Field(
        default_factory=DisplaySettings, description="Output image settings"
    )
    logging: LoggingSettings = Field(
        default_factory=LoggingSettings, description="Logging settings"
    )

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)

        # Values passed explicitly or set through the environment win over YAML
        self._explicit_args = set(kwargs.keys())
        self._load_yaml_config()

    def _find_config_file(self) -> Optional[Path]:
        """Find config file: explicit path, then project directory, then user home.

        Raises:
            FileNotFoundError: If an explicitly configured file does not exist
        """
        if self.config_file_path is not None:
            if not self.config_file_path.exists():
                raise FileNotFoundError(f"Config file not found: {self.config_file_path}")
            return self.config_file_path

        project_root = Path(__file__).parent.parent.parent
        project_config = project_root / "config" / "config.yaml"
        if project_config.exists():
            return project_config

        user_config = self.config_dir / "config.yaml"
        if user_config.exists():
            return user_config

        return None

    def _apply_section(self, name: str, section_data: Any) -> None:
        """Merge one YAML section into the matching settings model."""
        if name in self._explicit_args:
            return
        if not isinstance(section_data, dict):
            logger.warning(f"Ignoring '{name}' section in config: expected a mapping")
            return

        current: BaseModel = getattr(self, name)
        merged = {**section_data, **current.model_dump(exclude_unset=True)}
        setattr(self, name, type(current).model_validate(merged))

    def _load_yaml_config(self) -> None:
        """Load configuration from YAML file if it exists."""
        config_file = self._find_config_file()
        if not config_file:
            return

        try:
            with config_file.open() as f:
                config_data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            # Don't fail if YAML loading fails, just continue with defaults/env vars
            logger.warning(f"Could not load YAML config from {config_file}: {e}")
            return

        if not config_data:
            return

        for section in ("calendar_view", "display", "logging"):
            if section in config_data:
                self._apply_section(section, config_data[section])

        if "app_name" in config_data and "app_name" not in self._explicit_args:
            self.app_name = config_data["app_name"]

        logger.debug(f"Loaded configuration from {config_file}")

    @property
    def config_file(self) -> Path:
        """Path to YAML configuration file."""
        return self.config_dir / "config.yaml"

    @property
    def log_dir(self) -> Path:
        if self.logging.file_directory:
            return Path(self.logging.file_directory)
        return self.data_dir / "logs"


# Global settings management
_settings_instance: Optional[CastScheduleSettings] = None


def get_settings() -> CastScheduleSettings:
    """Get the global settings instance, creating it lazily if needed.

    Returns:
        CastScheduleSettings: The global settings instance
    """
    if globals()["_settings_instance"] is None:
        globals()["_settings_instance"] = CastScheduleSettings()
    return cast(CastScheduleSettings, globals()["_settings_instance"])


def reset_settings() -> None:
    """Reset the global settings instance (primarily for testing)."""
    globals()["_settings_instance"] = None
