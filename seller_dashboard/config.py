"""Configuration management for seller-dashboard."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from seller_dashboard.exceptions import ConfigurationError


@dataclass
class AdvisorConfig:
    """Thresholds used by the listing action advisor."""

    min_photos: int = 5
    no_inquiry_days: int = 7
    price_review_days: int = 30
    interest_favorites: int = 3


@dataclass
class OutputConfig:
    """Report output configuration."""

    report_dir: Path = field(default_factory=lambda: Path("reports"))
    pretty_json: bool = False


@dataclass
class GeneratorConfig:
    """Sample data generation configuration."""

    locale: str = "ja_JP"
    num_sellers: int = 5
    properties_per_seller: tuple[int, int] = (1, 4)
    num_buyers: int = 10


@dataclass
class DashboardConfig:
    """Main configuration for seller-dashboard."""

    advisor: AdvisorConfig = field(default_factory=AdvisorConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    seed: int | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "DashboardConfig":
        """Create config from environment variables."""
        advisor = AdvisorConfig(
            min_photos=_env_int("ADVISOR_MIN_PHOTOS", 5),
            no_inquiry_days=_env_int("ADVISOR_NO_INQUIRY_DAYS", 7),
            price_review_days=_env_int("ADVISOR_PRICE_REVIEW_DAYS", 30),
            interest_favorites=_env_int("ADVISOR_INTEREST_FAVORITES", 3),
        )

        output = OutputConfig(
            report_dir=Path(os.getenv("OUTPUT_DIR", "reports")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        generator = GeneratorConfig(
            locale=os.getenv("FAKER_LOCALE", "ja_JP"),
            num_sellers=_env_int("NUM_SELLERS", 5),
        )

        return cls(
            advisor=advisor,
            output=output,
            generator=generator,
            seed=_env_int("SEED", None),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


def _env_int(name: str, default: int | None) -> int | None:
    """Read an integer environment variable."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e
