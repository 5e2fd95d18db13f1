"""Settings configuration for the real-estate analytics core."""

from dataclasses import dataclass, asdict
from typing import Optional, Dict, Any
import json
import re

from . import constants


@dataclass
class Settings:
    """Configuration settings for analytics runs."""

    # Data paths (None = packaged dataset)
    properties_path: Optional[str] = None
    economic_data_path: Optional[str] = None
    output_path: Optional[str] = None

    # Time axis
    anchor_quarter: str = constants.ANCHOR_QUARTER
    forecast_quarters_ahead: int = constants.DEFAULT_QUARTERS_AHEAD

    # Adjustment behaviour
    jitter_seed: int = constants.DEFAULT_JITTER_SEED
    strict_quarters: bool = False  # Raise instead of using the neutral multiplier

    # Portfolio
    projected_growth: float = constants.DEFAULT_PROJECTED_GROWTH

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @classmethod
    def from_json(cls, json_path: str) -> "Settings":
        """Load settings from JSON file."""
        with open(json_path, 'r') as f:
            config = json.load(f)
        return cls(**config)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "Settings":
        """Create settings from dictionary."""
        return cls(**config_dict)

    def to_json(self, json_path: str) -> None:
        """Save settings to JSON file."""
        config_dict = {
            k: v for k, v in asdict(self).items()
            if v is not None
        }
        with open(json_path, 'w') as f:
            json.dump(config_dict, f, indent=2)

    def validate(self) -> None:
        """Validate settings consistency."""
        if not re.match(constants.QUARTER_PATTERN, self.anchor_quarter):
            raise ValueError(
                f"Anchor quarter must look like YYYY-Qn, got {self.anchor_quarter!r}"
            )

        if self.forecast_quarters_ahead < 0:
            raise ValueError("Forecast horizon cannot be negative")

        if self.jitter_seed < 0:
            raise ValueError("Jitter seed must be non-negative")

        if self.log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {self.log_level}")


def get_default_settings() -> Settings:
    """Get default settings instance."""
    return Settings()
