"""
Application Configuration

Uses Pydantic Settings for type-safe configuration.
"""

from pathlib import Path
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator, ConfigDict

# Package root: wa_points/
PROJECT_ROOT = Path(__file__).parent
# Bundled reference datasets: wa_points/data/
DATA_DIR = PROJECT_ROOT / "data"


class Settings(BaseSettings):
    """Application settings with validation."""

    # === Core ===
    log_level: str = Field(default="INFO", description="Logging level")

    # === Reference data ===
    coefficients_path: Path = Field(
        default=DATA_DIR / "world_athletics_constants_2025.json",
        description="Scoring table coefficients (men/women -> event -> [a, b, c])"
    )
    placement_scores_path: Path = Field(
        default=DATA_DIR / "placement_scores_2025.json",
        description="Placing score tables keyed by sub-table, category and place"
    )
    warn_on_missing_coefficients: bool = Field(
        default=True,
        description="Log events without coefficients after loading"
    )

    @field_validator('coefficients_path', 'placement_scores_path')
    @classmethod
    def expand_user(cls, v: Path) -> Path:
        """Allow ~/ in dataset paths."""
        return v.expanduser()

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
