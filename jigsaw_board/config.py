from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Puzzle board settings configuration."""

    model_config = SettingsConfigDict(case_sensitive=True, env_file=".env", env_prefix="JIGSAW_", extra="ignore")

    # Grid settings
    ROWS: int = Field(default=4, ge=1)
    COLS: int = Field(default=4, ge=1)

    # Outline settings (normalized units, one cell is CELL_SIZE wide)
    CELL_SIZE: float = Field(default=100.0, gt=0)
    TAB_RADIUS: float = Field(default=22.0, gt=0)

    # Piece size in pixels, smaller on narrow viewports
    PIECE_SIZE: float = Field(default=96.0, gt=0)
    COMPACT_PIECE_SIZE: float = Field(default=86.0, gt=0)
    COMPACT_BREAKPOINT: float = 700.0

    # Scatter settings
    SCATTER_PADDING: float = Field(default=48.0, ge=0)
    SCATTER_MAX_ATTEMPTS: int = Field(default=600, ge=1)
    MIN_DISTANCE_FACTOR: float = Field(default=1.1, ge=0)
    MAX_TILT: float = Field(default=14.0, ge=0)

    @model_validator(mode="after")
    def check_tab_radius(self) -> "Settings":
        """Reject tab radii that would make neighbouring arcs overlap."""
        if self.TAB_RADIUS >= self.CELL_SIZE / 2:
            raise ValueError(
                f"TAB_RADIUS ({self.TAB_RADIUS}) must be below half of CELL_SIZE ({self.CELL_SIZE / 2})"
            )
        return self


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Create instance
settings = get_settings()
