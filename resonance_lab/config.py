"""Resonance Lab bench configuration."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Apparatus settings loaded from environment variables."""

    # Tube + air
    tube_diameter_m: float = 0.05
    reference_speed_ms: float = 343.0  # used to place the true resonance

    # Tuning forks
    preset_frequencies: tuple[int, ...] = (256, 288, 320, 341, 384, 426, 480)
    default_preset_hz: int = 320
    min_frequency_hz: float = 180.0
    max_frequency_hz: float = 700.0

    # Scoring
    score_tolerance_m: float = 0.018
    acceptance_threshold: float = 0.75

    # Water-level slider
    min_length_m: float = 0.10
    max_length_m: float = 1.00
    initial_length_m: float = 0.55
    length_step_m: float = 0.002

    model_config = {"env_prefix": "RESONANCE_LAB_"}


settings = Settings()
