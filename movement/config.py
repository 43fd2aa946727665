"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from movement.capture.recorder import CaptureConfig
from movement.engine.config import ClassifierConfig


class Settings(BaseSettings):
    movement_env: str = "development"
    movement_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Classifier tolerances
    movement_general_tolerance: float = 0.25
    movement_circle_tolerance: float = 0.25
    movement_line_tolerance_px: float = 10.0
    movement_ellipse_centrum_tolerance_px: int = 100
    movement_ellipse_tolerance: float = 0.5

    # Capture
    movement_end_figure_timeout: int = 5
    movement_framerate_fps: int = 20

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def classifier_config(self) -> ClassifierConfig:
        return ClassifierConfig(
            general_tolerance=self.movement_general_tolerance,
            circle_tolerance=self.movement_circle_tolerance,
            line_tolerance_px=self.movement_line_tolerance_px,
            ellipse_centrum_tolerance_px=self.movement_ellipse_centrum_tolerance_px,
            ellipse_tolerance=self.movement_ellipse_tolerance,
        )

    def capture_config(self) -> CaptureConfig:
        return CaptureConfig(
            end_figure_timeout=self.movement_end_figure_timeout,
            framerate_fps=self.movement_framerate_fps,
        )


settings = Settings()
