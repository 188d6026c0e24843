"""Application configuration from environment variables."""

from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    glyphsmith_env: str = "development"
    glyphsmith_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:4200"]

    # Word glyph defaults (inline symbols in puzzle text)
    glyph_size: float = 24.0
    glyph_stroke_width: float = 1.5
    glyph_color: str = "currentColor"
    glyph_complexity: int = 4
    glyph_symmetry: str = "radial"

    # Words rendered once at startup into the read-only vocabulary
    glyph_vocabulary: list[str] = []

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def glyph_options(self) -> dict[str, Any]:
        return {
            "size": self.glyph_size,
            "stroke_width": self.glyph_stroke_width,
            "stroke_color": self.glyph_color,
            "complexity": self.glyph_complexity,
            "symmetry": self.glyph_symmetry,
        }


settings = Settings()
