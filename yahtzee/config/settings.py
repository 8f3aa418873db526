"""
Yahtzee - Application Settings

Loads configuration from environment variables using Pydantic Settings.
On Streamlit Cloud, bridges st.secrets into env vars so Pydantic can read them.
"""

import logging
import os
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

from yahtzee.engine.base import DEFAULT_ROLLS_PER_TURN, MAX_ROLLS_PER_TURN, GameConfig

logger = logging.getLogger(__name__)

_SECRET_KEYS = ("ROLLS_PER_TURN", "SEED", "DEBUG", "LOG_LEVEL", "ENABLE_ANIMATIONS")
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _load_streamlit_secrets() -> None:
    """Bridge Streamlit Cloud secrets into environment variables."""
    try:
        import streamlit as st

        for key in _SECRET_KEYS:
            if key not in os.environ and key in st.secrets:
                os.environ[key] = str(st.secrets[key])
    except Exception:
        # No secrets file outside Streamlit Cloud
        logger.debug("Streamlit secrets unavailable", exc_info=True)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Game
    rolls_per_turn: int = Field(default=DEFAULT_ROLLS_PER_TURN, ge=1, le=MAX_ROLLS_PER_TURN)
    seed: int | None = None

    # Application
    debug: bool = False
    log_level: str = "INFO"

    # Presentation
    enable_animations: bool = True

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    def game_config(self) -> GameConfig:
        """The per-session game configuration."""
        return GameConfig(rolls_per_turn=self.rolls_per_turn, seed=self.seed)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    _load_streamlit_secrets()
    return Settings()


def configure_logging(settings: Settings) -> None:
    """Set the root log level from settings. Handlers are added only once."""
    level = logging.DEBUG if settings.debug else logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {settings.log_level}")

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=_LOG_FORMAT)
    root.setLevel(level)
