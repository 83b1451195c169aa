"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field


def _env_flag(name: str, default: str = "false") -> bool:
    """Read a boolean switch from the environment."""
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


@dataclass(frozen=True)
class GameConfig:
    """House settings for a session."""

    starting_balance: int = 1000

    def __post_init__(self) -> None:
        if self.starting_balance <= 0:
            raise ValueError("Starting balance must be positive")


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: _env_flag("DEBUG"))
    log_level: str = field(
        default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING").upper()
    )
    game: GameConfig = field(default_factory=GameConfig)

    @property
    def effective_log_level(self) -> str:
        """Log level after applying the debug switch."""
        return "DEBUG" if self.debug else self.log_level


# Global configuration instance
config = AppConfig()
