"""Configuration management for the card table."""

from dataclasses import dataclass, field
from typing import Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass(frozen=True)
class BlackjackConfig:
    """Blackjack table rules."""

    dealer_stands_on: int = 17
    min_cards_to_deal: int = 4

    def __post_init__(self) -> None:
        """Validate rule combinations."""
        if self.min_cards_to_deal < 4:
            raise ValueError("min_cards_to_deal must be at least 4")
        if not 0 < self.dealer_stands_on <= 21:
            raise ValueError("dealer_stands_on must be between 1 and 21")


@dataclass(frozen=True)
class SlapjackConfig:
    """Slapjack cadences, in seconds."""

    flip_interval: float = 1.5
    reaction_window: float = 2.0
    reaction_window_choices: tuple[float, ...] = (1.0, 1.5, 2.0, 2.5, 3.0)

    def __post_init__(self) -> None:
        """Validate cadence settings."""
        if self.flip_interval <= 0:
            raise ValueError("flip_interval must be positive")
        if any(choice <= 0 for choice in self.reaction_window_choices):
            raise ValueError("reaction window choices must be positive")
        if self.reaction_window not in self.reaction_window_choices:
            raise ValueError(
                f"reaction_window must be one of {self.reaction_window_choices}"
            )


@dataclass(frozen=True)
class LoggingConfig:
    """Logging output configuration."""

    level: LogLevel = "WARNING"
    format: str = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"
    datefmt: str = "%H:%M:%S"


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    blackjack: BlackjackConfig = field(default_factory=BlackjackConfig)
    slapjack: SlapjackConfig = field(default_factory=SlapjackConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Global configuration instance
config = AppConfig()
