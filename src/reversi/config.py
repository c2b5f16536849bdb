"""
Configuration parameters for Reversi.
"""
import os
from dataclasses import dataclass, asdict, field
from typing import Dict, Any, List
import json

@dataclass
class GameConfig:
    """Configuration for a game session."""
    board_size: int = 8
    allowed_sizes: List[int] = field(default_factory=lambda: [6, 8])

@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_dir: str = "logs"
    log_level: str = "INFO"
    log_to_file: bool = False
    verbose: bool = True

@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "Reversi"
    game: GameConfig = field(default_factory=GameConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def validate(self) -> None:
        """Raise ValueError if the configuration cannot be used for a session."""
        size = self.game.board_size
        if size < 4 or size % 2 != 0:
            raise ValueError(f"board_size must be an even number >= 4, got {size}")
        if size not in self.game.allowed_sizes:
            raise ValueError(f"board_size {size} is not one of {self.game.allowed_sizes}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def save(self, filepath: str):
        """Save config to JSON file."""
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        return cls(
            project_name=config_dict.get('project_name', 'Reversi'),
            game=GameConfig(**config_dict.get('game', {})),
            logging=LoggingConfig(**config_dict.get('logging', {}))
        )

    @classmethod
    def load(cls, filepath: str) -> 'Config':
        """Load config from JSON file."""
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)

def get_default_config() -> Config:
    """Get default configuration."""
    return Config()
