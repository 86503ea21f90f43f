"""
Configuration parameters for the Othello engine.
"""
import os
from dataclasses import dataclass, asdict, field
from typing import Dict, Any, Optional, List
import json


@dataclass
class BoardConfig:
    """Configuration for the board."""
    size: int = 8


@dataclass
class PlayerConfig:
    """Configuration for one automated player."""
    kind: str = "lookahead"  # random, greedy or lookahead
    lookahead_turns: int = 2  # Only used by lookahead players
    seed: Optional[int] = None
    name: Optional[str] = None  # Defaults to the kind


@dataclass
class ArenaConfig:
    """Configuration for matches between players."""
    rounds: int = 10
    min_move_duration: float = 0.0  # Seconds each move takes at minimum
    output_dir: str = "arena_results"


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_dir: str = "logs"
    log_level: str = "INFO"
    log_to_file: bool = False
    verbose: bool = False


@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "othello"
    seed: int = 42
    board: BoardConfig = field(default_factory=BoardConfig)
    players: List[PlayerConfig] = field(default_factory=list)
    arena: ArenaConfig = field(default_factory=ArenaConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

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
            project_name=config_dict.get('project_name', 'othello'),
            seed=config_dict.get('seed', 42),
            board=BoardConfig(**config_dict.get('board', {})),
            players=[PlayerConfig(**p) for p in config_dict.get('players', [])],
            arena=ArenaConfig(**config_dict.get('arena', {})),
            logging=LoggingConfig(**config_dict.get('logging', {}))
        )

    @classmethod
    def load(cls, filepath: str) -> 'Config':
        """Load config from JSON file."""
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)


def get_default_config() -> Config:
    """Get default configuration: one player of each kind."""
    config = Config()

    config.players = [
        PlayerConfig(kind="random", seed=config.seed),
        PlayerConfig(kind="greedy", seed=config.seed + 1),
        PlayerConfig(kind="lookahead", lookahead_turns=2, seed=config.seed + 2),
    ]

    return config
