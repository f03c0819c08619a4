# Todo list: configuration
# Override defaults via config.yaml, environment variables or CLI args.

import os
import yaml
from pathlib import Path
from dataclasses import dataclass, field
from typing import List, Optional

CONFIG_PATH = Path(__file__).parent / "config.yaml"
DEFAULT_JSONL_PATH = "~/.local/share/todolist/events.jsonl"

DEFAULT_DEMO_TASKS = [
    "Learn arrays vs lists",
    "Create a todo app",
    "Write documentation",
    "Test the application",
]


class ConfigError(Exception):
    """Raised when a config file exists but cannot be used."""
    pass


@dataclass
class TodoConfig:
    """Runtime configuration for the todo list driver."""

    log_level: str = "WARNING"

    # Event forwarding
    emit_events: bool = False
    event_url: Optional[str] = None  # None = standalone, JSONL only
    jsonl_path: str = DEFAULT_JSONL_PATH

    # Demonstration sequence
    demo_tasks: List[str] = field(default_factory=lambda: list(DEFAULT_DEMO_TASKS))

    def resolve_paths(self):
        """Expand ~ and apply environment overrides."""
        if os.environ.get("TODOLIST_EVENT_URL"):
            self.event_url = os.environ["TODOLIST_EVENT_URL"]
        if os.environ.get("TODOLIST_LOG_LEVEL"):
            self.log_level = os.environ["TODOLIST_LOG_LEVEL"]
        self.log_level = self.log_level.upper()
        self.jsonl_path = str(Path(self.jsonl_path).expanduser())

    @classmethod
    def _check_fields(cls, cfg_path: Path, data: dict) -> dict:
        """
        Keep known keys with usable values.

        A null value means "use the default". Anything of the wrong type
        raises ConfigError.
        """
        checked = {}
        for key, value in data.items():
            if key not in cls.__dataclass_fields__ or value is None:
                continue
            if key == "emit_events":
                if not isinstance(value, bool):
                    raise ConfigError(f"{cfg_path}: {key} must be true or false")
            elif key == "demo_tasks":
                if not isinstance(value, list) or not all(isinstance(t, str) for t in value):
                    raise ConfigError(f"{cfg_path}: {key} must be a list of strings")
                value = list(value)
            elif not isinstance(value, str):
                raise ConfigError(f"{cfg_path}: {key} must be a string")
            checked[key] = value
        return checked

    @classmethod
    def load(cls, path: Optional[str] = None) -> "TodoConfig":
        """Load config from YAML file, falling back to defaults."""
        cfg_path = Path(path) if path else CONFIG_PATH
        if cfg_path.exists():
            with open(cfg_path, "r") as f:
                data = yaml.safe_load(f) or {}
            if not isinstance(data, dict):
                raise ConfigError(f"{cfg_path} must contain a YAML mapping")
            cfg = cls(**cls._check_fields(cfg_path, data))
        else:
            cfg = cls()
        cfg.resolve_paths()
        return cfg
