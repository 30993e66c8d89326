"""
bootstrap/config.py - Library configuration.

Provides configuration loading from JSON files, environment variables
(prefix ``KEEN_``) and defaults.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from pathlib import Path
import os
import json
import logging

logger = logging.getLogger(__name__)


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass
class EngineConfig:
    """Default search engine parameters."""

    step_size: float = 0.1
    max_iterations: int = 100
    maximize: bool = True

    @classmethod
    def from_env(cls) -> "EngineConfig":
        return cls(
            step_size=float(os.getenv("KEEN_ENGINE_STEP_SIZE", "0.1")),
            max_iterations=int(os.getenv("KEEN_ENGINE_MAX_ITERATIONS", "100")),
            maximize=_env_bool("KEEN_ENGINE_MAXIMIZE", "true"),
        )


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_file: Optional[str] = None
    json_logs: bool = False

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        return cls(
            level=os.getenv("KEEN_LOG_LEVEL", "INFO"),
            format=os.getenv("KEEN_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
            log_file=os.getenv("KEEN_LOG_FILE"),
            json_logs=_env_bool("KEEN_JSON_LOGS", "false"),
        )


@dataclass
class KeenConfig:
    """Root configuration."""

    # Forces DEBUG logging regardless of logging.level
    debug: bool = False

    engine: EngineConfig = field(default_factory=EngineConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> "KeenConfig":
        """Create configuration from environment variables."""
        return cls(
            debug=_env_bool("KEEN_DEBUG", "false"),
            engine=EngineConfig.from_env(),
            logging=LoggingConfig.from_env(),
        )

    @classmethod
    def from_file(cls, filepath: str) -> "KeenConfig":
        """Load configuration from a JSON file, falling back to the environment."""
        path = Path(filepath)
        if not path.exists():
            logger.warning(f"Config file not found: {filepath}, using defaults")
            return cls.from_env()

        with open(path) as f:
            data = json.load(f)

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> "KeenConfig":
        """Overlay file values on top of the environment configuration."""
        config = cls.from_env()

        if "debug" in data:
            config.debug = data["debug"]

        for section in ("engine", "logging"):
            target = getattr(config, section)
            for key, value in data.get(section, {}).items():
                if hasattr(target, key):
                    setattr(target, key, value)
                else:
                    logger.warning(f"Ignoring unknown config key: {section}.{key}")

        return config

    def to_dict(self) -> Dict[str, Any]:
        return {
            "debug": self.debug,
            "engine": {
                "step_size": self.engine.step_size,
                "max_iterations": self.engine.max_iterations,
                "maximize": self.engine.maximize,
            },
            "logging": {
                "level": self.logging.level,
                "log_file": self.logging.log_file,
                "json_logs": self.logging.json_logs,
            },
        }


# Global config instance
_config: Optional[KeenConfig] = None


def load_config(filepath: str = None) -> KeenConfig:
    """
    Load configuration from file or environment.

    Args:
        filepath: Optional path to JSON config file

    Returns:
        KeenConfig instance
    """
    global _config

    if filepath:
        _config = KeenConfig.from_file(filepath)
    else:
        default_paths = [
            "./keen.json",
            "./config/keen.json",
            os.path.expanduser("~/.keen/config.json"),
        ]

        for path in default_paths:
            if Path(path).exists():
                logger.info(f"Loading config from: {path}")
                _config = KeenConfig.from_file(path)
                return _config

        _config = KeenConfig.from_env()

    logger.info(f"Configuration loaded: debug={_config.debug}")
    return _config


def get_config() -> KeenConfig:
    """Get current configuration, loading if needed."""
    global _config
    if _config is None:
        _config = load_config()
    return _config
