"""
bootstrap/ - Configuration and logging setup.
"""

from .config import (
    KeenConfig,
    EngineConfig,
    LoggingConfig,
    load_config,
    get_config,
)

from .log_setup import (
    JSONFormatter,
    setup_logging,
    setup_logging_from_config,
)

__all__ = [
    # Config
    "KeenConfig",
    "EngineConfig",
    "LoggingConfig",
    "load_config",
    "get_config",
    # Logging
    "JSONFormatter",
    "setup_logging",
    "setup_logging_from_config",
]
