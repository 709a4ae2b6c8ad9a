"""Configuration module for the circulation service.

Public API:
----------
settings: Settings instance
    Pydantic settings object with nested configuration

get_config(key: str, default=None) -> Any
    Flat-key configuration access function

get_logger(name: str) -> Logger
    Get a context-aware logger for your module

setup_loguru_logger(verbose: bool = False) -> None
    Configure Loguru logger for the application

log_startup_info() -> None
    Log circulation configuration at startup

Usage:
------
```python
from circulation.config import settings
limit = settings.circulation.max_active_borrows

from circulation.config import get_logger
logger = get_logger(__name__)
```
"""

from .logging import get_logger, log_startup_info, setup_loguru_logger
from .settings import Settings, get_config, settings

__all__ = [
    "Settings",
    "get_config",
    "get_logger",
    "log_startup_info",
    "settings",
    "setup_loguru_logger",
]
