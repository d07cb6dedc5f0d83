from .config import (
    add_config_arg,
    build_calendar,
    build_config,
    build_estimator,
    build_price_model,
    load_yaml_config,
    resolve_path,
)
from .logging import (
    DEFAULT_LOGGING,
    add_logging_args,
    setup_logging_from_config,
)

__all__ = [
    "DEFAULT_LOGGING",
    "add_config_arg",
    "add_logging_args",
    "build_calendar",
    "build_config",
    "build_estimator",
    "build_price_model",
    "load_yaml_config",
    "resolve_path",
    "setup_logging_from_config",
]
