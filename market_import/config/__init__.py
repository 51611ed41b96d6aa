from .loader import DEFAULT_CONFIG, ConfigError, ImporterConfig, load_config, resolve_config

__all__ = [
    "DEFAULT_CONFIG",
    "ConfigError",
    "ImporterConfig",
    "load_config",
    "resolve_config",
]
