from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

"""Config loader.

Responsibilities:
- Load YAML config (default: config/import.yml, override via MARKET_IMPORT_CONFIG)
- Validate against the bundled JSON schema (schema.json next to this module)
- Apply defaults for every key that is not set

The defaults reproduce the fixed upload contract of the admin tool, so running
without any config file behaves exactly like the built-in importer.
"""

SCHEMA_PATH = Path(__file__).with_name("schema.json")
DEFAULT_CONFIG_PATH = Path("config/import.yml")
CONFIG_ENV_VAR = "MARKET_IMPORT_CONFIG"


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class ImporterConfig:
    allowed_extensions: tuple[str, ...] = (".csv", ".xlsx", ".xls")
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    default_frequency: int = 12
    error_log_dir: str = "./logs"


DEFAULT_CONFIG = ImporterConfig()


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the bundled JSON schema.

    Raises:
        ConfigError: If the schema file is missing/unreadable or the data
            violates it (unknown keys, wrong types, out-of-range values).
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def load_config(path: Path) -> ImporterConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping: {path}")

    _validate_config_schema(data)

    exts = data.get("allowed_extensions")
    return ImporterConfig(
        # 拡張子は小文字で保持 (ファイル名も小文字化して比較する)
        allowed_extensions=(
            tuple(e.lower() for e in exts) if exts else DEFAULT_CONFIG.allowed_extensions
        ),
        max_file_size=data.get("max_file_size", DEFAULT_CONFIG.max_file_size),
        default_frequency=data.get("default_frequency", DEFAULT_CONFIG.default_frequency),
        error_log_dir=data.get("error_log_dir", DEFAULT_CONFIG.error_log_dir),
    )


def resolve_config() -> ImporterConfig:
    """Load the effective configuration.

    Resolution order:
        1. Path in $MARKET_IMPORT_CONFIG (must exist)
        2. config/import.yml in the working directory (if present)
        3. DEFAULT_CONFIG
    """
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return load_config(Path(env_path))
    if DEFAULT_CONFIG_PATH.exists():
        return load_config(DEFAULT_CONFIG_PATH)
    return DEFAULT_CONFIG
