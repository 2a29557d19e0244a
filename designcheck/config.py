"""Configuration utilities for the design validation service.

This module loads application configuration with the following rules:
- Primary source: `designcheck_config.json` at the project root.
- Overrides: environment variables, then optional text files under `config/`.
- Validation: Pydantic models enforce required fields and value constraints.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError, field_validator


CONFIG_DIR = Path("config")
ROOT_CONFIG = Path("designcheck_config.json")
logger = logging.getLogger(__name__)

DEFAULT_ACCEPTED_TYPES = [
    "application/pdf",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "text/plain",
]


def _read_config_file(rel_path: str) -> Optional[str]:
    path = CONFIG_DIR / rel_path
    try:
        if path.exists():
            return path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as e:
        # Recoverable: log and ignore unreadable override
        logger.warning("Failed to read override %s: %s", path, e)
        return None
    return None


def _env(key: str, default: Optional[str] = None) -> Optional[str]:
    return os.environ.get(key, default)


def _as_bool(text: Optional[str]) -> bool:
    return str(text).strip().lower() in {"1", "true", "yes", "on"}


class StorageConfig(BaseModel):
    backend: str = Field(default="memory")
    dsn: str = Field(default="sqlite+pysqlite:///:memory:")

    @field_validator("backend")
    @classmethod
    def backend_must_be_allowed(cls, v: str) -> str:
        allowed = {"memory", "sql"}
        if v not in allowed:
            raise ValueError(f"storage.backend must be one of {sorted(allowed)}")
        return v

    @field_validator("dsn")
    @classmethod
    def dsn_must_be_non_empty(cls, v: str) -> str:
        if not isinstance(v, str) or not v.strip():
            raise ValueError("storage.dsn must be a non-empty string")
        return v


class UploadConfig(BaseModel):
    max_bytes: int = Field(default=10 * 1024 * 1024, gt=0)
    accepted_types: List[str] = Field(default_factory=lambda: list(DEFAULT_ACCEPTED_TYPES))


class GenerationConfig(BaseModel):
    random_seed: Optional[int] = None
    restamp_validation_aggregates: bool = Field(default=True)


class ExportConfig(BaseModel):
    download_prefix: str = Field(default="/api/downloads")


class DesignConfig(BaseModel):
    # Optional host suffix a design URL must carry, e.g. "figma.com"
    host_marker: Optional[str] = None


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO")

    @field_validator("level")
    @classmethod
    def level_must_be_known(cls, v: str) -> str:
        level = str(v).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"logging.level must be one of {list(LOG_LEVELS)}")
        return level


class DemoConfig(BaseModel):
    seed_data: bool = Field(default=True)
    user_id: int = Field(default=1, gt=0)


class AppConfig(BaseModel):
    storage: StorageConfig = Field(default_factory=StorageConfig)
    uploads: UploadConfig = Field(default_factory=UploadConfig)
    generation: GenerationConfig = Field(default_factory=GenerationConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    design: DesignConfig = Field(default_factory=DesignConfig)
    demo: DemoConfig = Field(default_factory=DemoConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])


def _read_json_file(path: Path) -> dict:
    try:
        if path.exists():
            return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:  # pragma: no cover
        logger.error("Failed to read JSON config %s: %s", path, e)
    return {}


def _split_list(text: Optional[str]) -> Optional[List[str]]:
    if text is None:
        return None
    return [item.strip() for item in str(text).split(",") if item.strip()]


def load_config() -> AppConfig:
    """Load configuration with validation.

    Precedence (highest first):
    1) Environment variables
    2) Text files in `config/` (optional)
    3) designcheck_config.json at project root (primary base)
    4) Safe defaults for development
    """

    base = _read_json_file(ROOT_CONFIG)

    def _base(path: str, default: Optional[str] = None) -> Optional[str]:
        cur: object = base
        for key in path.split("."):
            if not isinstance(cur, dict) or key not in cur:
                return default
            cur = cur[key]
        if isinstance(cur, list):
            return ",".join(str(item) for item in cur)
        return str(cur) if cur is not None else default

    # Storage
    backend = (_env("DESIGNCHECK_STORAGE_BACKEND") or _read_config_file("storage.backend") or _base("storage.backend", "memory")).strip()
    dsn = _env("DATABASE_URL") or _read_config_file("database.url") or _base("storage.dsn") or "sqlite+pysqlite:///:memory:"

    # Uploads
    max_bytes_text = _env("UPLOAD_MAX_BYTES") or _read_config_file("uploads.max_bytes") or _base("uploads.max_bytes", "10485760")
    accepted_text = _env("UPLOAD_ACCEPTED_TYPES") or _read_config_file("uploads.accepted_types") or _base("uploads.accepted_types")

    # Test-case generation
    seed_text = _env("GENERATION_RANDOM_SEED") or _read_config_file("generation.random_seed") or _base("generation.random_seed")
    restamp_text = _env("GENERATION_RESTAMP_AGGREGATES") or _read_config_file("generation.restamp_aggregates") or _base("generation.restamp_validation_aggregates", "true")

    # Export, design URLs, demo seed, CORS, logging
    download_prefix = _env("EXPORT_DOWNLOAD_PREFIX") or _read_config_file("export.download_prefix") or _base("export.download_prefix", "/api/downloads")
    host_marker = _env("DESIGN_HOST_MARKER") or _read_config_file("design.host_marker") or _base("design.host_marker")
    seed_data_text = _env("DEMO_SEED_DATA") or _read_config_file("demo.seed_data") or _base("demo.seed_data", "true")
    demo_user_text = _env("DEMO_USER_ID") or _read_config_file("demo.user_id") or _base("demo.user_id", "1")
    cors_text = _env("CORS_ORIGINS") or _read_config_file("cors.origins") or _base("cors_origins", "*")
    log_level = _env("LOG_LEVEL") or _read_config_file("logging.level") or _base("logging.level", "INFO")

    try:
        uploads = UploadConfig(
            max_bytes=int(str(max_bytes_text).strip()),
            accepted_types=_split_list(accepted_text) or list(DEFAULT_ACCEPTED_TYPES),
        )
        cfg = AppConfig(
            storage=StorageConfig(backend=backend, dsn=dsn),
            uploads=uploads,
            generation=GenerationConfig(
                random_seed=int(str(seed_text).strip()) if seed_text else None,
                restamp_validation_aggregates=_as_bool(restamp_text),
            ),
            export=ExportConfig(download_prefix=str(download_prefix).rstrip("/")),
            design=DesignConfig(host_marker=host_marker or None),
            demo=DemoConfig(seed_data=_as_bool(seed_data_text), user_id=int(str(demo_user_text).strip())),
            cors_origins=_split_list(cors_text) or ["*"],
            logging=LoggingConfig(level=log_level),
        )
        return cfg
    except (PydanticValidationError, ValueError) as e:
        logger.error("Invalid application configuration: %s", e)
        raise


__all__ = [
    "AppConfig",
    "StorageConfig",
    "UploadConfig",
    "GenerationConfig",
    "ExportConfig",
    "DesignConfig",
    "DemoConfig",
    "LoggingConfig",
    "DEFAULT_ACCEPTED_TYPES",
    "load_config",
]
