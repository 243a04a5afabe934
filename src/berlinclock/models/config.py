"""Application configuration model and its JSON file."""

import logging
import shutil
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_serializer

from berlinclock.exceptions import ConfigError
from berlinclock.models.enums import OutputFormat

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path.home() / ".berlinclock"
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.json"


def config_error_from(error: ValidationError, path: Path) -> ConfigError:
    """Turn a pydantic ValidationError into a ConfigError naming the first bad field."""
    problems = error.errors()
    if problems and problems[0]["type"] == "json_invalid":
        return ConfigError(path, f"invalid JSON ({problems[0]['msg']})")

    fields = [".".join(str(part) for part in p["loc"]) for p in problems]
    reason = "; ".join(f"{f}: {p['msg']}" for f, p in zip(fields, problems))
    return ConfigError(path, reason, field=fields[0] if len(fields) == 1 else None)


class AppConfig(BaseModel):
    """Settings read by the CLI."""

    output_format: OutputFormat = Field(
        default=OutputFormat.COMPACT,
        description="How 'berlinclock show' prints lamps (compact or rows)",
    )
    log_dir: Path = Field(
        default_factory=lambda: DEFAULT_CONFIG_DIR / "logs",
        description="Directory for the rotating log file",
    )

    @field_serializer("log_dir")
    def serialize_path(self, path: Path) -> str:
        return str(path)

    @classmethod
    def from_values(cls, values: dict[str, Any], path: Path) -> "AppConfig":
        """Validate plain values, reporting failures against ``path``."""
        try:
            return cls.model_validate(values)
        except ValidationError as e:
            raise config_error_from(e, path) from e

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Read the config file, or use defaults when it does not exist.

        A missing file is not created here; only ``save`` writes.

        Raises:
            ConfigError: If the file is empty, not JSON, or has invalid values
        """
        path = path or DEFAULT_CONFIG_PATH
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info(f"No config at {path}, using defaults")
            return cls()
        except OSError as e:
            raise ConfigError(path, f"cannot read file ({e.strerror})") from e

        if not text.strip():
            raise ConfigError(path, "file is empty")

        try:
            config = cls.model_validate_json(text)
        except ValidationError as e:
            raise config_error_from(e, path) from e

        logger.debug(f"Loaded config from {path}")
        return config

    def save(self, path: Path | None = None) -> None:
        """
        Write the config as indented JSON.

        An existing file is copied to ``<name>.bak`` first, and the new
        content goes through ``<name>.tmp`` so a failed write never leaves a
        half-written config behind.
        """
        path = path or DEFAULT_CONFIG_PATH
        path.parent.mkdir(parents=True, exist_ok=True)

        if path.exists():
            shutil.copy2(path, path.with_name(path.name + ".bak"))

        staging = path.with_name(path.name + ".tmp")
        try:
            staging.write_text(self.model_dump_json(indent=2), encoding="utf-8")
            staging.replace(path)
        finally:
            staging.unlink(missing_ok=True)

        logger.debug(f"Saved config to {path}")
