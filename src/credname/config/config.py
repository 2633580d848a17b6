"""Configuration management for credname.

Values here are optional defaults; a missing file simply means no defaults.
The file is only written by an explicit ``save`` (``credname configure``).
"""
import tomllib
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, ClassVar

from credname.config.file_ops import write_text_file
from credname.config.paths import default_config_path
from credname.platform.logging import logger


@dataclass
class Config:
    """Application configuration."""

    log_file: Path | None = None

    # Defaults for the first two segments of service instance credential names
    service_broker_name: str | None = None
    service_offering_name: str | None = None

    _instance: ClassVar["Config | None"] = None

    def __post_init__(self) -> None:
        if isinstance(self.log_file, str):
            self.log_file = Path(self.log_file) if self.log_file else None

    def save(self) -> Path:
        """Write the configuration as commented TOML.

        Returns:
            Path: File that was written.

        Raises:
            OSError: If the file cannot be written.
        """
        target = default_config_path()
        try:
            write_text_file(target, self.render_toml())
        except OSError as e:
            logger.error("Failed to save configuration: %s", e, extra={"markup": False})
            raise
        logger.info("Configuration saved to %s", target, extra={"markup": False})
        return target

    def render_toml(self) -> str:
        """Render the configuration with inline guidance; unset keys are omitted."""

        values = asdict(self)
        lines = [
            "# credname Configuration File",
            "",
            "# Log file path (optional)",
            '# Example: log_file = "/path/to/logs/credname.log"',
        ]
        if values["log_file"] is not None:
            lines.append(f"log_file = {_toml_string(values['log_file'])}")
        lines += [
            "",
            "# Default service broker and offering names (optional)",
            "# Used by `credname service-instance` when --broker/--offering are omitted",
        ]
        for key in ("service_broker_name", "service_offering_name"):
            if values[key] is not None:
                lines.append(f"{key} = {_toml_string(values[key])}")
        lines.append("")
        return "\n".join(lines)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration, falling back to defaults when no file exists.

        Raises:
            tomllib.TOMLDecodeError: If the config file is not valid TOML.
            OSError: If an existing config file cannot be read.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()
        if not config_file.is_file():
            logger.debug("No configuration at %s; using defaults", config_file, extra={"markup": False})
            cls._instance = cls()
            return cls._instance

        try:
            with open(config_file, "rb") as f:
                raw = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.error("Failed to load configuration: %s", e, extra={"markup": False})
            raise

        cls._instance = cls(**_known_keys(raw))
        logger.info("Configuration loaded from %s", config_file, extra={"markup": False})
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` rereads the file."""
        cls._instance = None


def _known_keys(raw: dict[str, Any]) -> dict[str, Any]:
    known = {f.name for f in fields(Config)}
    unknown = sorted(set(raw) - known)
    if unknown:
        logger.warning(
            "Ignoring unknown configuration keys: %s", ", ".join(unknown), extra={"markup": False}
        )
    return {key: value for key, value in raw.items() if key in known}


def _toml_string(value: Any) -> str:
    escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


__all__ = ["Config"]
