"""Loading, saving and interactive creation of the configuration document.

The document lives at a fixed path relative to the working directory
(``default.json`` unless overridden) and is written with an atomic replace.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Callable, Optional

import structlog
import typer
from pydantic import ValidationError

from relnotes.errors import ConfigError
from relnotes.models import DEFAULT_AI_ENDPOINT, ReleaseConfig

logger = structlog.get_logger(__name__)

DEFAULT_CONFIG_FILE = Path("default.json")


class ConfigStore:
    """Reads and writes the relnotes configuration document."""

    def __init__(self, path: Optional[Path] = None) -> None:
        """Initialize the store.

        Args:
            path: Location of the document. Defaults to ./default.json
        """
        self.path = Path(path) if path is not None else DEFAULT_CONFIG_FILE

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> ReleaseConfig:
        """Load and validate the configuration document.

        Returns:
            ReleaseConfig object

        Raises:
            ConfigError: If the file is missing, unreadable, malformed or invalid
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise ConfigError(f"Configuration file not found: {self.path}") from e
        except json.JSONDecodeError as e:
            raise ConfigError(f"Configuration file is not valid JSON: {self.path} ({e})") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Could not read configuration file {self.path}: {e}") from e

        try:
            config = ReleaseConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in {self.path}:\n{e}") from e

        logger.info("config_loaded", path=str(self.path), ai_enabled=config.ai.enabled)
        return config

    def save(self, config: ReleaseConfig) -> Path:
        """Write the configuration, replacing any existing document.

        Uses a temporary file and rename so a failed write never leaves a
        truncated document behind.

        Returns:
            Path where the configuration was saved

        Raises:
            ConfigError: If serialization or the write fails
        """
        directory = self.path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            payload = config.model_dump_json(indent=2)
            fd, temp_path = tempfile.mkstemp(
                dir=directory, prefix=f".{self.path.name}.", suffix=".tmp"
            )
        except (OSError, ValueError) as e:
            raise ConfigError(f"Could not write configuration file {self.path}: {e}") from e

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.write("\n")
            os.replace(temp_path, self.path)
        except OSError as e:
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            raise ConfigError(f"Could not write configuration file {self.path}: {e}") from e

        logger.info("config_saved", path=str(self.path))
        return self.path

    def create_interactive(
        self,
        prompt: Optional[Callable[..., str]] = None,
        confirm: Optional[Callable[..., bool]] = None,
    ) -> ReleaseConfig:
        """Build a configuration from console prompts and save it.

        Asks for the repository path, the branch, the AI key and, only when a
        key was given, whether to override the default endpoint URL.

        Args:
            prompt: Callable used to read a value (defaults to typer.prompt)
            confirm: Callable used for yes/no questions (defaults to typer.confirm)

        Returns:
            The saved ReleaseConfig

        Raises:
            ConfigError: If path or branch is empty, or the document cannot be written
        """
        prompt = prompt or typer.prompt
        confirm = confirm or typer.confirm

        typer.echo("Git configuration")
        path = prompt("Repository path", default="", show_default=False).strip()
        if not path:
            raise ConfigError("Repository path must not be empty")
        branch = prompt("Branch", default="", show_default=False).strip()
        if not branch:
            raise ConfigError("Branch must not be empty")

        typer.echo("AI configuration (leave the key empty for a plain-text summary)")
        key = prompt("AI key", default="", show_default=False, hide_input=True).strip()
        url = None
        if key and confirm(f"Override the default endpoint ({DEFAULT_AI_ENDPOINT})?", default=False):
            url = prompt("Endpoint URL").strip() or None

        try:
            config = ReleaseConfig.model_validate(
                {"git": {"path": path, "branch": branch}, "ai": {"key": key, "url": url}}
            )
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration:\n{e}") from e

        self.save(config)
        return config
