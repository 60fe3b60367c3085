"""
Configuration Loader

Loads the optional YAML configuration file into a PdfgenConfig.
"""

import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from pdfgen.errors import UsageError
from pdfgen.models.config import PdfgenConfig

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "PDFGEN_CONFIG"
DEFAULT_CONFIG_PATH = Path("config") / "pdfgen.yaml"

_ENV_PLACEHOLDER_RE = re.compile(r"\$\{([^}]+)\}")


class ConfigLoader:
    """Loads and validates the pdfgen YAML configuration."""

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize config loader.

        Args:
            config_path: Path to YAML config file. When omitted, ``PDFGEN_CONFIG``
                is consulted, then ``config/pdfgen.yaml`` if it exists.
        """
        self.explicit = config_path is not None or bool(os.getenv(CONFIG_ENV_VAR))
        if config_path is None:
            config_path = os.getenv(CONFIG_ENV_VAR) or str(DEFAULT_CONFIG_PATH)

        self.config_path = Path(config_path)
        self.config: Optional[Dict[str, Any]] = None

    def load(self) -> Dict[str, Any]:
        """
        Load YAML configuration file.

        Returns:
            Configuration dictionary (empty when no file applies)
        """
        if not self.config_path.exists():
            if self.explicit:
                raise FileNotFoundError(f"Configuration file not found: {self.config_path}")
            logger.debug("No configuration file at %s, using defaults", self.config_path)
            self.config = {}
            return self.config

        with open(self.config_path, "r", encoding="utf-8") as f:
            loaded = yaml.safe_load(f)

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ValueError(f"Configuration file must contain a mapping: {self.config_path}")

        self.config = loaded
        logger.debug("Loaded configuration from %s", self.config_path)
        return self.config

    def substitute_env_vars(self, value: Any) -> Any:
        """
        Recursively substitute environment variables in config values.

        Args:
            value: Config value (may contain ${VAR_NAME} placeholders)

        Returns:
            Value with environment variables substituted
        """
        if isinstance(value, str):

            def replace_env(match):
                var_name = match.group(1)
                return os.getenv(var_name, match.group(0))

            return _ENV_PLACEHOLDER_RE.sub(replace_env, value)
        elif isinstance(value, dict):
            return {k: self.substitute_env_vars(v) for k, v in value.items()}
        elif isinstance(value, list):
            return [self.substitute_env_vars(item) for item in value]
        else:
            return value

    def get_config(self) -> PdfgenConfig:
        """
        Load, substitute and validate the configuration.

        Returns:
            Validated PdfgenConfig

        Raises:
            UsageError: If the file is missing, malformed or fails validation
        """
        try:
            raw = self.load()
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise UsageError(f"cannot load configuration: {e}") from e

        try:
            return PdfgenConfig.model_validate(self.substitute_env_vars(raw))
        except ValidationError as e:
            raise UsageError(f"invalid configuration in {self.config_path}:\n{e}") from e
