"""Index configuration using Pydantic.

Defaults describe the standard layout: ``./scripts`` is indexed into
``./scripts.json``. A ``scriptindex.yaml`` in the working directory may
override any of them.
"""

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from scriptindex.errors import ConfigError, format_validation_errors
from scriptindex.normalizer import DOWNLOAD_URL_PREFIX
from scriptindex.walker import SCRIPT_EXTENSION

CONFIG_FILE = "scriptindex.yaml"

# Environment variable that overrides download_prefix
DOWNLOAD_PREFIX_ENV_VAR = "SCRIPTINDEX_DOWNLOAD_PREFIX"


class IndexConfig(BaseModel):
    """Settings for one indexing run."""

    model_config = ConfigDict(extra="forbid")

    root: str = Field(default="./scripts", description="Directory tree to scan")
    output: str = Field(default="./scripts.json", description="JSON index to write")
    extension: str = Field(default=SCRIPT_EXTENSION, description="Script file suffix, case-sensitive")
    download_prefix: str = Field(
        default=DOWNLOAD_URL_PREFIX,
        description="Base URL the download URLs are built on",
    )

    @field_validator("extension")
    @classmethod
    def validate_extension(cls, v: str) -> str:
        """Require a suffix that starts with a dot."""
        if not v.startswith(".") or len(v) < 2:
            msg = "extension must start with '.' and name a suffix"
            raise ValueError(msg)
        return v


def load_config(work_dir: Path) -> IndexConfig:
    """Load and validate scriptindex.yaml from work_dir.

    A missing or empty file yields the defaults.

    Args:
        work_dir: Directory the run happens in.

    Returns:
        Validated IndexConfig instance.

    Raises:
        ConfigError: If the file cannot be read, is not valid YAML, or does
            not match the schema.
    """
    config_path = work_dir / CONFIG_FILE
    data: object = {}

    if config_path.exists():
        try:
            data = yaml.safe_load(config_path.read_text()) or {}
        except OSError as e:
            msg = f"Cannot read '{config_path}': {e.strerror or e}"
            raise ConfigError(msg) from e
        except yaml.YAMLError as e:
            msg = f"Invalid YAML in '{config_path}': {e}"
            raise ConfigError(msg) from e

    try:
        config = IndexConfig.model_validate(data)
    except ValidationError as e:
        clean_errors = format_validation_errors(e)
        msg = f"Invalid config '{config_path}': {clean_errors}"
        raise ConfigError(msg) from e

    env_prefix = os.environ.get(DOWNLOAD_PREFIX_ENV_VAR)
    if env_prefix:
        config = config.model_copy(update={"download_prefix": env_prefix})
    return config
