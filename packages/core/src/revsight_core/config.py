import os
from pathlib import Path
from typing import Optional

import yaml

from revsight_core.gateway import DEFAULT_ENDPOINT
from revsight_core.models import DEFAULT_LANGUAGE

DEFAULT_CONFIG: dict = {
    "endpoint": DEFAULT_ENDPOINT,
    "language": DEFAULT_LANGUAGE,
    "timeout": None,  # seconds; None = wait for the service indefinitely
}


def load_config(config_path: str = ".revsight.yml", cli_overrides: Optional[dict] = None) -> dict:
    """
    Load configuration by merging (in order of precedence):
      1. Built-in defaults
      2. .revsight.yml in the current directory
      3. CLI argument overrides

    Credentials are only ever read from the environment, never from the file.
    Raises ValueError when the file is unreadable YAML or holds a bad value.
    """
    config = dict(DEFAULT_CONFIG)

    path = Path(config_path)
    if path.exists():
        with open(path) as f:
            try:
                file_config = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Config file {config_path} is not valid YAML: {e}") from e
        if not isinstance(file_config, dict):
            raise ValueError(f"Config file {config_path} must contain a mapping.")
        config.update(file_config)

    if cli_overrides:
        for key, value in cli_overrides.items():
            if value is not None:
                config[key] = value

    _normalize(config)

    config["github_token"] = os.environ.get("GITHUB_TOKEN")
    config["llm_api_key"] = os.environ.get("REVSIGHT_LLM_API_KEY")

    return config


def _normalize(config: dict) -> None:
    # An empty "key:" line in YAML loads as None; treat it as unset.
    config["endpoint"] = str(config.get("endpoint") or DEFAULT_ENDPOINT)
    config["language"] = str(config.get("language") or DEFAULT_LANGUAGE)

    timeout = config.get("timeout")
    if timeout is not None:
        invalid = ValueError(f"Config key 'timeout' must be a number of seconds, got {timeout!r}.")
        if isinstance(timeout, bool):
            raise invalid
        try:
            timeout = float(timeout)
        except (TypeError, ValueError):
            raise invalid
        if timeout <= 0:
            raise ValueError(f"Config key 'timeout' must be positive, got {timeout!r}.")
    config["timeout"] = timeout
