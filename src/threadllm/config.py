"""YAML config loading with env var overrides."""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv

from threadllm.settings import Settings

ENV_PREFIX = "THREADLLM_"


def load_settings(config_path: str = "threadllm.yaml") -> Settings:
    """Load settings from an optional YAML file, then apply env var overrides.

    The file may hold the fields at the top level or under a ``settings:`` key.
    """
    load_dotenv()

    data: dict = {}
    path = Path(config_path)
    if path.exists():
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    if isinstance(data.get("settings"), dict):
        data = data["settings"]

    # Explicit kwargs beat env in pydantic-settings, so env overrides go in last
    for field_name in Settings.model_fields:
        val = os.environ.get(f"{ENV_PREFIX}{field_name.upper()}")
        if val is not None:
            data[field_name] = val

    return Settings(**{k: v for k, v in data.items() if k in Settings.model_fields})
