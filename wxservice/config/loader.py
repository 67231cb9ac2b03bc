"""YAML config loader with environment overrides."""

import os
from pathlib import Path

import yaml

from wxservice.config.schema import ServiceConfig

USER_AGENT_ENV = "WXSERVICE_USER_AGENT"


def load_config(path: str | Path | None = None) -> ServiceConfig:
    """Load and validate config from a YAML file.

    A missing or empty file yields the defaults. ``WXSERVICE_USER_AGENT``
    overrides ``upstream.user_agent`` when set.
    """
    raw: dict = {}
    if path is not None:
        path = Path(path)
        if path.exists():
            with open(path) as f:
                raw = yaml.safe_load(f) or {}

    user_agent = os.environ.get(USER_AGENT_ENV, "").strip()
    if user_agent:
        raw["upstream"] = {**(raw.get("upstream") or {}), "user_agent": user_agent}

    return ServiceConfig(**raw)


def dump_config(config: ServiceConfig) -> str:
    """Render the effective config as YAML."""
    return yaml.safe_dump(
        config.model_dump(mode="json"), default_flow_style=False, sort_keys=False
    )
