"""TOML and environment based client configuration.

Loads ~/.gandi/defaults.toml (global) and gandi.toml (project), merges
them, then applies the GANDI_API_KEY and GANDI_URL environment variables.

Example gandi.toml::

    [hosting]
    url = "https://rpc.ote.gandi.net/xmlrpc/"
    poll_interval = 2
    operation_timeout = 300  # 0 waits forever
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, TypeAlias

from gandi_hosting.caller import PRODUCTION_URL
from gandi_hosting.exceptions import ConfigurationError
from gandi_hosting.operation import DEFAULT_FAILURE_STATUSES

RawConfig: TypeAlias = dict[str, Any]

GLOBAL_CONFIG_PATH = Path.home() / ".gandi" / "defaults.toml"
PROJECT_CONFIG_NAME = "gandi.toml"

API_KEY_ENV = "GANDI_API_KEY"
URL_ENV = "GANDI_URL"


@dataclass(frozen=True, slots=True)
class HostingConfig:
    """Client configuration.

    Attributes:
        api_key: Hosting API key.
        url: XML-RPC endpoint.
        request_timeout: Socket timeout per request, in seconds.
        poll_interval: Seconds between two operation status queries.
        operation_timeout: Seconds to wait for an operation, None for no limit.
        failure_statuses: Operation statuses treated as terminal failures.
    """

    api_key: str = ""
    url: str = PRODUCTION_URL
    request_timeout: float = 30.0
    poll_interval: float = 5.0
    operation_timeout: float | None = 600.0
    failure_statuses: tuple[str, ...] = DEFAULT_FAILURE_STATUSES

    def require_api_key(self) -> str:
        if not self.api_key:
            raise ConfigurationError(
                f"No API key configured. Set {API_KEY_ENV} or 'api_key' in {PROJECT_CONFIG_NAME}"
            )
        return self.api_key


def _deep_merge(base: RawConfig, override: RawConfig) -> RawConfig:
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _read_toml(path: Path) -> RawConfig:
    if not path.is_file():
        return {}
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML in {path}: {e}") from e


def load_config(
    *,
    project_dir: Path | None = None,
    global_path: Path | None = None,
) -> RawConfig:
    global_cfg = _read_toml(global_path or GLOBAL_CONFIG_PATH)
    project_path = (project_dir or Path.cwd()) / PROJECT_CONFIG_NAME
    project_cfg = _read_toml(project_path)

    merged = _deep_merge(global_cfg, project_cfg)
    merged.setdefault("hosting", {})
    return merged


def _build_config(raw: RawConfig) -> HostingConfig:
    known = {f.name for f in fields(HostingConfig)}
    unknown = set(raw) - known
    if unknown:
        raise ConfigurationError(
            f"Unknown hosting settings: {', '.join(sorted(unknown))}. "
            f"Valid: {', '.join(sorted(known))}"
        )

    values = dict(raw)
    if values.get("operation_timeout") == 0:
        values["operation_timeout"] = None
    if "failure_statuses" in values:
        values["failure_statuses"] = tuple(values["failure_statuses"])
    return HostingConfig(**values)


def resolve_config(
    *,
    project_dir: Path | None = None,
    global_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> HostingConfig:
    """Build a HostingConfig. Precedence: environment > project > global."""
    env = os.environ if environ is None else environ
    raw = dict(load_config(project_dir=project_dir, global_path=global_path)["hosting"])

    if api_key := env.get(API_KEY_ENV):
        raw["api_key"] = api_key
    if url := env.get(URL_ENV):
        raw["url"] = url

    return _build_config(raw)
