"""Client configuration.

This module defines the ClientConfig dataclass holding the endpoint URLs,
credentials and timeout used by the CLI and by ``ScpslHTTPClient.from_config``.
Values can come from a YAML file, from environment variables, or both
(environment overrides file).
"""

import os
from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from scpsl.constants import (
    DEFAULT_IP_URL,
    DEFAULT_SERVER_INFO_URL,
    DEFAULT_TIMEOUT,
    MAX_ACCOUNT_ID,
)
from scpsl.models.request import RequestParametersBuilder

# Environment variable -> ClientConfig field
ENV_VARS: dict[str, str] = {
    "SCPSL_SERVER_INFO_URL": "server_info_url",
    "SCPSL_IP_URL": "ip_url",
    "SCPSL_ACCOUNT_ID": "account_id",
    "SCPSL_API_KEY": "api_key",
    "SCPSL_TIMEOUT": "timeout",
}


@dataclass
class ClientConfig:
    """Configuration for talking to the SCP: Secret Laboratory API.

    Attributes:
        server_info_url: URL of the ``serverinfo`` endpoint
        ip_url: URL of the ``ip`` endpoint
        account_id: Account id used for ``serverinfo`` (None = not configured)
        api_key: API key used for ``serverinfo`` (None = not configured)
        timeout: Request timeout in seconds

    Example:
        config = ClientConfig.from_yaml("scpsl.yaml").with_overrides(
            api_key=os.environ.get("SCPSL_API_KEY"),
        )
    """

    server_info_url: str = DEFAULT_SERVER_INFO_URL
    ip_url: str = DEFAULT_IP_URL
    account_id: int | None = None
    api_key: str | None = None
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.server_info_url:
            raise ValueError("server_info_url must not be empty")
        if not self.ip_url:
            raise ValueError("ip_url must not be empty")
        if self.account_id is not None and not 0 <= self.account_id <= MAX_ACCOUNT_ID:
            raise ValueError("account_id must be an unsigned 64-bit integer")
        if self.api_key is not None and not self.api_key:
            raise ValueError("api_key must not be empty")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file.

        Args:
            path: Path to the output YAML file.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ClientConfig":
        """Create configuration from a dictionary.

        Raises:
            TypeError: If the dictionary has keys that are not config fields.
            ValueError: If a value is out of range.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise TypeError(f"Unknown configuration key(s): {', '.join(unknown)}")
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "ClientConfig":
        """Load configuration from a YAML file.

        An empty file yields the default configuration.

        Raises:
            FileNotFoundError: If the file does not exist.
            yaml.YAMLError: If the file is not valid YAML.
        """
        path = Path(path)
        with open(path) as f:
            data = yaml.safe_load(f)
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise TypeError("Configuration must be a YAML mapping (dictionary)")
        return cls.from_dict(data)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ClientConfig":
        """Create configuration from ``SCPSL_*`` environment variables."""
        return cls().with_env(environ)

    def with_env(self, environ: Mapping[str, str] | None = None) -> "ClientConfig":
        """Return a copy with any ``SCPSL_*`` environment variables applied."""
        if environ is None:
            environ = os.environ

        overrides: dict[str, Any] = {}
        for env_name, field_name in ENV_VARS.items():
            raw = environ.get(env_name)
            if raw is None or raw == "":
                continue
            try:
                if field_name == "account_id":
                    overrides[field_name] = int(raw)
                elif field_name == "timeout":
                    overrides[field_name] = float(raw)
                else:
                    overrides[field_name] = raw
            except ValueError as e:
                raise ValueError(f"Invalid {env_name} value: {raw!r}") from e
        return self.with_overrides(**overrides)

    def with_overrides(self, **overrides: Any) -> "ClientConfig":
        """Return a copy with the given fields replaced. ``None`` values are skipped."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def request_builder(self) -> RequestParametersBuilder:
        """Start a request builder pre-filled with the configured url, id and key."""
        builder = RequestParametersBuilder().url(self.server_info_url)
        if self.account_id is not None:
            builder.id(self.account_id)
        if self.api_key is not None:
            builder.key(self.api_key)
        return builder
