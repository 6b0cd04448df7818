"""Configuration provider following Black Box Design principles."""
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Protocol


@dataclass(frozen=True)
class ClientConfig:
    """API server connection configuration."""
    server: str
    api_path: str
    version: str
    token: Optional[str]
    verify_ssl: bool
    ca_cert: Optional[str]
    timeout: float

    @property
    def base_url(self) -> str:
        """Server URL joined with the API path and group version."""
        return f"{self.server.rstrip('/')}/{self.api_path.strip('/')}/{self.version}"


@dataclass(frozen=True)
class CLIConfig:
    """Command-line defaults."""
    namespace: str
    log_level: str


class ConfigProvider(Protocol):
    """Protocol for configuration providers."""

    def get_client_config(self) -> ClientConfig:
        """Get API server connection configuration."""
        ...

    def get_cli_config(self) -> CLIConfig:
        """Get command-line defaults."""
        ...


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _parse_float(env: Mapping[str, str], key: str, default: str) -> float:
    raw = env.get(key, default)
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{key} must be a number, got {raw!r}") from None


class EnvConfigProvider:
    """Environment-based configuration provider."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        # Read os.environ lazily so values loaded from .env after construction count
        self._environ = environ

    @property
    def env(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    def get_client_config(self) -> ClientConfig:
        """Get API server connection configuration from environment variables."""
        env = self.env
        return ClientConfig(
            server=env.get("KUBECREATE_SERVER", "http://localhost:8080"),
            api_path=env.get("KUBECREATE_API_PATH", "/api"),
            version=env.get("KUBECREATE_API_VERSION", "v1"),
            token=env.get("KUBECREATE_TOKEN") or None,
            verify_ssl=_parse_bool(env.get("KUBECREATE_SSL_VERIFY", "true")),
            ca_cert=env.get("KUBECREATE_CA_CERT") or None,
            timeout=_parse_float(env, "KUBECREATE_TIMEOUT", "30"),
        )

    def get_cli_config(self) -> CLIConfig:
        """Get command-line defaults from environment variables."""
        env = self.env
        return CLIConfig(
            namespace=env.get("KUBECREATE_NAMESPACE", "default"),
            log_level=env.get("LOG_LEVEL", "WARNING").upper(),
        )


class StaticConfigProvider:
    """Provider returning fixed configurations, e.g. after CLI overrides."""

    def __init__(self, client_config: ClientConfig, cli_config: CLIConfig):
        self._client_config = client_config
        self._cli_config = cli_config

    def get_client_config(self) -> ClientConfig:
        return self._client_config

    def get_cli_config(self) -> CLIConfig:
        return self._cli_config
