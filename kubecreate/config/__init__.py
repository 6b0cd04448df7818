"""
Config Module - Black Box Interface

Purpose: Connection settings and command-line defaults
Interface: ConfigProvider, EnvConfigProvider, StaticConfigProvider
Hidden: Environment variable names and parsing
"""

from .provider import CLIConfig, ClientConfig, ConfigProvider, EnvConfigProvider, StaticConfigProvider

__all__ = ["CLIConfig", "ClientConfig", "ConfigProvider", "EnvConfigProvider", "StaticConfigProvider"]
