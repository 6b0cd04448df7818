"""
Client factory.

The composition root for the REST client:
- Reads the client configuration from a ConfigProvider
- Builds the httpx.Client with auth headers and TLS settings
- Returns only the RESTClient facade
"""

import logging
import ssl
from typing import Optional

import httpx

from ...config.provider import ClientConfig, ConfigProvider
from .codec import ParameterCodec
from .rest import RESTClient

logger = logging.getLogger("kubecreate.client")


class ClientFactory:
    """Factory for building the REST client stack."""

    @staticmethod
    def build(
        config_provider: ConfigProvider,
        codec: Optional[ParameterCodec] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> RESTClient:
        """
        Build a REST client from provider configuration.

        Args:
            config_provider: Configuration provider
            codec: Optional query parameter codec; defaults to the v1 codec
            transport: Optional httpx transport

        Returns:
            RESTClient bound to the configured server and group version
        """
        return ClientFactory.build_from_config(config_provider.get_client_config(), codec=codec, transport=transport)

    @staticmethod
    def build_from_config(
        config: ClientConfig,
        codec: Optional[ParameterCodec] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> RESTClient:
        """
        Build a REST client from an explicit configuration.

        Args:
            config: Client configuration
            codec: Optional query parameter codec
            transport: Optional httpx transport, e.g. httpx.MockTransport in tests
        """
        headers = {"Accept": "application/json"}
        if config.token:
            headers["Authorization"] = f"Bearer {config.token}"

        verify = config.verify_ssl
        if config.verify_ssl and config.ca_cert:
            verify = ssl.create_default_context(cafile=config.ca_cert)

        if config.server.startswith("http://") and config.token:
            logger.warning("Sending a bearer token over plain HTTP - use only for local development")

        http = httpx.Client(
            base_url=config.server,
            headers=headers,
            verify=verify,
            timeout=config.timeout,
            transport=transport,
        )
        logger.debug(f"Built REST client for {config.base_url}")
        return RESTClient(http, api_path=config.api_path, version=config.version, codec=codec)
