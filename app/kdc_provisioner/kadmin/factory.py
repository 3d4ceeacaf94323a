"""Kadmin HTTP session factory.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx

from config import Settings
from entities import KdcServer
from kdc_provisioner.exceptions import KdcServerNotFoundError
from kdc_provisioner.gateways import KdcServerGateway

from .base import AbstractKdcSessionFactory
from .client import KadminHTTPSession
from .utils import log


class KadminHTTPSessionFactory(AbstractKdcSessionFactory):
    """Open kadmin API sessions for configured KDC servers."""

    def __init__(
        self,
        server_gateway: KdcServerGateway,
        settings: Settings,
    ) -> None:
        """Set dependencies.

        :param KdcServerGateway server_gateway: KDC servers
        :param Settings settings: app settings
        """
        self._servers = server_gateway
        self._settings = settings

    @asynccontextmanager
    async def open(self, server_id: int) -> AsyncIterator[KadminHTTPSession]:
        """Open session, the http client is closed on exit.

        :param int server_id: KDC server id
        :raises KdcConnectionError: server is unknown, unreachable or
            not ready
        :yield KadminHTTPSession: connected session
        """
        server = await self._servers.get(server_id)
        if server is None:
            log.error(f"KDC server {server_id} is not configured")
            raise KdcServerNotFoundError(f"KDC server {server_id}")

        async with self.build_client(server) as client:
            session = KadminHTTPSession(client)
            await session.connect()
            yield session

    def build_client(self, server: KdcServer) -> httpx.AsyncClient:
        """Build http client for a KDC server."""
        auth = None
        if server.admin_principal:
            auth = httpx.BasicAuth(
                server.admin_principal,
                server.password or "",
            )

        return httpx.AsyncClient(
            base_url=server.url,
            auth=auth,
            timeout=httpx.Timeout(
                self._settings.KDC_TIMEOUT_SECONDS,
                connect=self._settings.KDC_CONNECT_TIMEOUT_SECONDS,
            ),
            verify=self._settings.KDC_VERIFY_CERT,
            limits=httpx.Limits(
                max_connections=self._settings.KDC_MAX_CONN,
                max_keepalive_connections=self._settings.KDC_MAX_KEEPALIVE,
            ),
        )
