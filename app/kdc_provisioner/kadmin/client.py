"""Kadmin HTTP API session.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import httpx
from pydantic import ValidationError

import kdc_provisioner.exceptions as kdc_exc

from .base import AbstractKdcSession, KdcPrincipal
from .schemas import PrincipalSchema
from .utils import logger_wraps


class KadminHTTPSession(AbstractKdcSession):
    """KDC session over a kadmin API server."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        """Set client.

        Args:
            client (httpx.AsyncClient): http async client bound to one server
        """
        self.client = client

    @logger_wraps(error=kdc_exc.KdcConnectionError)
    async def connect(self) -> None:
        """Check the server is set up and accepts our credentials.

        :raises KdcConnectionError: server is not ready
        """
        response = await self.client.get("/setup/status")

        if response.status_code != 200:
            raise kdc_exc.KdcConnectionError(
                f"status {response.status_code}: {response.text}",
            )

        try:
            ready = response.json()
        except ValueError:
            ready = False

        if ready is not True:
            raise kdc_exc.KdcConnectionError("kadmin server is not set up")

    @logger_wraps()
    async def get_principal(self, name: str) -> KdcPrincipal | None:
        """Get request."""
        response = await self.client.get("/principal", params={"name": name})

        if response.status_code == 404:
            return None

        if response.status_code != 200:
            raise kdc_exc.KdcGetPrincipalError(response.text)

        return self._to_principal(response)

    @logger_wraps()
    async def add_principal(self, name: str) -> KdcPrincipal:
        """Add request, the KDC generates a random key.

        The principal is not read back, attributes are the KDC defaults.
        """
        response = await self.client.post(
            "/principal",
            json={"name": name, "password": None},
        )

        if response.status_code != 201:
            raise kdc_exc.KdcAddPrincipalError(response.text)

        return KdcPrincipal(self, name)

    @logger_wraps()
    async def save_principal(self, principal: KdcPrincipal) -> None:
        """Modify attributes request."""
        response = await self.client.patch(
            "/principal/attributes",
            json={
                "name": principal.name,
                "attributes": int(principal.attributes),
            },
        )

        if response.status_code != 200:
            raise kdc_exc.KdcSavePrincipalError(response.text)

    def _to_principal(self, response: httpx.Response) -> KdcPrincipal:
        try:
            data = PrincipalSchema.model_validate_json(response.content)
        except ValidationError as err:
            raise kdc_exc.KdcGetPrincipalError(str(err)) from err

        return KdcPrincipal(
            self,
            name=data.name,
            attributes=data.attributes,
            mod_date=data.mod_date,
        )
