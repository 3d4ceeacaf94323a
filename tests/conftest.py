"""Test main config.

Copyright (c) 2024 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from typing import AsyncIterator

import pytest
import pytest_asyncio
from alembic import command
from alembic.config import Config as AlembicConfig
from dishka import (
    AsyncContainer,
    Provider,
    Scope,
    make_async_container,
    provide,
)
from sqlalchemy import Connection
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from config import Settings
from entities import Identifier, KdcProvisionerTarget, KdcServer
from ioc import KdcProvisionerProvider, MainProvider
from kdc_provisioner.exceptions import (
    KdcAddPrincipalError,
    KdcConnectionError,
    KdcGetPrincipalError,
    KdcSavePrincipalError,
)
from kdc_provisioner.gateways import KdcProvisionerTargetGateway
from kdc_provisioner.kadmin import (
    AbstractKdcSession,
    AbstractKdcSessionFactory,
    KdcPrincipal,
)
from kdc_provisioner.use_cases import KdcProvisionerUseCase
from tests.constants import TEST_DATA

ALEMBIC_INI = Path(__file__).parents[1] / "app" / "alembic.ini"


@dataclass
class FakePrincipalRecord:
    """Principal stored in the fake KDC."""

    attributes: int = 0
    mod_date: datetime = field(default_factory=lambda: datetime.now(UTC))


class FakeKdc:
    """In-memory KDC counting sessions and writes."""

    __test__ = False

    def __init__(self) -> None:
        """Create empty KDC."""
        self.principals: dict[str, FakePrincipalRecord] = {}
        self.opened = 0
        self.lookups: list[str] = []
        self.created: list[str] = []
        self.saved: list[tuple[str, int]] = []
        self.unreachable = False
        self.failing: set[str] = set()

    @property
    def writes(self) -> int:
        """Creates and saves issued so far."""
        return len(self.created) + len(self.saved)

    def add(
        self,
        name: str,
        attributes: int = 0,
        mod_date: datetime | None = None,
    ) -> FakePrincipalRecord:
        """Store principal without counting a write."""
        record = FakePrincipalRecord(attributes=attributes)
        if mod_date is not None:
            record.mod_date = mod_date
        self.principals[name] = record
        return record


class FakeKdcSession(AbstractKdcSession):
    """Session on the fake KDC."""

    __test__ = False

    def __init__(self, kdc: FakeKdc) -> None:
        """Bind to KDC."""
        self._kdc = kdc

    async def get_principal(self, name: str) -> KdcPrincipal | None:
        """Get principal."""
        if "get" in self._kdc.failing:
            raise KdcGetPrincipalError(name)

        self._kdc.lookups.append(name)
        record = self._kdc.principals.get(name)
        if record is None:
            return None
        return KdcPrincipal(self, name, record.attributes, record.mod_date)

    async def add_principal(self, name: str) -> KdcPrincipal:
        """Add principal."""
        if "add" in self._kdc.failing:
            raise KdcAddPrincipalError(name)

        self._kdc.created.append(name)
        record = self._kdc.add(name)
        return KdcPrincipal(self, name, record.attributes, record.mod_date)

    async def save_principal(self, principal: KdcPrincipal) -> None:
        """Save principal attributes."""
        if "save" in self._kdc.failing:
            raise KdcSavePrincipalError(principal.name)

        self._kdc.saved.append((principal.name, int(principal.attributes)))
        record = self._kdc.principals[principal.name]
        record.attributes = int(principal.attributes)
        record.mod_date = datetime.now(UTC)


class FakeKdcSessionFactory(AbstractKdcSessionFactory):
    """Open sessions on the fake KDC."""

    __test__ = False

    def __init__(self, kdc: FakeKdc) -> None:
        """Bind to KDC."""
        self._kdc = kdc

    @asynccontextmanager
    async def open(self, server_id: int) -> AsyncIterator[FakeKdcSession]:
        """Open session."""
        if self._kdc.unreachable:
            raise KdcConnectionError(f"KDC server {server_id} is down")

        self._kdc.opened += 1
        yield FakeKdcSession(self._kdc)


class TestProvider(Provider):
    """Test provider."""

    __test__ = False

    scope = Scope.APP

    def __init__(self, engine: AsyncEngine, kdc: FakeKdc) -> None:
        """Keep test engine and KDC."""
        super().__init__()
        self._engine = engine
        self._kdc = kdc

    @provide(scope=Scope.APP)
    def get_engine(self) -> AsyncEngine:
        """Get test engine."""
        return self._engine

    @provide(scope=Scope.REQUEST, provides=AbstractKdcSessionFactory)
    def get_kdc_sessions(self) -> FakeKdcSessionFactory:
        """Get fake KDC sessions."""
        return FakeKdcSessionFactory(self._kdc)


@pytest.fixture
def settings() -> Settings:
    """Get settings."""
    return Settings(POSTGRES_USER="user", POSTGRES_PASSWORD="password")


@pytest.fixture
def kdc() -> FakeKdc:
    """Get fake KDC."""
    return FakeKdc()


@pytest_asyncio.fixture
async def engine(settings: Settings) -> AsyncIterator[AsyncEngine]:
    """Create in-memory database and run migrations."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    config = AlembicConfig(str(ALEMBIC_INI))
    config.attributes["app_settings"] = settings

    def upgrade(conn: Connection) -> None:
        config.attributes["connection"] = conn
        command.upgrade(config, "head")

    async with engine.begin() as conn:
        await conn.run_sync(upgrade)

    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def container(
    settings: Settings,
    engine: AsyncEngine,
    kdc: FakeKdc,
) -> AsyncIterator[AsyncContainer]:
    """Create test container."""
    ctnr = make_async_container(
        MainProvider(),
        KdcProvisionerProvider(),
        TestProvider(engine, kdc),
        context={Settings: settings},
    )
    yield ctnr
    await ctnr.close()


@pytest_asyncio.fixture
async def request_container(
    container: AsyncContainer,
) -> AsyncIterator[AsyncContainer]:
    """Enter request scope."""
    async with container(scope=Scope.REQUEST) as request_container:
        yield request_container


@pytest_asyncio.fixture
async def session(request_container: AsyncContainer) -> AsyncSession:
    """Get request session."""
    return await request_container.get(AsyncSession)


@pytest_asyncio.fixture
async def setup_session(session: AsyncSession) -> None:
    """Store KDC servers, targets and person identifiers."""
    session.add_all(KdcServer(**data) for data in TEST_DATA["servers"])
    await session.flush()

    session.add_all(
        KdcProvisionerTarget(**data) for data in TEST_DATA["targets"]
    )
    for data in TEST_DATA["identifiers"]:
        session.add(Identifier(**data))
        await session.flush()

    await session.commit()


@pytest_asyncio.fixture
async def use_case(
    request_container: AsyncContainer,
) -> KdcProvisionerUseCase:
    """Get di use case."""
    return await request_container.get(KdcProvisionerUseCase)


@pytest_asyncio.fixture
async def target_gateway(
    request_container: AsyncContainer,
) -> KdcProvisionerTargetGateway:
    """Get di targets gateway."""
    return await request_container.get(KdcProvisionerTargetGateway)
