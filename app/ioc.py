"""DI Provider KDC provisioner module.

Copyright (c) 2024 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import AsyncIterator

from dishka import Provider, Scope, from_context, provide
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from config import Settings
from kdc_provisioner.gateways import (
    IdentifierGateway,
    KdcProvisionerTargetGateway,
    KdcServerGateway,
)
from kdc_provisioner.kadmin import (
    AbstractKdcSessionFactory,
    KadminHTTPSessionFactory,
)
from kdc_provisioner.locks import PrincipalLockRegistry
from kdc_provisioner.reconciler import PrincipalReconciler
from kdc_provisioner.status_inspector import StatusInspector
from kdc_provisioner.use_cases import KdcProvisionerUseCase


class MainProvider(Provider):
    """Provider for database and app wide state."""

    scope = Scope.APP
    settings = from_context(provides=Settings, scope=Scope.APP)

    @provide(scope=Scope.APP)
    async def get_engine(
        self,
        settings: Settings,
    ) -> AsyncIterator[AsyncEngine]:
        """Get async engine."""
        engine = create_async_engine(
            str(settings.POSTGRES_URI),
            pool_size=settings.INSTANCE_DB_POOL_SIZE,
            max_overflow=settings.INSTANCE_DB_POOL_LIMIT,
            pool_timeout=settings.INSTANCE_DB_POOL_TIMEOUT,
            pool_pre_ping=False,
        )
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self,
        engine: AsyncEngine,
    ) -> async_sessionmaker[AsyncSession]:
        """Create session factory."""
        return async_sessionmaker(engine, expire_on_commit=False)

    @provide(scope=Scope.REQUEST)
    async def create_session(
        self,
        async_session: async_sessionmaker[AsyncSession],
    ) -> AsyncIterator[AsyncSession]:
        """Create session for request."""
        async with async_session() as session:
            yield session
            await session.commit()

    principal_locks = provide(PrincipalLockRegistry, scope=Scope.APP)


class KdcProvisionerProvider(Provider):
    """Provider for KDC provisioning."""

    scope = Scope.REQUEST

    kdc_server_gateway = provide(KdcServerGateway)
    identifier_gateway = provide(IdentifierGateway)
    target_gateway = provide(KdcProvisionerTargetGateway)
    kdc_sessions = provide(
        KadminHTTPSessionFactory,
        provides=AbstractKdcSessionFactory,
    )
    reconciler = provide(PrincipalReconciler)
    status_inspector = provide(StatusInspector)
    use_case = provide(KdcProvisionerUseCase)
