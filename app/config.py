"""Module with settings.

Copyright (c) 2024 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import os
from functools import cached_property
from typing import ClassVar

from pydantic import BaseModel, PostgresDsn, computed_field, field_validator

_TRUE_STRINGS = frozenset({"1", "on", "t", "true", "y", "yes"})
_FALSE_STRINGS = frozenset({"0", "off", "f", "false", "n", "no"})


class Settings(BaseModel):
    """Settings with database dsn and KDC client limits."""

    DEBUG: bool = False

    POSTGRES_SCHEMA: ClassVar[str] = "postgresql+psycopg"
    POSTGRES_DB: str = "postgres"

    POSTGRES_HOST: str = "postgres"
    POSTGRES_USER: str
    POSTGRES_PASSWORD: str

    INSTANCE_DB_POOL_SIZE: int = 30
    INSTANCE_DB_POOL_LIMIT: int = 100
    INSTANCE_DB_POOL_TIMEOUT: int = 5

    KDC_CONNECT_TIMEOUT_SECONDS: float = 5
    KDC_TIMEOUT_SECONDS: float = 30
    KDC_MAX_CONN: int = 50
    KDC_MAX_KEEPALIVE: int = 10
    KDC_VERIFY_CERT: bool | str = True

    @computed_field  # type: ignore
    @cached_property
    def POSTGRES_URI(self) -> PostgresDsn:  # noqa
        """Build postgres DSN."""
        return PostgresDsn(
            f"{self.POSTGRES_SCHEMA}://"
            f"{self.POSTGRES_USER}:"
            f"{self.POSTGRES_PASSWORD}@"
            f"{self.POSTGRES_HOST}/"
            f"{self.POSTGRES_DB}"
        )

    @field_validator("KDC_VERIFY_CERT", mode="before")
    def parse_verify(cls, value: bool | str) -> bool | str:  # noqa: N805
        """Accept pydantic boolean strings from the environment.

        Anything else is kept as a CA bundle path.
        """
        if not isinstance(value, str):
            return value

        flag = value.strip().lower()
        if flag in _TRUE_STRINGS:
            return True
        if flag in _FALSE_STRINGS:
            return False
        return value

    @classmethod
    def from_os(cls) -> "Settings":
        """Get cls from environ."""
        return Settings(**os.environ)
