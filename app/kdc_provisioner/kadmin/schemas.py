"""Kadmin API schemas.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from datetime import datetime

from pydantic import BaseModel


class PrincipalSchema(BaseModel):
    """Principal kadmin object."""

    name: str
    attributes: int = 0
    mod_date: datetime | None = None
