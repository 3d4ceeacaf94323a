"""KDC sessions.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from .base import AbstractKdcSession, AbstractKdcSessionFactory, KdcPrincipal
from .client import KadminHTTPSession
from .factory import KadminHTTPSessionFactory
from .utils import log

__all__ = [
    "AbstractKdcSession",
    "AbstractKdcSessionFactory",
    "KdcPrincipal",
    "KadminHTTPSession",
    "KadminHTTPSessionFactory",
    "log",
]
