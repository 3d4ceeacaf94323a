"""KDC provisioner.

Keeps the Kerberos principal of a registry person in line with the
person lifecycle.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from .classifier import classify_action
from .dataclasses import (
    IdentifierDTO,
    LifecycleEvent,
    ProvisioningStatusDTO,
    TargetConfig,
)
from .exceptions import (
    ConfigurationError,
    KdcConnectionError,
    KdcOperationError,
    KdcProvisionerError,
)
from .principal_resolver import resolve_principal_name
from .reconciler import PrincipalReconciler, PrincipalTransition
from .status_inspector import StatusInspector
from .use_cases import KdcProvisionerUseCase

__all__ = [
    "classify_action",
    "resolve_principal_name",
    "ConfigurationError",
    "IdentifierDTO",
    "KdcConnectionError",
    "KdcOperationError",
    "KdcProvisionerError",
    "KdcProvisionerUseCase",
    "LifecycleEvent",
    "PrincipalReconciler",
    "PrincipalTransition",
    "ProvisioningStatusDTO",
    "StatusInspector",
    "TargetConfig",
]
