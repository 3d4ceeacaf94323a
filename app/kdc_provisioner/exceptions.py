"""KDC provisioner exceptions.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import IntEnum

from errors import BaseDomainException


class ErrorCodes(IntEnum):
    """Error codes."""

    BASE_ERROR = 0
    CONFIGURATION_ERROR = 1
    KDC_SERVER_NOT_FOUND_ERROR = 2
    KDC_CONNECTION_ERROR = 3
    KDC_OPERATION_ERROR = 4
    KDC_GET_PRINCIPAL_ERROR = 5
    KDC_ADD_PRINCIPAL_ERROR = 6
    KDC_SAVE_PRINCIPAL_ERROR = 7


class KdcProvisionerError(BaseDomainException):
    """Base exception for KDC provisioning errors."""

    code: ErrorCodes = ErrorCodes.BASE_ERROR


class ConfigurationError(KdcProvisionerError):
    """Target configuration value is missing or invalid."""

    code = ErrorCodes.CONFIGURATION_ERROR


class KdcConnectionError(KdcProvisionerError):
    """KDC session cannot be established."""

    code = ErrorCodes.KDC_CONNECTION_ERROR


class KdcServerNotFoundError(KdcConnectionError):
    """Referenced KDC server is not configured."""

    code = ErrorCodes.KDC_SERVER_NOT_FOUND_ERROR


class KdcOperationError(KdcProvisionerError):
    """Operation against an established KDC session failed."""

    code = ErrorCodes.KDC_OPERATION_ERROR


class KdcGetPrincipalError(KdcOperationError):
    """Get principal error."""

    code = ErrorCodes.KDC_GET_PRINCIPAL_ERROR


class KdcAddPrincipalError(KdcOperationError):
    """Add principal error."""

    code = ErrorCodes.KDC_ADD_PRINCIPAL_ERROR


class KdcSavePrincipalError(KdcOperationError):
    """Save principal error."""

    code = ErrorCodes.KDC_SAVE_PRINCIPAL_ERROR
