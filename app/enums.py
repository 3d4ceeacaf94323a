"""Enums.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import KEEP, IntFlag, StrEnum


class ProvisioningAction(StrEnum):
    """Registry transaction types triggering provisioning."""

    AUTHENTICATOR_UPDATED = "AU"
    CO_EMAIL_LIST_ADDED = "LA"
    CO_EMAIL_LIST_DELETED = "LD"
    CO_EMAIL_LIST_REPROVISION_REQUESTED = "LR"
    CO_EMAIL_LIST_UPDATED = "LU"
    CO_GROUP_ADDED = "GA"
    CO_GROUP_DELETED = "GD"
    CO_GROUP_REPROVISION_REQUESTED = "GR"
    CO_GROUP_UPDATED = "GU"
    CO_PERSON_ADDED = "PA"
    CO_PERSON_DELETED = "PD"
    CO_PERSON_ENTERED_GRACE_PERIOD = "PG"
    CO_PERSON_EXPIRED = "PX"
    CO_PERSON_PETITION_PROVISIONED = "PP"
    CO_PERSON_PIPELINE_PROVISIONED = "PL"
    CO_PERSON_REPROVISION_REQUESTED = "PR"
    CO_PERSON_UNEXPIRED = "PY"
    CO_PERSON_UPDATED = "PU"
    CO_SERVICE_ADDED = "SA"
    CO_SERVICE_DELETED = "SD"
    CO_SERVICE_REPROVISION_REQUESTED = "SR"
    CO_SERVICE_UPDATED = "SU"


class PersonStatus(StrEnum):
    """Registry person status."""

    ACTIVE = "A"
    APPROVED = "Y"
    CONFIRMED = "C"
    DECLINED = "X"
    DELETED = "D"
    DENIED = "N"
    DUPLICATE = "D2"
    EXPIRED = "XP"
    GRACE_PERIOD = "GP"
    INVITED = "I"
    LOCKED = "LK"
    PENDING = "P"
    PENDING_APPROVAL = "PA"
    PENDING_CONFIRMATION = "PC"
    PENDING_VETTING = "PV"
    SUSPENDED = "S"


class ProvisioningStatus(StrEnum):
    """Provisioning status reported to the registry."""

    NOT_PROVISIONED = "N"
    PROVISIONED = "P"
    QUEUED = "Q"
    UNKNOWN = "X"


class RecordKind(StrEnum):
    """Kind of registry record a status query is made for."""

    CO_PERSON = "CoPerson"
    CO_GROUP = "CoGroup"
    CO_EMAIL_LIST = "CoEmailList"
    CO_SERVICE = "CoService"


class IdentifierType(StrEnum):
    """Default identifier types a principal can be named after."""

    EPPN = "eppn"
    EPTID = "eptid"
    MAIL = "mail"
    OIDC_SUB = "oidcsub"
    OPENID = "openid"
    SAML_PAIRWISE = "pairwiseid"
    SAML_SUBJECT = "subjectid"
    UID = "uid"


class ProvisioningIntent(StrEnum):
    """What a lifecycle event asks this target to do."""

    SYNCHRONIZE = "synchronize"
    REMOVE = "remove"
    IGNORE = "ignore"


class PrincipalState(StrEnum):
    """Principal state as observed in the KDC."""

    ABSENT = "absent"
    ENABLED = "enabled"
    DISABLED = "disabled"


class PrincipalAttributes(IntFlag, boundary=KEEP):
    """KDB principal attribute flags (krbTicketFlags).

    Only DISALLOW_ALL_TIX is ever changed by the provisioner, every
    other bit, known or not, is written back as read.
    """

    DISALLOW_POSTDATED = 0x00000001
    DISALLOW_FORWARDABLE = 0x00000002
    DISALLOW_TGT_BASED = 0x00000004
    DISALLOW_RENEWABLE = 0x00000008
    DISALLOW_PROXIABLE = 0x00000010
    DISALLOW_DUP_SKEY = 0x00000020
    DISALLOW_ALL_TIX = 0x00000040
    REQUIRES_PRE_AUTH = 0x00000080
    REQUIRES_HW_AUTH = 0x00000100
    REQUIRES_PWCHANGE = 0x00000200
    DISALLOW_SVR = 0x00001000
    PWCHANGE_SERVICE = 0x00002000
    SUPPORT_DESMD5 = 0x00004000
    NEW_PRINC = 0x00008000
    OK_AS_DELEGATE = 0x00100000
    OK_TO_AUTH_AS_DELEGATE = 0x00200000
    NO_AUTH_DATA_REQUIRED = 0x00400000
    LOCKDOWN_KEYS = 0x00800000
