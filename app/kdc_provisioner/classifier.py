"""Lifecycle action classification.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enums import ProvisioningAction, ProvisioningIntent

SYNCHRONIZE_ACTIONS = frozenset({
    ProvisioningAction.CO_PERSON_ADDED,
    ProvisioningAction.CO_PERSON_ENTERED_GRACE_PERIOD,
    ProvisioningAction.CO_PERSON_PETITION_PROVISIONED,
    ProvisioningAction.CO_PERSON_PIPELINE_PROVISIONED,
    ProvisioningAction.CO_PERSON_REPROVISION_REQUESTED,
    ProvisioningAction.CO_PERSON_UNEXPIRED,
    ProvisioningAction.CO_PERSON_UPDATED,
})

REMOVE_ACTIONS = frozenset({
    ProvisioningAction.CO_PERSON_DELETED,
    ProvisioningAction.CO_PERSON_EXPIRED,
})


def classify_action(action: ProvisioningAction | str) -> ProvisioningIntent:
    """Map a registry action code to what the target has to do.

    Codes outside the person lifecycle, including ones this module
    does not know, are ignored.

    :param ProvisioningAction | str action: registry action code
    :return ProvisioningIntent: intent
    """
    try:
        action = ProvisioningAction(action)
    except ValueError:
        return ProvisioningIntent.IGNORE

    if action in SYNCHRONIZE_ACTIONS:
        return ProvisioningIntent.SYNCHRONIZE

    if action in REMOVE_ACTIONS:
        return ProvisioningIntent.REMOVE

    return ProvisioningIntent.IGNORE
