# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

"""
This module contains argument validators for `az armcrud` commands.
"""

from .cmdlets import failover_group
from .helpers.logger import logger
from .models import FailoverPolicy


def validate_grace_period(namespace):
    """Reject a grace period outside the range the service accepts."""
    grace_period = getattr(namespace, 'grace_period', None)
    failover_group.validate_grace_period(grace_period)
    policy = getattr(namespace, 'failover_policy', None)
    if grace_period is not None and policy is not None and FailoverPolicy.parse(policy) is FailoverPolicy.MANUAL:
        logger.warning("--grace-period is ignored when the failover policy is Manual.")
