# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

"""Commands for SQL managed instance failover groups."""

# pylint: disable=missing-docstring

from azure.cli.core.azclierror import InvalidArgumentValueError

from ..helpers.constants import DEFAULT_GRACE_PERIOD_HOURS, MAX_GRACE_PERIOD_HOURS
from ..models import FailoverPolicy, InstanceFailoverGroup, ReadOnlyFailoverPolicy
from .base import ResourceCmdlet
from .identity import FAILOVER_GROUP


def validate_grace_period(hours):
    if hours is None:
        return
    if isinstance(hours, bool) or not isinstance(hours, int) or not 1 <= hours <= MAX_GRACE_PERIOD_HOURS:
        raise InvalidArgumentValueError(
            f"--grace-period must be a whole number of hours between 1 and {MAX_GRACE_PERIOD_HOURS}.")


def apply_failover_policy(group, failover_policy=None, grace_period=None, allow_read_only_failover=None):
    """
    Merge the failover arguments onto group.

    An omitted policy keeps the stored one. Under Manual policy there is no grace period. Otherwise
    an omitted grace period keeps the stored value, or defaults to one hour.
    """
    validate_grace_period(grace_period)
    policy = FailoverPolicy.parse(failover_policy) or group.read_write_failover_policy or FailoverPolicy.AUTOMATIC

    if policy is FailoverPolicy.MANUAL:
        hours = None
    elif grace_period is not None:
        hours = grace_period
    elif group.failover_with_data_loss_grace_period_hours is not None:
        hours = group.failover_with_data_loss_grace_period_hours
    else:
        hours = DEFAULT_GRACE_PERIOD_HOURS

    group.read_write_failover_policy = policy
    group.failover_with_data_loss_grace_period_hours = hours
    if allow_read_only_failover is not None:
        group.read_only_failover_policy = ReadOnlyFailoverPolicy.parse(allow_read_only_failover)
    return group


class _FailoverGroupCmdlet(ResourceCmdlet):

    kind = FAILOVER_GROUP

    def __init__(self, cmd, client, identity, yes=False, failover_policy=None, grace_period=None,
                 allow_read_only_failover=None):
        super().__init__(cmd, client, identity, yes)
        self.failover_policy = failover_policy
        self.grace_period = grace_period
        self.allow_read_only_failover = allow_read_only_failover

    def apply_user_input_to_model(self, entities):
        return [apply_failover_policy(entities[0], self.failover_policy, self.grace_period,
                                      self.allow_read_only_failover)]

    def persist_changes(self, entities):
        response = self.client.put(self.path, entities[0].to_arm_payload())
        return [InstanceFailoverGroup.from_dict(response) if response else entities[0]]


class NewFailoverGroup(_FailoverGroupCmdlet):
    action = "Create"

    def __init__(self, cmd, client, identity, yes=False, partner_region=None, primary_managed_instance=None,
                 partner_managed_instance=None, **policy_args):
        super().__init__(cmd, client, identity, yes, **policy_args)
        self.partner_region = partner_region
        self.primary_managed_instance = primary_managed_instance
        self.partner_managed_instance = partner_managed_instance

    def get_entity(self):
        if self.client.exists(self.path):
            raise InvalidArgumentValueError(f"The {self.describe()} already exists.")
        return [InstanceFailoverGroup(name=self.name, resource_group_name=self.resource_group_name,
                                      location=self.parent_name, partner_region=self.partner_region,
                                      primary_managed_instance_id=self.primary_managed_instance,
                                      partner_managed_instance_id=self.partner_managed_instance)]


class SetFailoverGroup(_FailoverGroupCmdlet):
    action = "Update"


class RemoveFailoverGroup(ResourceCmdlet):
    kind = FAILOVER_GROUP
    action = "Delete"
    confirm_before_fetch = True

    def persist_changes(self, entities):
        self.client.delete(self.path)
        return entities


class SwitchFailoverGroup(ResourceCmdlet):
    """Make the secondary named by --location the new primary."""

    kind = FAILOVER_GROUP
    action = "Switch"
    confirm_before_fetch = True

    def __init__(self, cmd, client, identity, yes=False, allow_data_loss=False):
        super().__init__(cmd, client, identity, yes)
        self.allow_data_loss = allow_data_loss

    def confirmation_message(self):
        msg = f'Make location "{self.parent_name}" the primary of {self.describe()}?'
        if self.allow_data_loss:
            msg = "Forced failover may lose data. " + msg
        return msg

    def persist_changes(self, entities):
        action = "forceFailoverAllowDataLoss" if self.allow_data_loss else "failover"
        response = self.client.post(self.path, action)
        return [InstanceFailoverGroup.from_dict(response) if response else self.fetch()]
