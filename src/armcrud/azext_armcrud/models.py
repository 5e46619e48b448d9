# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

"""
This module contains the resource models returned by `az armcrud` commands.

Models mirror the shape of the remote resources. They are built from ARM JSON with `from_dict`,
which also accepts the command output itself so that `show` output can be fed back through
`--input-object`, and are written back with `to_arm_payload`.
"""

# pylint: disable=too-many-instance-attributes,too-few-public-methods

from enum import Enum

from azure.cli.core.azclierror import InvalidArgumentValueError

from .helpers.generic import lookup, normalize_keys
from .resource_id import ResourceIdentifier


class CaseInsensitiveEnum(Enum):

    @classmethod
    def parse(cls, value):
        """Return the member matching value by name or value, ignoring case."""
        if value is None or isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for member in cls:
            if text in (member.name.lower(), member.value.lower()):
                return member
        choices = ", ".join(m.value for m in cls)
        raise InvalidArgumentValueError(f'"{value}" is not a valid {cls.__name__}. Allowed values: {choices}')


class ProductState(CaseInsensitiveEnum):
    NOT_PUBLISHED = "notPublished"
    PUBLISHED = "published"


class FailoverPolicy(CaseInsensitiveEnum):
    AUTOMATIC = "Automatic"
    MANUAL = "Manual"


class ReadOnlyFailoverPolicy(CaseInsensitiveEnum):
    DISABLED = "Disabled"
    ENABLED = "Enabled"


class _Model():

    def __eq__(self, other):
        return type(self) is type(other) and vars(self) == vars(other)

    def __repr__(self):
        fields = ", ".join(f"{k}={v!r}" for k, v in vars(self).items())
        return f"{type(self).__name__}({fields})"


class Product(_Model):
    """An API Management product."""

    def __init__(self, product_id=None, resource_group_name=None, service_name=None, title=None,
                 description=None, legal_terms=None, subscription_required=None, approval_required=None,
                 subscriptions_limit=None, subscription_period=None, notification_period=None,
                 state=None, id=None):  # pylint: disable=redefined-builtin
        self.id = id
        self.product_id = product_id
        self.resource_group_name = resource_group_name
        self.service_name = service_name
        self.title = title
        self.description = description
        self.legal_terms = legal_terms
        self.subscription_required = subscription_required
        self.approval_required = approval_required
        self.subscriptions_limit = subscriptions_limit
        self.subscription_period = subscription_period
        self.notification_period = notification_period
        self.state = ProductState.parse(state)

    @classmethod
    def from_dict(cls, data):
        props = normalize_keys(data.get("properties")) if "properties" in data else {}
        flat = normalize_keys(data)
        product = cls(
            id=flat.get("id"),
            product_id=flat.get("product_id") or (flat.get("name") if props else None),
            resource_group_name=flat.get("resource_group_name"),
            service_name=flat.get("service_name"),
            title=props.get("display_name", flat.get("title")),
            description=props.get("description", flat.get("description")),
            legal_terms=props.get("terms", flat.get("legal_terms")),
            subscription_required=props.get("subscription_required", flat.get("subscription_required")),
            approval_required=props.get("approval_required", flat.get("approval_required")),
            subscriptions_limit=props.get("subscriptions_limit", flat.get("subscriptions_limit")),
            subscription_period=props.get("subscription_period", flat.get("subscription_period")),
            notification_period=props.get("notification_period", flat.get("notification_period")),
            state=props.get("state", flat.get("state")),
        )
        if product.id:
            identifier = ResourceIdentifier(product.id)
            product.product_id = product.product_id or identifier.resource_name
            product.service_name = product.service_name or identifier.parent().resource_name
            product.resource_group_name = product.resource_group_name or identifier.resource_group_name
        return product

    def to_arm_payload(self):
        properties = {
            "displayName": self.title,
            "description": self.description,
            "terms": self.legal_terms,
            "subscriptionRequired": self.subscription_required,
            "approvalRequired": self.approval_required,
            "subscriptionsLimit": self.subscriptions_limit,
            "subscriptionPeriod": self.subscription_period,
            "notificationPeriod": self.notification_period,
            "state": self.state.value if self.state else None,
        }
        return {"properties": {k: v for k, v in properties.items() if v is not None}}


class InstanceFailoverGroup(_Model):
    """A SQL managed instance failover group."""

    def __init__(self, name=None, resource_group_name=None, location=None, read_write_failover_policy=None,
                 failover_with_data_loss_grace_period_hours=None, read_only_failover_policy=None,
                 replication_role=None, replication_state=None, partner_region=None,
                 primary_managed_instance_id=None, partner_managed_instance_id=None,
                 id=None):  # pylint: disable=redefined-builtin
        self.id = id
        self.name = name
        self.resource_group_name = resource_group_name
        self.location = location
        self.read_write_failover_policy = FailoverPolicy.parse(read_write_failover_policy)
        self.failover_with_data_loss_grace_period_hours = failover_with_data_loss_grace_period_hours
        self.read_only_failover_policy = ReadOnlyFailoverPolicy.parse(read_only_failover_policy)
        self.replication_role = replication_role
        self.replication_state = replication_state
        self.partner_region = partner_region
        self.primary_managed_instance_id = primary_managed_instance_id
        self.partner_managed_instance_id = partner_managed_instance_id

    @classmethod
    def from_dict(cls, data):
        if "properties" in data:
            return cls._from_arm(data)
        return cls(**{k: v for k, v in normalize_keys(data).items() if k in _IFG_FIELDS})

    @classmethod
    def _from_arm(cls, data):
        props = data.get("properties") or {}
        grace_minutes = lookup(props, "readWriteEndpoint", "failoverWithDataLossGracePeriodMinutes")
        pairs = props.get("managedInstancePairs") or [{}]
        regions = props.get("partnerRegions") or [{}]
        group = cls(
            id=data.get("id"),
            name=data.get("name"),
            read_write_failover_policy=lookup(props, "readWriteEndpoint", "failoverPolicy"),
            failover_with_data_loss_grace_period_hours=(
                grace_minutes // 60 if grace_minutes is not None else None),
            read_only_failover_policy=lookup(props, "readOnlyEndpoint", "failoverPolicy"),
            replication_role=props.get("replicationRole"),
            replication_state=props.get("replicationState"),
            partner_region=regions[0].get("location"),
            primary_managed_instance_id=pairs[0].get("primaryManagedInstanceId"),
            partner_managed_instance_id=pairs[0].get("partnerManagedInstanceId"),
        )
        if group.id:
            identifier = ResourceIdentifier(group.id)
            group.name = group.name or identifier.resource_name
            group.location = identifier.parent().resource_name
            group.resource_group_name = identifier.resource_group_name
        return group

    def to_arm_payload(self):
        read_write = {"failoverPolicy": self.read_write_failover_policy.value
                      if self.read_write_failover_policy else None}
        if self.failover_with_data_loss_grace_period_hours is not None:
            read_write["failoverWithDataLossGracePeriodMinutes"] = \
                self.failover_with_data_loss_grace_period_hours * 60
        properties = {"readWriteEndpoint": read_write}
        if self.read_only_failover_policy:
            properties["readOnlyEndpoint"] = {"failoverPolicy": self.read_only_failover_policy.value}
        if self.partner_region:
            properties["partnerRegions"] = [{"location": self.partner_region}]
        if self.primary_managed_instance_id or self.partner_managed_instance_id:
            properties["managedInstancePairs"] = [{
                "primaryManagedInstanceId": self.primary_managed_instance_id,
                "partnerManagedInstanceId": self.partner_managed_instance_id,
            }]
        return {"properties": properties}


_IFG_FIELDS = frozenset(vars(InstanceFailoverGroup()).keys())
