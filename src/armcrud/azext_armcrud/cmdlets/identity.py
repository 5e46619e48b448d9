# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

"""
Resolve which resource a command targets.

Every command accepts exactly one of three parameter sets:

* by name: `--name` plus `--resource-group` and the parent (`--service-name` or `--location`)
* by object: `--input-object`, e.g. the saved output of a `show` command
* by ID: `--resource-id`

`select_identity` checks that exactly one set is bound and `resolve` turns it into a
`ResourceIdentity` once, at command entry.
"""

from collections import namedtuple

from azure.cli.core.azclierror import (InvalidArgumentValueError, MutuallyExclusiveArgumentError,
                                       RequiredArgumentMissingError)

from ..helpers.constants import (APIM_PRODUCT_TYPE, APIM_PROVIDER, APIM_SERVICE_TYPE, SQL_FAILOVER_GROUP_TYPE,
                                 SQL_LOCATION_TYPE, SQL_PROVIDER)
from ..helpers.generic import load_input_object
from ..models import InstanceFailoverGroup, Product
from ..resource_id import ResourceIdentifier

ResourceIdentity = namedtuple("ResourceIdentity", ["resource_group_name", "parent_name", "name"])

ResourceKind = namedtuple("ResourceKind", [
    "label", "model", "namespace", "resource_type", "parent_option", "parent_field", "name_field", "path_method"])

PRODUCT = ResourceKind(
    label="product",
    model=Product,
    namespace=APIM_PROVIDER,
    resource_type=f"{APIM_SERVICE_TYPE}/{APIM_PRODUCT_TYPE}",
    parent_option="--service-name",
    parent_field="service_name",
    name_field="product_id",
    path_method="product_path",
)

FAILOVER_GROUP = ResourceKind(
    label="instance failover group",
    model=InstanceFailoverGroup,
    namespace=SQL_PROVIDER,
    resource_type=f"{SQL_LOCATION_TYPE}/{SQL_FAILOVER_GROUP_TYPE}",
    parent_option="--location",
    parent_field="location",
    name_field="name",
    path_method="failover_group_path",
)


class ByName(namedtuple("ByName", ["resource_group_name", "parent_name", "name"])):

    def resolve(self, kind):
        missing = [option for option, value in (("--resource-group", self.resource_group_name),
                                                (kind.parent_option, self.parent_name),
                                                ("--name", self.name)) if not value]
        if missing:
            raise RequiredArgumentMissingError(
                f"Missing {', '.join(missing)} to identify the {kind.label}.")
        return ResourceIdentity(self.resource_group_name, self.parent_name, self.name)


class ByResourceId(namedtuple("ByResourceId", ["resource_id"])):

    def resolve(self, kind):
        identifier = ResourceIdentifier(self.resource_id)
        if not identifier.matches_type(kind.namespace, kind.resource_type):
            raise InvalidArgumentValueError(
                f'"{self.resource_id}" is not the ID of a {kind.namespace}/{kind.resource_type} resource.')
        name = identifier.resource_name
        parent = identifier.parent()
        group = parent.parent()
        return ResourceIdentity(group.resource_name, parent.resource_name, name)


class ByInputObject(namedtuple("ByInputObject", ["input_object"])):

    def resolve(self, kind):
        model = kind.model.from_dict(load_input_object(self.input_object))
        if model.id:
            return ByResourceId(model.id).resolve(kind)
        identity = ResourceIdentity(model.resource_group_name,
                                    getattr(model, kind.parent_field),
                                    getattr(model, kind.name_field))
        if not all(identity):
            raise InvalidArgumentValueError(
                f"--input-object must contain an id, or a resource group, {kind.parent_field} and name.")
        return identity


def select_identity(name=None, resource_group_name=None, parent_name=None, input_object=None, resource_id=None):
    """Return the one identity specifier the user bound."""
    bound = []
    if name:
        bound.append(ByName(resource_group_name, parent_name, name))
    if input_object:
        bound.append(ByInputObject(input_object))
    if resource_id:
        bound.append(ByResourceId(resource_id))
    if len(bound) > 1:
        raise MutuallyExclusiveArgumentError("Use only one of --name, --input-object or --resource-id.")
    if not bound:
        raise RequiredArgumentMissingError("One of --name, --input-object or --resource-id is required.")
    return bound[0]
