# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

"""Commands for API Management products."""

# pylint: disable=missing-docstring

from azure.cli.core.azclierror import InvalidArgumentValueError

from ..models import Product, ProductState
from .base import ResourceCmdlet
from .identity import PRODUCT

_PRODUCT_ARGS = ("title", "description", "legal_terms", "subscription_required", "approval_required",
                 "subscriptions_limit", "subscription_period", "notification_period", "state")


def apply_product_args(product, args):
    """Copy every argument the user supplied onto product."""
    for field in _PRODUCT_ARGS:
        value = args.get(field)
        if value is not None:
            setattr(product, field, ProductState.parse(value) if field == "state" else value)
    return product


class NewProduct(ResourceCmdlet):
    kind = PRODUCT
    action = "Create"

    def __init__(self, cmd, client, identity, yes=False, **args):
        super().__init__(cmd, client, identity, yes)
        self.args = args

    def get_entity(self):
        if self.client.exists(self.path):
            raise InvalidArgumentValueError(f"The {self.describe()} already exists.")
        return [Product(product_id=self.name, resource_group_name=self.resource_group_name,
                        service_name=self.parent_name)]

    def apply_user_input_to_model(self, entities):
        return [apply_product_args(entities[0], self.args)]

    def persist_changes(self, entities):
        response = self.client.put(self.path, entities[0].to_arm_payload())
        return [Product.from_dict(response) if response else entities[0]]


class SetProduct(ResourceCmdlet):
    kind = PRODUCT
    action = "Update"

    def __init__(self, cmd, client, identity, yes=False, **args):
        super().__init__(cmd, client, identity, yes)
        self.args = args

    def apply_user_input_to_model(self, entities):
        return [apply_product_args(entities[0], self.args)]

    def persist_changes(self, entities):
        response = self.client.patch(self.path, entities[0].to_arm_payload())
        # Older API versions answer PATCH with 204 and no body.
        return [Product.from_dict(response) if response else entities[0]]


class RemoveProduct(ResourceCmdlet):
    kind = PRODUCT
    action = "Delete"
    confirm_before_fetch = True

    def __init__(self, cmd, client, identity, yes=False, delete_subscriptions=False):
        super().__init__(cmd, client, identity, yes)
        self.delete_subscriptions = delete_subscriptions

    def persist_changes(self, entities):
        uri_parameters = ["deleteSubscriptions=true"] if self.delete_subscriptions else None
        self.client.delete(self.path, etag="*", uri_parameters=uri_parameters)
        return entities
