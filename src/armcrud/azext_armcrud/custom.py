# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

"""This module implements the behavior of `az armcrud` commands."""

# pylint: disable=missing-docstring,too-many-arguments

import uuid

from ._client_factory import cf_apim, cf_sql
from .cmdlets.failover_group import (NewFailoverGroup, RemoveFailoverGroup, SetFailoverGroup,
                                     SwitchFailoverGroup)
from .cmdlets.identity import FAILOVER_GROUP, PRODUCT, ByName, select_identity
from .cmdlets.product import NewProduct, RemoveProduct, SetProduct
from .helpers.logger import logger
from .models import InstanceFailoverGroup, Product


def _product_identity(resource_group_name, service_name, product_id, input_object, resource_id):
    return select_identity(name=product_id, resource_group_name=resource_group_name, parent_name=service_name,
                           input_object=input_object, resource_id=resource_id).resolve(PRODUCT)


def _failover_group_identity(resource_group_name, location, failover_group_name, input_object, resource_id):
    return select_identity(name=failover_group_name, resource_group_name=resource_group_name, parent_name=location,
                           input_object=input_object, resource_id=resource_id).resolve(FAILOVER_GROUP)


# API Management products

def show_product(cmd, resource_group_name=None, service_name=None, product_id=None,
                 input_object=None, resource_id=None):
    identity = _product_identity(resource_group_name, service_name, product_id, input_object, resource_id)
    client = cf_apim(cmd.cli_ctx)
    return Product.from_dict(client.get(client.product_path(*identity)))


def list_products(cmd, resource_group_name, service_name):
    client = cf_apim(cmd.cli_ctx)
    return [Product.from_dict(item) for item in client.list(client.products_path(resource_group_name, service_name))]


def create_product(cmd, resource_group_name, service_name, title, product_id=None, description=None,
                   legal_terms=None, subscription_required=None, approval_required=None,
                   subscriptions_limit=None, subscription_period=None, notification_period=None,
                   state=None, yes=False):
    if not product_id:
        product_id = uuid.uuid4().hex
        logger.warning('Using generated product ID "%s"', product_id)
    identity = ByName(resource_group_name, service_name, product_id).resolve(PRODUCT)
    cmdlet = NewProduct(cmd, cf_apim(cmd.cli_ctx), identity, yes=yes, title=title, description=description,
                        legal_terms=legal_terms, subscription_required=subscription_required,
                        approval_required=approval_required, subscriptions_limit=subscriptions_limit,
                        subscription_period=subscription_period, notification_period=notification_period,
                        state=state)
    return cmdlet.run()


def update_product(cmd, resource_group_name=None, service_name=None, product_id=None, input_object=None,
                   resource_id=None, title=None, description=None, legal_terms=None, subscription_required=None,
                   approval_required=None, subscriptions_limit=None, subscription_period=None,
                   notification_period=None, state=None, yes=False):
    identity = _product_identity(resource_group_name, service_name, product_id, input_object, resource_id)
    cmdlet = SetProduct(cmd, cf_apim(cmd.cli_ctx), identity, yes=yes, title=title, description=description,
                        legal_terms=legal_terms, subscription_required=subscription_required,
                        approval_required=approval_required, subscriptions_limit=subscriptions_limit,
                        subscription_period=subscription_period, notification_period=notification_period,
                        state=state)
    return cmdlet.run()


def delete_product(cmd, resource_group_name=None, service_name=None, product_id=None, input_object=None,
                   resource_id=None, delete_subscriptions=False, yes=False):
    identity = _product_identity(resource_group_name, service_name, product_id, input_object, resource_id)
    RemoveProduct(cmd, cf_apim(cmd.cli_ctx), identity, yes=yes, delete_subscriptions=delete_subscriptions).run()


# SQL instance failover groups

def show_failover_group(cmd, resource_group_name=None, location=None, failover_group_name=None,
                        input_object=None, resource_id=None):
    identity = _failover_group_identity(resource_group_name, location, failover_group_name, input_object,
                                        resource_id)
    client = cf_sql(cmd.cli_ctx)
    return InstanceFailoverGroup.from_dict(client.get(client.failover_group_path(*identity)))


def list_failover_groups(cmd, resource_group_name, location):
    client = cf_sql(cmd.cli_ctx)
    path = client.failover_groups_path(resource_group_name, location)
    return [InstanceFailoverGroup.from_dict(item) for item in client.list(path)]


def create_failover_group(cmd, resource_group_name, location, failover_group_name, partner_region,
                          primary_managed_instance, partner_managed_instance, failover_policy=None,
                          grace_period=None, allow_read_only_failover=None, yes=False):
    identity = ByName(resource_group_name, location, failover_group_name).resolve(FAILOVER_GROUP)
    cmdlet = NewFailoverGroup(cmd, cf_sql(cmd.cli_ctx), identity, yes=yes, partner_region=partner_region,
                              primary_managed_instance=primary_managed_instance,
                              partner_managed_instance=partner_managed_instance,
                              failover_policy=failover_policy, grace_period=grace_period,
                              allow_read_only_failover=allow_read_only_failover)
    return cmdlet.run()


def update_failover_group(cmd, resource_group_name=None, location=None, failover_group_name=None,
                          input_object=None, resource_id=None, failover_policy=None, grace_period=None,
                          allow_read_only_failover=None, yes=False):
    identity = _failover_group_identity(resource_group_name, location, failover_group_name, input_object,
                                        resource_id)
    cmdlet = SetFailoverGroup(cmd, cf_sql(cmd.cli_ctx), identity, yes=yes, failover_policy=failover_policy,
                              grace_period=grace_period, allow_read_only_failover=allow_read_only_failover)
    return cmdlet.run()


def delete_failover_group(cmd, resource_group_name=None, location=None, failover_group_name=None,
                          input_object=None, resource_id=None, yes=False):
    identity = _failover_group_identity(resource_group_name, location, failover_group_name, input_object,
                                        resource_id)
    RemoveFailoverGroup(cmd, cf_sql(cmd.cli_ctx), identity, yes=yes).run()


def switch_failover_group(cmd, resource_group_name=None, location=None, failover_group_name=None,
                          input_object=None, resource_id=None, allow_data_loss=False, yes=False):
    identity = _failover_group_identity(resource_group_name, location, failover_group_name, input_object,
                                        resource_id)
    return SwitchFailoverGroup(cmd, cf_sql(cmd.cli_ctx), identity, yes=yes, allow_data_loss=allow_data_loss).run()
