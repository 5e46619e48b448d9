# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

"""
This module contains functions to help with command-line prompting via the [TAB] key.
"""

from azure.cli.core.decorators import Completer

# pylint: disable=import-outside-toplevel


@Completer
def get_product_completion_list(cmd, prefix, namespace, **kwargs):  # pylint: disable=unused-argument
    """Return the IDs of products in the API Management service named by --service-name."""
    from ._client_factory import cf_apim

    resource_group_name = getattr(namespace, 'resource_group_name', None)
    service_name = getattr(namespace, 'service_name', None)
    if not resource_group_name or not service_name:
        return []
    client = cf_apim(cmd.cli_ctx)
    return [item['name'] for item in _list_or_warn(client, client.products_path(resource_group_name, service_name))]


@Completer
def get_failover_group_completion_list(cmd, prefix, namespace, **kwargs):  # pylint: disable=unused-argument
    """Return the names of instance failover groups in the location named by --location."""
    from ._client_factory import cf_sql

    resource_group_name = getattr(namespace, 'resource_group_name', None)
    location = getattr(namespace, 'location', None)
    if not resource_group_name or not location:
        return []
    client = cf_sql(cmd.cli_ctx)
    return [item['name'] for item in _list_or_warn(client, client.failover_groups_path(resource_group_name, location))]


def _list_or_warn(client, path):
    from knack.util import CLIError

    try:
        return client.list(path)
    except CLIError as err:
        # Print a warning if the user hit [TAB] but the bound arguments were incorrect.
        from argcomplete import warn
        warn(f'Warning: {err}')
    return []
