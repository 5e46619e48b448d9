# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

"""This module loads the definitions of `az armcrud` commands.
"""

# pylint: disable=invalid-name

from ._format import FAILOVER_GROUP_TABLE_FORMAT
from ._format import FAILOVER_GROUPS_LIST_TABLE_FORMAT
from ._format import PRODUCT_TABLE_FORMAT
from ._format import PRODUCTS_LIST_TABLE_FORMAT


def load_command_table(self, _):
    """Loads armcrud commands into the parser."""

    with self.command_group('armcrud apim product', is_preview=True) as g:
        g.custom_command('create', 'create_product')
        g.custom_command('delete', 'delete_product')
        g.custom_command('list', 'list_products', table_transformer=PRODUCTS_LIST_TABLE_FORMAT)
        g.custom_show_command('show', 'show_product', table_transformer=PRODUCT_TABLE_FORMAT)
        g.custom_command('update', 'update_product')

    with self.command_group('armcrud sql instance-failover-group', is_preview=True) as g:
        g.custom_command('create', 'create_failover_group')
        g.custom_command('delete', 'delete_failover_group')
        g.custom_command('list', 'list_failover_groups', table_transformer=FAILOVER_GROUPS_LIST_TABLE_FORMAT)
        g.custom_show_command('show', 'show_failover_group', table_transformer=FAILOVER_GROUP_TABLE_FORMAT)
        g.custom_command('update', 'update_failover_group')
        g.custom_command('set-primary', 'switch_failover_group')
