# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

"""
This module defines the parameters (aka arguments) for `az armcrud` commands.
"""

from azure.cli.core.commands.parameters import (get_enum_type, get_location_type, get_three_state_flag,
                                                resource_group_name_type)
from knack.arguments import CLIArgumentType

from ._completers import get_failover_group_completion_list
from ._completers import get_product_completion_list
from ._validators import validate_grace_period
from .models import FailoverPolicy, ProductState, ReadOnlyFailoverPolicy

PRODUCT_GROUP = 'armcrud apim product'
FAILOVER_GROUP_GROUP = 'armcrud sql instance-failover-group'


def load_arguments(self, _):
    """Loads command arguments into the parser."""

    input_object_type = CLIArgumentType(
        options_list=['--input-object'],
        help='JSON or YAML object, or a file containing one, as returned by the `show` command.')
    resource_id_type = CLIArgumentType(
        options_list=['--resource-id'], help='Full Azure resource ID of the resource.')

    with self.argument_context('armcrud') as ctx:
        ctx.argument('resource_group_name', resource_group_name_type, required=False)
        ctx.argument('input_object', input_object_type)
        ctx.argument('resource_id', resource_id_type)
        ctx.argument('yes', options_list=['--yes', '-y', '--force'], action='store_true',
                     help="Do not prompt for confirmation")

    with self.argument_context(PRODUCT_GROUP) as ctx:
        ctx.argument('service_name', options_list=['--service-name'],
                     help='Name of the API Management service instance.')
        ctx.argument('product_id', options_list=['--product-id', '--name', '-n'],
                     completer=get_product_completion_list, help='Product identifier.')
        ctx.argument('title', help='Product name shown in the developer portal.')
        ctx.argument('description', help='Product description. May include HTML formatting tags.')
        ctx.argument('legal_terms', options_list=['--legal-terms', '--terms'],
                     help='Terms of use that developers must accept to subscribe to the product.')
        ctx.argument('subscription_required', arg_type=get_three_state_flag(),
                     help='Whether a subscription is required to access APIs in the product.')
        ctx.argument('approval_required', arg_type=get_three_state_flag(),
                     help='Whether subscription attempts must be approved by an administrator.')
        ctx.argument('subscriptions_limit', type=int,
                     help='How many subscriptions a user can have to this product at the same time.')
        ctx.argument('subscription_period', help='Subscription period as an ISO 8601 duration, e.g. P1Y.')
        ctx.argument('notification_period', help='Expiry notification period as an ISO 8601 duration.')
        ctx.argument('state', arg_type=get_enum_type([s.value for s in ProductState]),
                     help='Whether the product is published.')

    with self.argument_context(f'{PRODUCT_GROUP} delete') as ctx:
        ctx.argument('delete_subscriptions', arg_type=get_three_state_flag(),
                     help='Delete existing subscriptions associated with the product.')

    with self.argument_context(f'{PRODUCT_GROUP} list') as ctx:
        ctx.argument('resource_group_name', resource_group_name_type, required=True)

    with self.argument_context(FAILOVER_GROUP_GROUP) as ctx:
        ctx.argument('location', get_location_type(self.cli_ctx), required=False,
                     help='Location of the managed instance that hosts the failover group.')
        ctx.argument('failover_group_name', options_list=['--name', '-n'],
                     completer=get_failover_group_completion_list,
                     help='Name of the instance failover group.')
        ctx.argument('failover_policy', arg_type=get_enum_type([p.value for p in FailoverPolicy]),
                     help='Failover policy of the read-write endpoint. Defaults to the stored policy, '
                          'or Automatic.')
        ctx.argument('grace_period', options_list=['--grace-period', '--grace-period-with-data-loss-hours'],
                     type=int, validator=validate_grace_period,
                     help='Hours before automatic failover with data loss is initiated. Ignored when the '
                          'policy is Manual. Defaults to the stored value, or 1.')
        ctx.argument('allow_read_only_failover', options_list=['--allow-read-only-failover'],
                     arg_type=get_enum_type([p.value for p in ReadOnlyFailoverPolicy]),
                     help='Whether outages on the secondary fail over the read-only endpoint.')

    with self.argument_context(f'{FAILOVER_GROUP_GROUP} create') as ctx:
        ctx.argument('partner_region', help='Location of the partner managed instance.')
        ctx.argument('primary_managed_instance', options_list=['--mi', '--primary-managed-instance'],
                     help='Resource ID of the primary managed instance.')
        ctx.argument('partner_managed_instance', options_list=['--partner-mi', '--partner-managed-instance'],
                     help='Resource ID of the partner managed instance.')

    with self.argument_context(f'{FAILOVER_GROUP_GROUP} set-primary') as ctx:
        ctx.argument('allow_data_loss', arg_type=get_three_state_flag(),
                     help='Fail over even if it loses data.')

    with self.argument_context(f'{FAILOVER_GROUP_GROUP} list') as ctx:
        ctx.argument('resource_group_name', resource_group_name_type, required=True)
        ctx.argument('location', get_location_type(self.cli_ctx), required=True)
