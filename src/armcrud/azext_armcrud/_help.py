# coding=utf-8
# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

"""
This module contains help string definitions for the `az armcrud` extension.
"""

from knack.help_files import helps  # pylint: disable=unused-import


helps['armcrud'] = """
type: group
short-summary: Create, show, update and delete Azure resources through Azure Resource Manager.
long-summary: |
  Every command that targets a single resource accepts exactly one of:
    --name with --resource-group and the parent (--service-name or --location),
    --input-object with the output of a `show` command, or
    --resource-id with the full Azure resource ID.
"""

helps['armcrud apim'] = """
type: group
short-summary: Manage Azure API Management resources.
"""

helps['armcrud apim product'] = """
type: group
short-summary: Manage API Management products.
"""

helps['armcrud apim product create'] = """
type: command
short-summary: Create an API Management product.
long-summary: |
    Fails if a product with the same ID already exists. If --product-id is omitted, a random ID is generated.
examples:
  - name: Create a published product that requires approved subscriptions.
    text: >
        az armcrud apim product create -g MyResourceGroup --service-name MyApim --product-id starter
        --title "Starter" --subscription-required true --approval-required true --state published
"""

helps['armcrud apim product show'] = """
type: command
short-summary: Show details of an API Management product.
examples:
  - name: Show a product by resource ID.
    text: >
        az armcrud apim product show --resource-id
        /subscriptions/00000000-0000-0000-0000-000000000000/resourceGroups/MyResourceGroup/providers/Microsoft.ApiManagement/service/MyApim/products/starter
"""

helps['armcrud apim product list'] = """
type: command
short-summary: List the products of an API Management service.
"""

helps['armcrud apim product update'] = """
type: command
short-summary: Update an API Management product.
long-summary: |
    Only the properties you pass are changed. The product is read, updated locally and written back.
examples:
  - name: Publish a product without prompting for confirmation.
    text: az armcrud apim product update -g MyResourceGroup --service-name MyApim -n starter --state published --yes
  - name: Update a product previously saved with `show`.
    text: az armcrud apim product update --input-object product.json --title "Starter (legacy)"
"""

helps['armcrud apim product delete'] = """
type: command
short-summary: Delete an API Management product.
examples:
  - name: Delete a product and its subscriptions.
    text: az armcrud apim product delete -g MyResourceGroup --service-name MyApim -n starter --delete-subscriptions true
"""

helps['armcrud sql'] = """
type: group
short-summary: Manage Azure SQL resources.
"""

helps['armcrud sql instance-failover-group'] = """
type: group
short-summary: Manage SQL managed instance failover groups.
"""

helps['armcrud sql instance-failover-group create'] = """
type: command
short-summary: Create an instance failover group between two managed instances.
parameters:
  - name: --grace-period --grace-period-with-data-loss-hours
    type: integer
    short-summary: Hours to wait before an automatic failover that may lose data.
    long-summary: |
        Ignored when --failover-policy is Manual. Defaults to 1.
examples:
  - name: Create a failover group with automatic failover after two hours.
    text: >
        az armcrud sql instance-failover-group create -g MyResourceGroup -l westus -n myfg
        --mi /subscriptions/.../managedInstances/primary --partner-mi /subscriptions/.../managedInstances/secondary
        --partner-region eastus --failover-policy Automatic --grace-period 2
"""

helps['armcrud sql instance-failover-group show'] = """
type: command
short-summary: Show details of an instance failover group.
"""

helps['armcrud sql instance-failover-group list'] = """
type: command
short-summary: List the instance failover groups in a location.
"""

helps['armcrud sql instance-failover-group update'] = """
type: command
short-summary: Update the failover policy of an instance failover group.
long-summary: |
    An omitted --failover-policy keeps the stored policy. Under the Manual policy the grace period is cleared.
    Otherwise an omitted --grace-period keeps the stored value, or defaults to 1 hour.
examples:
  - name: Switch a failover group to manual failover.
    text: az armcrud sql instance-failover-group update -g MyResourceGroup -l westus -n myfg --failover-policy Manual
  - name: Set the grace period by resource ID.
    text: >
        az armcrud sql instance-failover-group update --grace-period 4 --resource-id
        /subscriptions/00000000-0000-0000-0000-000000000000/resourceGroups/MyResourceGroup/providers/Microsoft.Sql/locations/westus/instanceFailoverGroups/myfg
"""

helps['armcrud sql instance-failover-group delete'] = """
type: command
short-summary: Delete an instance failover group.
"""

helps['armcrud sql instance-failover-group set-primary'] = """
type: command
short-summary: Make the managed instance in --location the primary of the failover group.
parameters:
  - name: --allow-data-loss
    short-summary: Fail over immediately, even if recent transactions are lost.
"""
