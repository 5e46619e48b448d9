# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

"""
This module contains JMESPath queries to format output for the az armcrud extension.

Command results are serialized with camelCase keys before these queries run. They pick the
fields worth showing in the table output format.
"""

PRODUCT_TABLE_FORMAT = """\
{
    productId: productId,
    title: title,
    state: state,
    subscriptionRequired: subscriptionRequired,
    approvalRequired: approvalRequired,
    resourceGroup: resourceGroupName
}
"""

PRODUCTS_LIST_TABLE_FORMAT = f"[].{PRODUCT_TABLE_FORMAT}"

FAILOVER_GROUP_TABLE_FORMAT = """\
{
    name: name,
    location: location,
    failoverPolicy: readWriteFailoverPolicy,
    gracePeriodHours: failoverWithDataLossGracePeriodHours,
    readOnlyFailover: readOnlyFailoverPolicy,
    role: replicationRole,
    resourceGroup: resourceGroupName
}
"""

FAILOVER_GROUPS_LIST_TABLE_FORMAT = f"[].{FAILOVER_GROUP_TABLE_FORMAT}"
