# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

"""
Constant values used in the az armcrud extension.
"""

CONFIG_SECTION = "armcrud"

APIM_PROVIDER = "Microsoft.ApiManagement"
APIM_SERVICE_TYPE = "service"
APIM_PRODUCT_TYPE = "products"
APIM_API_VERSION = "2022-08-01"

SQL_PROVIDER = "Microsoft.Sql"
SQL_LOCATION_TYPE = "locations"
SQL_FAILOVER_GROUP_TYPE = "instanceFailoverGroups"
SQL_API_VERSION = "2021-11-01"

DEFAULT_GRACE_PERIOD_HOURS = 1
# The service stores the grace period in minutes as a 32-bit integer.
MAX_GRACE_PERIOD_HOURS = 2147483647 // 60
