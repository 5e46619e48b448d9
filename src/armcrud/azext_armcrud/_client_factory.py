# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

"""
This module contains Azure client factory functions.
"""

import json

from azure.cli.core.azclierror import ResourceNotFoundError
from azure.cli.core.commands.client_factory import get_subscription_id
from azure.cli.core.util import send_raw_request
from azure.mgmt.core.tools import resource_id
from knack.util import CLIError

from .helpers.constants import (APIM_API_VERSION, APIM_PRODUCT_TYPE, APIM_PROVIDER, APIM_SERVICE_TYPE,
                                CONFIG_SECTION, SQL_API_VERSION, SQL_FAILOVER_GROUP_TYPE, SQL_LOCATION_TYPE,
                                SQL_PROVIDER)
from .helpers.logger import logger


def get_api_version(cli_ctx, key, default):
    """
    Return an API version from the `armcrud` config section, falling back to default.

    Config can also be set by the AZURE_ARMCRUD_<KEY> environment variable.
    """
    return cli_ctx.config.get(CONFIG_SECTION, key, fallback=default)


class ArmClient():
    """Issue Azure Resource Manager REST calls for the current subscription."""

    def __init__(self, cli_ctx, api_version, subscription_id=None):
        self.cli_ctx = cli_ctx
        self.api_version = api_version
        self.subscription_id = subscription_id or get_subscription_id(cli_ctx)

    def url(self, path, action=None):
        endpoint = self.cli_ctx.cloud.endpoints.resource_manager.rstrip("/")
        if action:
            path = f"{path}/{action}"
        return f"{endpoint}{path}?api-version={self.api_version}"

    def _send(self, method, path, body=None, headers=None, action=None, uri_parameters=None):
        url = self.url(path, action)
        logger.info("%s %s", method, url)
        request_headers = {"Content-Type": "application/json"}
        request_headers.update(headers or {})
        if body is not None:
            logger.debug("Request body: %s", body)
        response = send_raw_request(self.cli_ctx, method, url, headers=[json.dumps(request_headers)],
                                    uri_parameters=uri_parameters,
                                    body=json.dumps(body) if body is not None else None)
        logger.info("%s %s returned %s", method, path, response.status_code)
        return response.json() if response.text else None

    def get(self, path):
        try:
            return self._send("GET", path)
        except CLIError as err:
            if _status_code(err) == 404:
                raise ResourceNotFoundError(f"The resource '{path}' could not be found.") from err
            raise

    def exists(self, path):
        try:
            self.get(path)
        except ResourceNotFoundError:
            return False
        return True

    def list(self, path):
        result = []
        page = self._send("GET", path)
        while page:
            result.extend(page.get("value", []))
            next_link = page.get("nextLink")
            if not next_link:
                break
            logger.info("GET %s", next_link)
            page = send_raw_request(self.cli_ctx, "GET", next_link).json()
        return result

    def put(self, path, body):
        return self._send("PUT", path, body=body)

    def patch(self, path, body, etag="*"):
        return self._send("PATCH", path, body=body, headers={"If-Match": etag})

    def post(self, path, action):
        return self._send("POST", path, action=action)

    def delete(self, path, etag=None, uri_parameters=None):
        headers = {"If-Match": etag} if etag else None
        return self._send("DELETE", path, headers=headers, uri_parameters=uri_parameters)

    # Resource paths

    def product_path(self, resource_group_name, service_name, product_id):
        return resource_id(subscription=self.subscription_id, resource_group=resource_group_name,
                           namespace=APIM_PROVIDER, type=APIM_SERVICE_TYPE, name=service_name,
                           child_type_1=APIM_PRODUCT_TYPE, child_name_1=product_id)

    def products_path(self, resource_group_name, service_name):
        service = resource_id(subscription=self.subscription_id, resource_group=resource_group_name,
                              namespace=APIM_PROVIDER, type=APIM_SERVICE_TYPE, name=service_name)
        return f"{service}/{APIM_PRODUCT_TYPE}"

    def failover_group_path(self, resource_group_name, location, name):
        return resource_id(subscription=self.subscription_id, resource_group=resource_group_name,
                           namespace=SQL_PROVIDER, type=SQL_LOCATION_TYPE, name=location,
                           child_type_1=SQL_FAILOVER_GROUP_TYPE, child_name_1=name)

    def failover_groups_path(self, resource_group_name, location):
        parent = resource_id(subscription=self.subscription_id, resource_group=resource_group_name,
                             namespace=SQL_PROVIDER, type=SQL_LOCATION_TYPE, name=location)
        return f"{parent}/{SQL_FAILOVER_GROUP_TYPE}"


def _status_code(err):
    response = getattr(err, "response", None)
    return getattr(response, "status_code", None)


def cf_apim(cli_ctx, *_):
    """Return an ARM client for the API Management resource provider."""
    return ArmClient(cli_ctx, get_api_version(cli_ctx, "apim_api_version", APIM_API_VERSION))


def cf_sql(cli_ctx, *_):
    """Return an ARM client for the SQL resource provider."""
    return ArmClient(cli_ctx, get_api_version(cli_ctx, "sql_api_version", SQL_API_VERSION))
