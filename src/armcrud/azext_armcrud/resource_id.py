# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

"""
Parse Azure resource IDs into a resource name and its parent.

A resource ID has the shape

    /subscriptions/{sub}/resourceGroups/{group}/providers/{namespace}/{type}/{name}[/{type}/{name}...]

`ResourceIdentifier` exposes the last name as `resource_name` and the full ID of the enclosing
resource as `parent_id`, so parsing `parent_id` again climbs one level:

    products/p  ->  service/s  ->  resourceGroups/g
"""

from azure.cli.core.azclierror import InvalidArgumentValueError
from azure.mgmt.core.tools import is_valid_resource_id, parse_resource_id, resource_id


class ResourceIdentifier():  # pylint: disable=too-many-instance-attributes
    """A parsed Azure resource ID."""

    def __init__(self, rid):
        self.id = rid
        self.subscription = None
        self.resource_group_name = None
        self.provider_namespace = None
        self.resource_type = None
        self.resource_name = None
        self.parent_resource = None
        self.parent_id = None
        self._parse(rid)

    def __repr__(self):
        return f"ResourceIdentifier({self.id!r})"

    def __str__(self):
        return self.id

    def _parse(self, rid):
        rid = (rid or "").strip().rstrip("/")
        if "//" in rid or not is_valid_resource_id(rid):
            raise InvalidArgumentValueError(f'Invalid resource ID "{self.id}"')
        parsed = parse_resource_id(rid)
        self.subscription = parsed["subscription"]
        self.resource_group_name = parsed.get("resource_group")
        self.provider_namespace = parsed.get("namespace")
        group_id = resource_id(subscription=self.subscription, resource_group=self.resource_group_name)

        if "name" not in parsed:
            if self.resource_group_name:
                self.resource_type = "resourceGroups"
                self.resource_name = self.resource_group_name
                self.parent_id = resource_id(subscription=self.subscription)
            else:
                self.resource_type = "subscriptions"
                self.resource_name = self.subscription
            return

        last_child = parsed.get("last_child_num") or 0
        types = [parsed["type"]] + [parsed[f"child_type_{i}"] for i in range(1, last_child + 1)]
        self.resource_type = "/".join(types)
        self.resource_name = parsed["resource_name"]

        if not last_child:
            self.parent_id = group_id
            return
        self.parent_resource = parsed[f"child_parent_{last_child}"].rstrip("/")
        parent_parts = {key: parsed.get(key) for key in ("subscription", "resource_group", "namespace", "type", "name")}
        for i in range(1, last_child):
            for key in ("child_namespace", "child_type", "child_name"):
                parent_parts[f"{key}_{i}"] = parsed.get(f"{key}_{i}")
        self.parent_id = resource_id(**parent_parts)

    def parent(self):
        """Return the identifier of the enclosing resource, or None for a subscription."""
        return ResourceIdentifier(self.parent_id) if self.parent_id else None

    def matches_type(self, namespace, resource_type):
        """Return True if this ID names a resource of the given provider and full type."""
        return (self.provider_namespace or "").lower() == namespace.lower() and \
            (self.resource_type or "").lower() == resource_type.lower()
