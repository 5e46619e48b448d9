# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

import unittest
from collections import namedtuple

from azure.cli.core.azclierror import InvalidArgumentValueError

from azext_armcrud.resource_id import ResourceIdentifier

SUB = "/subscriptions/00000000-0000-0000-0000-000000000000"
PRODUCT_ID = f"{SUB}/resourceGroups/my-rg/providers/Microsoft.ApiManagement/service/my-apim/products/starter"
IFG_ID = f"{SUB}/resourceGroups/my-rg/providers/Microsoft.Sql/locations/westus/instanceFailoverGroups/my-fg"


class TestResourceIdentifier(unittest.TestCase):

    Case = namedtuple('Case', ['resource_id', 'name', 'parent', 'group'])

    cases = [
        Case(PRODUCT_ID, 'starter', 'my-apim', 'my-rg'),
        Case(IFG_ID, 'my-fg', 'westus', 'my-rg'),
        # Trailing slash and mixed casing of fixed segments
        Case(f"{SUB}/RESOURCEGROUPS/g/PROVIDERS/Microsoft.Sql/locations/l/instanceFailoverGroups/n/", 'n', 'l', 'g'),
    ]

    def test_climb_resource_then_parent_then_group(self):
        for case in self.cases:
            identifier = ResourceIdentifier(case.resource_id)
            self.assertEqual(identifier.resource_name, case.name)
            parent = ResourceIdentifier(identifier.parent_id)
            self.assertEqual(parent.resource_name, case.parent)
            group = ResourceIdentifier(parent.parent_id)
            self.assertEqual(group.resource_name, case.group)
            self.assertEqual(group.resource_type, 'resourceGroups')

    def test_parts(self):
        identifier = ResourceIdentifier(PRODUCT_ID)
        self.assertEqual(identifier.subscription, '00000000-0000-0000-0000-000000000000')
        self.assertEqual(identifier.resource_group_name, 'my-rg')
        self.assertEqual(identifier.provider_namespace, 'Microsoft.ApiManagement')
        self.assertEqual(identifier.resource_type, 'service/products')
        self.assertEqual(identifier.parent_resource, 'service/my-apim')
        self.assertEqual(identifier.parent_id,
                         f"{SUB}/resourceGroups/my-rg/providers/Microsoft.ApiManagement/service/my-apim")
        self.assertTrue(identifier.matches_type('microsoft.apimanagement', 'Service/Products'))
        self.assertFalse(identifier.matches_type('Microsoft.Sql', 'service/products'))

    def test_top_level_resource_parent_is_group(self):
        identifier = ResourceIdentifier(f"{SUB}/resourceGroups/my-rg/providers/Microsoft.ApiManagement/service/my-apim")
        self.assertIsNone(identifier.parent_resource)
        self.assertEqual(identifier.parent_id, f"{SUB}/resourceGroups/my-rg")
        self.assertEqual(identifier.parent().resource_name, 'my-rg')

    def test_nested_child_parent_keeps_ancestors(self):
        operation_id = f"{SUB}/resourceGroups/my-rg/providers/Microsoft.ApiManagement/service/my-apim/apis/echo" \
                       "/operations/get"
        identifier = ResourceIdentifier(operation_id)
        self.assertEqual(identifier.resource_type, 'service/apis/operations')
        self.assertEqual(identifier.parent_resource, 'service/my-apim/apis/echo')
        self.assertEqual(identifier.parent_id,
                         f"{SUB}/resourceGroups/my-rg/providers/Microsoft.ApiManagement/service/my-apim/apis/echo")
        self.assertEqual(identifier.parent().parent_id, ResourceIdentifier(PRODUCT_ID).parent_id)

    def test_subscription_is_the_top(self):
        group = ResourceIdentifier(f"{SUB}/resourceGroups/my-rg")
        subscription = group.parent()
        self.assertEqual(subscription.resource_type, 'subscriptions')
        self.assertIsNone(subscription.parent())

    def test_malformed_ids(self):
        malformed = [
            '',
            'starter',
            'subscriptions/x/resourceGroups/g',
            '/tenants/x',
            f'{SUB}/locations/westus',
            f'{SUB}/resourceGroups',
            f'{SUB}/resourceGroups/g/Microsoft.Sql/locations/l',
            f'{SUB}/resourceGroups/g/providers/Microsoft.Sql/locations',
            f'{SUB}/resourceGroups/g/providers/Microsoft.Sql/locations/l/instanceFailoverGroups',
            f'{SUB}/resourceGroups/g/providers/Microsoft.Sql/locations//instanceFailoverGroups/n',
        ]
        for resource_id in malformed:
            with self.assertRaises(InvalidArgumentValueError, msg=resource_id):
                ResourceIdentifier(resource_id)
