# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

import copy
import json
import os
import tempfile
import unittest
from unittest.mock import Mock, patch

from azure.cli.core.azclierror import (InvalidArgumentValueError, MutuallyExclusiveArgumentError,
                                       RequiredArgumentMissingError)

from azext_armcrud.cmdlets.identity import FAILOVER_GROUP, PRODUCT, ByInputObject, ByName, ByResourceId, \
    select_identity
from azext_armcrud.custom import (create_product, delete_failover_group, delete_product, list_failover_groups,
                                  list_products, show_failover_group, show_product, switch_failover_group,
                                  update_failover_group, update_product)

SUB = "/subscriptions/00000000-0000-0000-0000-000000000000"
PRODUCT_ID = f"{SUB}/resourceGroups/my-rg/providers/Microsoft.ApiManagement/service/my-apim/products/starter"
IFG_ID = f"{SUB}/resourceGroups/my-rg/providers/Microsoft.Sql/locations/westus/instanceFailoverGroups/my-fg"

ARM_PRODUCT = {
    "id": PRODUCT_ID,
    "name": "starter",
    "properties": {"displayName": "Starter", "subscriptionRequired": True, "state": "notPublished"},
}

ARM_FAILOVER_GROUP = {
    "id": IFG_ID,
    "name": "my-fg",
    "properties": {
        "readWriteEndpoint": {"failoverPolicy": "Automatic", "failoverWithDataLossGracePeriodMinutes": 60},
        "readOnlyEndpoint": {"failoverPolicy": "Disabled"},
    },
}


class SelectIdentity(unittest.TestCase):

    def test_by_name(self):
        specifier = select_identity(name='starter', resource_group_name='my-rg', parent_name='my-apim')
        self.assertIsInstance(specifier, ByName)
        self.assertEqual(specifier.resolve(PRODUCT), ('my-rg', 'my-apim', 'starter'))

    def test_by_name_missing_context(self):
        specifier = select_identity(name='my-fg', resource_group_name='my-rg')
        with self.assertRaises(RequiredArgumentMissingError) as ctx:
            specifier.resolve(FAILOVER_GROUP)
        self.assertIn('--location', str(ctx.exception))

    def test_by_resource_id(self):
        specifier = select_identity(resource_id=IFG_ID)
        self.assertIsInstance(specifier, ByResourceId)
        identity = specifier.resolve(FAILOVER_GROUP)
        self.assertEqual(identity.resource_group_name, 'my-rg')
        self.assertEqual(identity.parent_name, 'westus')
        self.assertEqual(identity.name, 'my-fg')

    def test_resource_id_of_wrong_type(self):
        with self.assertRaises(InvalidArgumentValueError):
            select_identity(resource_id=PRODUCT_ID).resolve(FAILOVER_GROUP)

    def test_malformed_resource_id(self):
        with self.assertRaises(InvalidArgumentValueError):
            select_identity(resource_id='/subscriptions/x/my-fg').resolve(FAILOVER_GROUP)

    def test_by_input_object_with_id(self):
        specifier = select_identity(input_object=json.dumps({"id": PRODUCT_ID, "title": "Starter"}))
        self.assertIsInstance(specifier, ByInputObject)
        self.assertEqual(specifier.resolve(PRODUCT), ('my-rg', 'my-apim', 'starter'))

    def test_by_input_object_with_names(self):
        show_output = {"name": "my-fg", "resourceGroupName": "my-rg", "location": "westus",
                       "readWriteFailoverPolicy": "Manual"}
        identity = select_identity(input_object=json.dumps(show_output)).resolve(FAILOVER_GROUP)
        self.assertEqual(identity, ('my-rg', 'westus', 'my-fg'))

    def test_by_input_object_file(self):
        with tempfile.NamedTemporaryFile('w', suffix='.yaml', delete=False) as fp:
            fp.write("productId: starter\nresourceGroupName: my-rg\nserviceName: my-apim\n")
        self.addCleanup(os.unlink, fp.name)
        identity = select_identity(input_object=fp.name).resolve(PRODUCT)
        self.assertEqual(identity, ('my-rg', 'my-apim', 'starter'))

    def test_input_object_without_identity(self):
        with self.assertRaises(InvalidArgumentValueError):
            select_identity(input_object='{"title": "Starter"}').resolve(PRODUCT)

    def test_exactly_one_parameter_set(self):
        with self.assertRaises(MutuallyExclusiveArgumentError):
            select_identity(name='starter', resource_group_name='my-rg', parent_name='my-apim',
                            resource_id=PRODUCT_ID)
        with self.assertRaises(MutuallyExclusiveArgumentError):
            select_identity(input_object='{}', resource_id=PRODUCT_ID)
        with self.assertRaises(RequiredArgumentMissingError):
            select_identity(resource_group_name='my-rg', parent_name='my-apim')


class ClientTestCase(unittest.TestCase):

    factory = None

    def setUp(self):
        self.cmd = Mock()
        self.client = Mock()
        self.cf_patch = patch(f'azext_armcrud.custom.{self.factory}', return_value=self.client)
        self.cf_mock = self.cf_patch.start()
        self.addCleanup(self.cf_patch.stop)
        self.prompt_y_n_patch = patch('azext_armcrud.helpers.prompt.prompt_y_n')
        self.prompt_y_n_mock = self.prompt_y_n_patch.start()
        self.addCleanup(self.prompt_y_n_patch.stop)


class ProductCommands(ClientTestCase):

    factory = 'cf_apim'

    def setUp(self):
        super().setUp()
        self.client.get.return_value = copy.deepcopy(ARM_PRODUCT)
        self.client.patch.return_value = None

    def test_show_by_resource_id(self):
        product = show_product(self.cmd, resource_id=PRODUCT_ID)
        self.client.product_path.assert_called_once_with('my-rg', 'my-apim', 'starter')
        self.assertEqual(product.title, 'Starter')
        self.assertEqual(product.resource_group_name, 'my-rg')

    def test_list(self):
        self.client.list.return_value = [copy.deepcopy(ARM_PRODUCT)]
        products = list_products(self.cmd, 'my-rg', 'my-apim')
        self.client.products_path.assert_called_once_with('my-rg', 'my-apim')
        self.assertEqual([p.product_id for p in products], ['starter'])

    def test_update_with_force(self):
        product = update_product(self.cmd, resource_group_name='my-rg', service_name='my-apim', product_id='starter',
                                 state='published', yes=True)
        self.prompt_y_n_mock.assert_not_called()
        self.client.patch.assert_called_once()
        self.assertEqual(product.state.value, 'published')

    def test_update_declined(self):
        self.prompt_y_n_mock.return_value = False
        self.assertIsNone(update_product(self.cmd, resource_id=PRODUCT_ID, title='Gold'))
        self.client.patch.assert_not_called()

    def test_create_generates_product_id(self):
        self.client.exists.return_value = False
        self.client.put.return_value = None
        product = create_product(self.cmd, 'my-rg', 'my-apim', 'Gold', yes=True)
        self.assertEqual(len(product.product_id), 32)
        self.client.put.assert_called_once()

    def test_delete_by_input_object(self):
        self.assertIsNone(delete_product(self.cmd, input_object=json.dumps(ARM_PRODUCT), yes=True))
        self.client.product_path.assert_called_with('my-rg', 'my-apim', 'starter')
        self.client.delete.assert_called_once()


class FailoverGroupCommands(ClientTestCase):

    factory = 'cf_sql'

    def setUp(self):
        super().setUp()
        self.client.get.return_value = copy.deepcopy(ARM_FAILOVER_GROUP)
        self.client.put.return_value = None

    def test_show(self):
        group = show_failover_group(self.cmd, resource_group_name='my-rg', location='westus',
                                    failover_group_name='my-fg')
        self.assertEqual(group.failover_with_data_loss_grace_period_hours, 1)
        self.assertEqual(group.location, 'westus')

    def test_list(self):
        self.client.list.return_value = [copy.deepcopy(ARM_FAILOVER_GROUP)]
        groups = list_failover_groups(self.cmd, 'my-rg', 'westus')
        self.assertEqual([g.name for g in groups], ['my-fg'])

    def test_update_by_resource_id(self):
        group = update_failover_group(self.cmd, resource_id=IFG_ID, failover_policy='Manual', grace_period=4,
                                      yes=True)
        self.client.failover_group_path.assert_called_with('my-rg', 'westus', 'my-fg')
        self.client.put.assert_called_once()
        self.assertIsNone(group.failover_with_data_loss_grace_period_hours)

    def test_update_both_parameter_sets(self):
        with self.assertRaises(MutuallyExclusiveArgumentError):
            update_failover_group(self.cmd, resource_group_name='my-rg', location='westus',
                                  failover_group_name='my-fg', resource_id=IFG_ID, yes=True)
        self.client.get.assert_not_called()

    def test_delete_declined(self):
        self.prompt_y_n_mock.return_value = False
        delete_failover_group(self.cmd, resource_id=IFG_ID)
        self.client.get.assert_not_called()
        self.client.delete.assert_not_called()

    def test_set_primary(self):
        self.client.post.return_value = copy.deepcopy(ARM_FAILOVER_GROUP)
        group = switch_failover_group(self.cmd, resource_id=IFG_ID, yes=True)
        self.client.post.assert_called_once_with(self.client.failover_group_path.return_value, 'failover')
        self.assertEqual(group.name, 'my-fg')
