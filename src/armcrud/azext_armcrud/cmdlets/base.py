# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

"""
The command lifecycle shared by every resource command.

`ResourceCmdlet.execute` runs

    get_entity -> apply_user_input_to_model -> confirmation -> persist_changes

Subclasses override the three steps for one resource type and verb. `apply_user_input_to_model`
must not call the service; `persist_changes` makes the single mutating call.
"""

import abc
import copy

from ..helpers.logger import logger
from ..helpers.prompt import should_process
from ..helpers.spinner import Spinner


class ResourceCmdlet(metaclass=abc.ABCMeta):
    """Base class for a fetch, merge and persist command."""

    kind = None
    action = "Update"
    # Removal commands ask before touching the service at all.
    confirm_before_fetch = False

    def __init__(self, cmd, client, identity, yes=False):
        self.cmd = cmd
        self.client = client
        self.yes = yes
        self.resource_group_name, self.parent_name, self.name = identity

    @property
    def path(self):
        path_method = getattr(self.client, self.kind.path_method)
        return path_method(self.resource_group_name, self.parent_name, self.name)

    def describe(self):
        parent_label = self.kind.parent_option.lstrip("-").replace("-", " ")
        return f'{self.kind.label} "{self.name}" ({parent_label} "{self.parent_name}", ' \
               f'resource group "{self.resource_group_name}")'

    def confirmation_message(self):
        return f"{self.action} {self.describe()}?"

    def fetch(self):
        return self.kind.model.from_dict(self.client.get(self.path))

    def get_entity(self):
        return [self.fetch()]

    def apply_user_input_to_model(self, entities):
        return entities

    @abc.abstractmethod
    def persist_changes(self, entities):
        """Make the single mutating call and return the resulting entities."""

    def execute(self):
        """Run the lifecycle and return the persisted entities, or None if the user declined."""
        if self.confirm_before_fetch and not should_process(self.confirmation_message(), self.yes):
            return None
        entities = self.get_entity()
        entities = self.apply_user_input_to_model(copy.deepcopy(entities))
        if not self.confirm_before_fetch and not should_process(self.confirmation_message(), self.yes):
            return None
        with Spinner(self.cmd, f'{self.action} {self.kind.label} "{self.name}"'):
            result = self.persist_changes(entities)
        logger.debug("%s returned %s", type(self).__name__, result)
        return result

    def run(self):
        """Execute and return the single resulting entity."""
        result = self.execute()
        return result[0] if result else None
