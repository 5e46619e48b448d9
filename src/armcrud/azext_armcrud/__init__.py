# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

"""This module is the entry point for the `az armcrud` package."""

from azure.cli.core import AzCommandsLoader

from azext_armcrud._help import helps  # pylint: disable=unused-import


class ArmCrudCommandsLoader(AzCommandsLoader):
    """ArmCrudCommandsLoader is responsible for loading the `az armcrud` commands and
    their arguments.
    """

    def __init__(self, cli_ctx=None):
        from azure.cli.core.commands import CliCommandType

        armcrud_custom = CliCommandType(operations_tmpl="azext_armcrud.custom#{}")
        super().__init__(cli_ctx=cli_ctx, custom_command_type=armcrud_custom)

    def load_command_table(self, args):
        from azext_armcrud.commands import load_command_table

        load_command_table(self, args)
        return self.command_table

    def load_arguments(self, command):
        from azext_armcrud._params import load_arguments

        load_arguments(self, command)


COMMAND_LOADER_CLS = ArmCrudCommandsLoader  # pylint: disable=invalid-name
