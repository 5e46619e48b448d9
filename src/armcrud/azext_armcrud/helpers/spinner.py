# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

# pylint: disable=missing-docstring

from .logger import is_verbose, logger


def message_variants(template_msg):
    # Find the first word and assume it's a capitalized verb.
    verb, predicate = template_msg.split(" ", 1)
    begin_msg = f"{verb[:-1]}ing {predicate}" if verb.endswith("e") else f"{verb}ing {predicate}"
    end_msg = f"✓ {verb}d {predicate}" if verb.endswith("e") else f"✓ {verb}ed {predicate}"
    return begin_msg, end_msg


class Spinner():

    def __init__(self, cmd, template_msg):
        self._controller = cmd.cli_ctx.get_progress_controller()
        self.begin_msg, self.end_msg = message_variants(template_msg)

    def __enter__(self):
        if not is_verbose():
            self._controller.begin(message=self.begin_msg)
        logger.info(self.begin_msg)
        return self

    def __exit__(self, _type, value, traceback):
        if traceback:
            logger.debug(traceback)
            self._controller.end()
        else:
            self._controller.end(message=self.end_msg)
            logger.info(self.end_msg)
