# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

"""
This module contains helper functions for the az armcrud extension.
"""

from knack.prompting import prompt_y_n

from .logger import logger


def should_process(message, yes=False):
    """Returns True if the user skipped or accepted the confirmation prompt"""
    if yes:
        logger.debug("Skipping confirmation: %s", message)
        return True
    if prompt_y_n(message, default="n"):
        return True
    logger.warning("Operation cancelled.")
    return False
