# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

"""
This module contains helper functions for the az armcrud extension.
"""

import os
import re

import yaml

from azure.cli.core.azclierror import InvalidArgumentValueError


def to_snake_case(name):
    """Returns the snake_case form of a camelCase or PascalCase name"""
    name = re.sub(r"(.)([A-Z][a-z]+)", r"\1_\2", name)
    return re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", name).lower()


def normalize_keys(data):
    """Returns a shallow copy of data with snake_case keys"""
    return {to_snake_case(key): value for key, value in (data or {}).items()}


def lookup(data, *keys, default=None):
    """Returns the first non-None value found by walking a path of keys through nested dicts"""
    value = data
    for key in keys:
        if not isinstance(value, dict):
            return default
        value = value.get(key)
    return default if value is None else value


def load_input_object(value):
    """
    Returns a dict parsed from JSON or YAML text, or from a file containing either.

    The value is usually the output of a `show` command, passed inline or saved to a file.
    """
    if isinstance(value, dict):
        return value
    if not value or not value.strip():
        raise InvalidArgumentValueError("--input-object must not be empty")
    text = value
    if os.path.isfile(value):
        with open(value, "r", encoding="utf-8") as file:
            text = file.read()
    try:
        result = yaml.safe_load(text)
    except yaml.YAMLError as err:
        raise InvalidArgumentValueError(f"Could not parse --input-object: {err}") from err
    if not isinstance(result, dict):
        raise InvalidArgumentValueError("--input-object must describe a single resource object")
    return result
