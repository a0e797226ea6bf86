# Copyright 2026 Bring Contributors
# SPDX-License-Identifier: Apache-2.0

"""Read-only consumers of parsed Bring trees: plain data, JSON, YAML, attribute paths."""

from bring.convert.attributes import extract_attributes
from bring.convert.plain import to_json_text, to_plain_value, to_yaml_text

__all__ = [
    "to_plain_value",
    "to_json_text",
    "to_yaml_text",
    "extract_attributes",
]
