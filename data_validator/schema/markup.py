"""YAML parsing and serialization for schemas and collections.

Loading uses ``yaml.safe_load`` so documents can only produce plain data
(mappings, sequences and scalars). Dumping renders a record back to YAML for
display inside a report, keeping keys in the order they were parsed.
"""

from __future__ import annotations

from typing import Any

import yaml


def load_document(content: str) -> Any:
    """Parse a YAML string.

    Args:
        content: YAML text.

    Returns:
        The parsed data, or None for an empty document.

    Raises:
        yaml.YAMLError: If the text is not valid YAML.
    """
    return yaml.safe_load(content)


def dump_document(data: Any) -> str:
    """Serialize data back to block-style YAML.

    The output starts with an explicit ``---`` document marker and ends with
    a newline, e.g. ``{"name": 27, "tags": ["a"]}`` renders as::

        ---
        name: 27
        tags:
        - a
    """
    return yaml.safe_dump(
        data,
        explicit_start=True,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )
