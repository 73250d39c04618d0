"""
Option tree resolution.

Walks an addon's option tree along the single path described by a criteria
mapping and records the option chosen at each dimension.
"""

from __future__ import annotations

import logging
from typing import Dict, Mapping, Optional

from .models import TreeNode, TreeOption


# Module logger
logger = logging.getLogger(__name__)


def find_option(node: TreeNode, value: str) -> Optional[TreeOption]:
    """Return the first option of ``node`` whose value equals ``value``."""
    for option in node.options:
        if option.value == value:
            return option
    return None


def resolve_tree(
    node: TreeNode,
    criteria: Mapping[str, str],
    selected: Optional[Dict[str, TreeOption]] = None
) -> Dict[str, TreeOption]:
    """
    Collect the selected option at each tree level.

    The walk stops when the criteria have no (or an empty) value for the
    current node, when no option matches that value, or when the matched
    option has no children.

    Args:
        node: Tree node to start from
        criteria: Criterion id -> option value
        selected: Accumulator to fill in place (a new dict if None)

    Returns:
        Criterion id -> matched TreeOption, in walk order

    Example:
        >>> selected = resolve_tree(addon.tree, {"vendor": "fortigate", "cpu": "4-cpu"})
        >>> selected["cpu"].label
        '4 CPU'
    """
    if selected is None:
        selected = {}

    while node is not None:
        value = criteria.get(node.id)
        if not value:
            break

        option = find_option(node, value)
        if option is None:
            logger.debug(f"No option '{value}' under tree node '{node.id}'")
            break

        selected[node.id] = option
        node = option.children

    return selected
