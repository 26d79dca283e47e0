"""
Utility functions used across the iamharvest codebase.

This module contains general-purpose helpers shared by the collector
and the Terraform writer.
"""

import re
from typing import Tuple

from .constants import COMPOSITE_ID_SEPARATOR


def make_composite_id(parent_name: str, child_name: str) -> str:
    """
    Build an import id for an inline policy attached to a parent entity.

    Args:
        parent_name: User, group or role name
        child_name: Inline policy name

    Returns:
        Composite id in format: parent:child
    """
    return f"{parent_name}{COMPOSITE_ID_SEPARATOR}{child_name}"


def split_composite_id(resource_id: str) -> Tuple[str, str]:
    """
    Split a composite id back into parent and child names.

    IAM entity names cannot contain ':', so the first separator is the boundary.

    Raises:
        ValueError: If resource_id has no separator
    """
    parent_name, separator, child_name = resource_id.partition(COMPOSITE_ID_SEPARATOR)
    if not separator:
        raise ValueError(f"Not a composite id: {resource_id}")
    return parent_name, child_name


def make_safe_resource_name(name: str) -> str:
    """
    Convert a display name to a safe Terraform resource name.

    Lower-cases the name, collapses runs of non-alphanumeric characters into
    one underscore and ensures the name starts with a letter.

    Args:
        name: Original name (e.g., "Deploy-Role@Prod")

    Returns:
        Safe resource name (e.g., "deploy_role_prod")
    """
    safe_name = re.sub(r"[^a-z0-9]+", "_", name.lower()).strip("_")
    if not safe_name or not safe_name[0].isalpha():
        safe_name = "r_" + safe_name if safe_name else "r"
    return safe_name
