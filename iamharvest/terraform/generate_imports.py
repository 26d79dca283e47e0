"""
Import Terraform Generation Module

Generates a Terraform file with one import block per importable IAM record.
Resource bodies are left to `terraform plan -generate-config-out`, which
reads every required argument from the live object.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, List

from ..constants import IMPORT_BY_NAME_TYPES, NON_IMPORTABLE_TYPES
from ..types import ImportableResource
from .utils import escape_hcl_string, make_safe_resource_name, write_terraform_file

# Set up logging
logger = logging.getLogger(__name__)


def is_importable(resource: ImportableResource) -> bool:
    return resource.resource_type not in NON_IMPORTABLE_TYPES


def get_import_id(resource: ImportableResource) -> str:
    """
    Return the id the AWS provider expects when importing a record.

    Roles are imported by name; every other importable type by its record id
    (name, ARN or composite id).
    """
    if resource.resource_type in IMPORT_BY_NAME_TYPES:
        return resource.resource_name
    return resource.resource_id


def _assign_block_names(resources: List[ImportableResource]) -> List[str]:
    """
    Derive a unique Terraform block name for each record.

    Names are unique per resource type; later collisions get _2, _3, ...
    """
    used: Dict[str, set[str]] = {}
    names: List[str] = []
    for resource in resources:
        taken = used.setdefault(resource.resource_type, set())
        base_name = make_safe_resource_name(resource.resource_name)
        name = base_name
        suffix = 2
        while name in taken:
            name = f"{base_name}_{suffix}"
            suffix += 1
        taken.add(name)
        names.append(name)
    return names


def _render_import(resource: ImportableResource, block_name: str) -> str:
    return "\n".join([
        "import {",
        f"  to = {resource.resource_type}.{block_name}",
        f"  id = {escape_hcl_string(get_import_id(resource))}",
        "}",
    ])


def render_import_terraform(resources: Iterable[ImportableResource]) -> str:
    """
    Render importable records as Terraform import blocks.

    Records of types the provider cannot import are skipped.

    Args:
        resources: Records to render, in output order

    Returns:
        Terraform file content (empty string for no importable records)
    """
    importable = [resource for resource in resources if is_importable(resource)]
    block_names = _assign_block_names(importable)
    blocks = [
        _render_import(resource, block_name)
        for resource, block_name in zip(importable, block_names)
    ]
    if not blocks:
        return ""
    return "\n\n".join(blocks) + "\n"


def generate_import_terraform(resources: Iterable[ImportableResource], output_path: str) -> Path:
    """
    Generate the Terraform import file for a set of records.

    Args:
        resources: Records to render
        output_path: Destination .tf file

    Returns:
        Path of the written file
    """
    resource_list = list(resources)
    filepath = Path(output_path)
    write_terraform_file(filepath, render_import_terraform(resource_list))
    skipped = sum(1 for resource in resource_list if not is_importable(resource))
    logger.info(f"Rendered {len(resource_list) - skipped} import blocks into {filepath} ({skipped} not importable)")
    return filepath
