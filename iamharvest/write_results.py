"""
Result Writing Module

Handles writing a collection result to a JSON inventory file.
"""

import json
import logging
from collections import Counter
from pathlib import Path
from typing import Any, Dict

from .types import CollectionResult

# Set up logging
logger = logging.getLogger(__name__)


def build_summary(result: CollectionResult) -> Dict[str, Any]:
    """
    Summarize a collection result.

    Returns:
        Dictionary with total_resources, total_failures and a
        resources_by_type count map (sorted by type)
    """
    counts = Counter(resource.resource_type for resource in result.resources)
    return {
        "total_resources": len(result.resources),
        "total_failures": len(result.failures),
        "resources_by_type": dict(sorted(counts.items())),
    }


def write_inventory(result: CollectionResult, output_path: str) -> Path:
    """
    Write a collection result to a JSON file.

    Creates the parent directory if needed. Records keep their
    enumeration order.

    Args:
        result: Records and failures from a collection pass
        output_path: Destination JSON file

    Returns:
        Path of the written file
    """
    output_file = Path(output_path)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "summary": build_summary(result),
        "resources": [resource.to_dict() for resource in result.resources],
        "failures": [failure.to_dict() for failure in result.failures],
    }

    with open(output_file, 'w') as f:
        json.dump(data, f, indent=2, default=str)
        f.write('\n')
    logger.info(f"Wrote inventory to {output_file}")
    return output_file
