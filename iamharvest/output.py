"""
Centralized output handling with consistent formatting.

This module provides a single point of control for all user-facing output,
ensuring consistent formatting and making it easy to modify output behavior.
"""

import json
import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class OutputHandler:
    """Centralized output handling with consistent formatting."""

    @staticmethod
    def collection_completed(summary: Dict[str, Any]) -> None:
        """
        Log collection completion with statistics.

        Args:
            summary: Dictionary with 'total_resources' and 'total_failures' keys
        """
        logger.info(
            f"IAM collection completed: "
            f"{summary.get('total_resources', 0)} resources, "
            f"{summary.get('total_failures', 0)} failures"
        )

    @staticmethod
    def error(title: str, error: Exception) -> None:
        """
        Print formatted error message.

        Args:
            title: Error title
            error: Exception that occurred
        """
        print(f"\n🚨 {title}:\n{error}\n")

    @staticmethod
    def warning(title: str, data: Optional[Any] = None) -> None:
        print(f"\n⚠️  {title}")
        if data:
            print(json.dumps(data, indent=2, default=str))

    @staticmethod
    def success(title: str, data: Optional[Any] = None) -> None:
        """
        Print formatted success message.

        Args:
            title: Success message title
            data: Optional data to display (dict will be JSON formatted)
        """
        print(f"\n✅ {title}")
        if not data:
            return

        if isinstance(data, dict):
            print(json.dumps(data, indent=2, default=str))
            return

        print(data)

    @staticmethod
    def section_header(title: str) -> None:
        """
        Print section header with divider.

        Args:
            title: Section title
        """
        print("\n" + "=" * 80)
        print(title)
        print("=" * 80)
