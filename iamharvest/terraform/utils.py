"""
Terraform Utility Functions

Shared helpers for rendering HCL values and writing Terraform files.
"""

import logging
from pathlib import Path

from ..utils import make_safe_resource_name

logger = logging.getLogger(__name__)

__all__ = ["escape_hcl_string", "escape_template_sequences", "make_safe_resource_name", "write_terraform_file"]


def escape_template_sequences(text: str) -> str:
    """
    Escape HCL template sequences so "${aws:username}" stays literal.
    """
    return text.replace("${", "$${").replace("%{", "%%{")


def escape_hcl_string(value: str) -> str:
    """
    Render a value as a quoted HCL string literal.

    Args:
        value: Raw string value

    Returns:
        Quoted string with backslashes, quotes, newlines and template sequences escaped
    """
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f'"{escape_template_sequences(escaped)}"'


def write_terraform_file(filepath: Path, content: str) -> None:
    """
    Write Terraform content to a file with logging.

    Creates the parent directory when needed.

    Args:
        filepath: Path object for the file to write
        content: Terraform content to write
    """
    filepath.parent.mkdir(parents=True, exist_ok=True)
    with open(filepath, 'w') as f:
        f.write(content)
    logger.info(f"Generated Terraform file: {filepath}")
