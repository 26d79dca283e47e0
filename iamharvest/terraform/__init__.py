"""
Terraform Generation Module

Renders collected IAM records into Terraform configuration.

Modules:
- generate_imports: Generates import blocks and matching resource blocks
"""

from .generate_imports import generate_import_terraform, render_import_terraform

__all__ = [
    "generate_import_terraform",
    "render_import_terraform",
]
