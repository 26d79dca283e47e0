"""
AWS IAM enumeration module.

This module turns the IAM surface of an account into importable resource records:
- Users, inline user policies and optional user group memberships
- Groups, group memberships and inline group policies
- Customer managed policies and their attachments
- Roles and inline role policies
- Policy document loading for policy-bearing records
"""

from .collector import collect_iam_resources
from .documents import load_policy_documents, render_policy_document
from .groups import collect_groups
from .policies import collect_policies
from .roles import collect_roles
from .users import collect_users

__all__ = [
    # Collection pass
    "collect_iam_resources",
    # Per-kind enumerators
    "collect_users",
    "collect_groups",
    "collect_policies",
    "collect_roles",
    # Policy documents
    "load_policy_documents",
    "render_policy_document",
]
