"""
Policy document formatting.

Wraps policy JSON in an HCL heredoc so generated configuration keeps the
document's line breaks and indentation instead of a single escaped string.
"""

from dataclasses import replace
from typing import Iterable, List

from .constants import HEREDOC_MARKER, POLICY_DOCUMENT_ATTRIBUTES
from .types import ImportableResource


def wrap_in_heredoc(text: str, marker: str = HEREDOC_MARKER) -> str:
    """
    Wrap text in a heredoc literal.

    Args:
        text: Raw document text
        marker: Heredoc delimiter

    Returns:
        The text between "<<MARKER" and "MARKER" lines
    """
    return f"<<{marker}\n{text}\n{marker}"


def is_heredoc(value: str, marker: str = HEREDOC_MARKER) -> bool:
    return value.startswith(f"<<{marker}\n") and value.endswith(f"\n{marker}")


def format_policy_documents(resources: Iterable[ImportableResource]) -> List[ImportableResource]:
    """
    Rewrite the policy document attribute of each policy-bearing record as a heredoc.

    aws_iam_policy, aws_iam_user_policy, aws_iam_group_policy and
    aws_iam_role_policy records have their "policy" attribute wrapped;
    aws_iam_role records have their "assume_role_policy" attribute wrapped.
    Records of other types, records without the attribute and values that
    are already wrapped come back as the same object.

    Args:
        resources: Records to format

    Returns:
        List with one record per input record, in the same order
    """
    formatted: List[ImportableResource] = []
    for resource in resources:
        attribute = POLICY_DOCUMENT_ATTRIBUTES.get(resource.resource_type)
        value = resource.attributes.get(attribute) if attribute else None
        if value is None or is_heredoc(value):
            formatted.append(resource)
            continue

        attributes = {**resource.attributes, attribute: wrap_in_heredoc(value)}
        formatted.append(replace(resource, attributes=attributes))
    return formatted
