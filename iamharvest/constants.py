"""
Constants module for resource type tags and shared mapping values.

This module contains the Terraform resource type names and the attribute
conventions used throughout the iamharvest codebase.
"""

from typing import Dict, FrozenSet, List

# Provider tag attached to every record
AWS_PROVIDER = "aws"

# Terraform resource types (alphabetical)
AWS_IAM_GROUP = "aws_iam_group"
AWS_IAM_GROUP_MEMBERSHIP = "aws_iam_group_membership"
AWS_IAM_GROUP_POLICY = "aws_iam_group_policy"
AWS_IAM_POLICY = "aws_iam_policy"
AWS_IAM_POLICY_ATTACHMENT = "aws_iam_policy_attachment"
AWS_IAM_ROLE = "aws_iam_role"
AWS_IAM_ROLE_POLICY = "aws_iam_role_policy"
AWS_IAM_USER = "aws_iam_user"
AWS_IAM_USER_GROUP_MEMBERSHIP = "aws_iam_user_group_membership"
AWS_IAM_USER_POLICY = "aws_iam_user_policy"

# Attribute-path prefixes that may be empty on import
IAM_ALLOW_EMPTY_VALUES: List[str] = ["tags."]
GROUP_MEMBERSHIP_ALLOW_EMPTY_VALUES: List[str] = ["tags.", "users."]

# Separator for composite ids such as "role:policy"
COMPOSITE_ID_SEPARATOR = ":"

# Policy document attributes
POLICY_ATTRIBUTE = "policy"
ASSUME_ROLE_POLICY_ATTRIBUTE = "assume_role_policy"

# Types carrying a permissions document in their "policy" attribute
POLICY_BEARING_TYPES: FrozenSet[str] = frozenset({
    AWS_IAM_POLICY,
    AWS_IAM_USER_POLICY,
    AWS_IAM_GROUP_POLICY,
    AWS_IAM_ROLE_POLICY,
})

# Which attribute holds the document for each type that carries one
POLICY_DOCUMENT_ATTRIBUTES: Dict[str, str] = {
    **{resource_type: POLICY_ATTRIBUTE for resource_type in POLICY_BEARING_TYPES},
    AWS_IAM_ROLE: ASSUME_ROLE_POLICY_ATTRIBUTE,
}

# HCL heredoc delimiter for policy documents
HEREDOC_MARKER = "POLICY"

# ListPolicies scope: only customer managed policies are importable
LOCAL_POLICY_SCOPE = "Local"

# Types the AWS provider cannot import; they stay in the JSON inventory only
NON_IMPORTABLE_TYPES: FrozenSet[str] = frozenset({
    AWS_IAM_GROUP_MEMBERSHIP,
    AWS_IAM_POLICY_ATTACHMENT,
})

# Types whose Terraform import id is the display name rather than the record id
IMPORT_BY_NAME_TYPES: FrozenSet[str] = frozenset({AWS_IAM_ROLE})
