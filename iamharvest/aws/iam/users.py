"""
AWS IAM user enumeration.

This module lists IAM users along with their inline policies and,
optionally, their group memberships.
"""

import logging

from mypy_boto3_iam.client import IAMClient

from ...constants import (
    AWS_IAM_USER,
    AWS_IAM_USER_GROUP_MEMBERSHIP,
    AWS_IAM_USER_POLICY,
    AWS_PROVIDER,
    IAM_ALLOW_EMPTY_VALUES,
)
from ...types import CollectionFailure, CollectionResult, ImportableResource
from ...utils import make_composite_id
from ..helpers import AWS_API_ERRORS, describe_aws_error, iter_page_items

# Set up logging
logger = logging.getLogger(__name__)


def collect_users(
    iam_client: IAMClient,
    result: CollectionResult,
    include_group_memberships: bool = False,
) -> None:
    """
    Append one aws_iam_user record per user, followed by that user's attachments.

    Args:
        iam_client: IAM client for the target account
        result: Collection state to append records and failures to
        include_group_memberships: Also emit aws_iam_user_group_membership records

    Raises:
        ClientError: If the ListUsers pagination itself fails
    """
    for user in iter_page_items(iam_client, "list_users", "Users"):
        user_name = user["UserName"]
        # Users are imported by name; the stable UserId becomes the display name
        result.resources.append(ImportableResource(
            resource_id=user_name,
            resource_name=user["UserId"],
            resource_type=AWS_IAM_USER,
            provider=AWS_PROVIDER,
            attributes={"force_destroy": "false"},
            allow_empty_values=list(IAM_ALLOW_EMPTY_VALUES),
        ))

        _collect_user_policies(iam_client, user_name, result)
        if include_group_memberships:
            _collect_user_group_memberships(iam_client, user_name, result)


def _collect_user_policies(iam_client: IAMClient, user_name: str, result: CollectionResult) -> None:
    """Append one aws_iam_user_policy record per inline policy of a user."""
    try:
        for policy_name in iter_page_items(
            iam_client, "list_user_policies", "PolicyNames", UserName=user_name
        ):
            result.resources.append(ImportableResource(
                resource_id=make_composite_id(user_name, policy_name),
                resource_name=f"{user_name}_{policy_name}".replace("@", ""),
                resource_type=AWS_IAM_USER_POLICY,
                provider=AWS_PROVIDER,
                allow_empty_values=list(IAM_ALLOW_EMPTY_VALUES),
            ))
    except AWS_API_ERRORS as e:
        logger.warning(f"Failed to list inline policies for user '{user_name}': {e}")
        result.failures.append(CollectionFailure(
            operation="list_user_policies",
            target=user_name,
            message=describe_aws_error(e),
        ))


def _collect_user_group_memberships(iam_client: IAMClient, user_name: str, result: CollectionResult) -> None:
    """Append one aws_iam_user_group_membership record per group the user belongs to."""
    try:
        for group in iter_page_items(
            iam_client, "list_groups_for_user", "Groups", UserName=user_name
        ):
            group_name = group["GroupName"]
            # Import id format: user/group
            result.resources.append(ImportableResource(
                resource_id=f"{user_name}/{group_name}",
                resource_name=group_name,
                resource_type=AWS_IAM_USER_GROUP_MEMBERSHIP,
                provider=AWS_PROVIDER,
                attributes={"user": user_name},
                allow_empty_values=list(IAM_ALLOW_EMPTY_VALUES),
            ))
    except AWS_API_ERRORS as e:
        logger.warning(f"Failed to list groups for user '{user_name}': {e}")
        result.failures.append(CollectionFailure(
            operation="list_groups_for_user",
            target=user_name,
            message=describe_aws_error(e),
        ))
