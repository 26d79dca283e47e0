"""
AWS IAM role enumeration.

This module lists IAM roles and the inline policies attached to each role.
"""

import logging

from mypy_boto3_iam.client import IAMClient

from ...constants import AWS_IAM_ROLE, AWS_IAM_ROLE_POLICY, AWS_PROVIDER, IAM_ALLOW_EMPTY_VALUES
from ...types import CollectionFailure, CollectionResult, ImportableResource
from ...utils import make_composite_id
from ..helpers import AWS_API_ERRORS, describe_aws_error, iter_page_items

# Set up logging
logger = logging.getLogger(__name__)


def collect_roles(iam_client: IAMClient, result: CollectionResult) -> None:
    """
    Append one aws_iam_role record per role, followed by its inline policies.

    Args:
        iam_client: IAM client for the target account
        result: Collection state to append records and failures to

    Raises:
        ClientError: If the ListRoles pagination itself fails
    """
    for role in iter_page_items(iam_client, "list_roles", "Roles"):
        role_name = role["RoleName"]
        result.resources.append(ImportableResource(
            resource_id=role["RoleId"],
            resource_name=role_name,
            resource_type=AWS_IAM_ROLE,
            provider=AWS_PROVIDER,
            allow_empty_values=list(IAM_ALLOW_EMPTY_VALUES),
        ))

        try:
            for policy_name in iter_page_items(
                iam_client, "list_role_policies", "PolicyNames", RoleName=role_name
            ):
                result.resources.append(ImportableResource(
                    resource_id=make_composite_id(role_name, policy_name),
                    resource_name=f"{role_name}_{policy_name}",
                    resource_type=AWS_IAM_ROLE_POLICY,
                    provider=AWS_PROVIDER,
                    allow_empty_values=list(IAM_ALLOW_EMPTY_VALUES),
                ))
        except AWS_API_ERRORS as e:
            logger.warning(f"Failed to list inline policies for role '{role_name}': {e}")
            result.failures.append(CollectionFailure(
                operation="list_role_policies",
                target=role_name,
                message=describe_aws_error(e),
            ))
