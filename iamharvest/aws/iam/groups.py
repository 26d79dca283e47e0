"""
AWS IAM group enumeration.

Each group yields the group itself, its membership resource and one
record per inline group policy.
"""

import logging

from mypy_boto3_iam.client import IAMClient

from ...constants import (
    AWS_IAM_GROUP,
    AWS_IAM_GROUP_MEMBERSHIP,
    AWS_IAM_GROUP_POLICY,
    AWS_PROVIDER,
    GROUP_MEMBERSHIP_ALLOW_EMPTY_VALUES,
    IAM_ALLOW_EMPTY_VALUES,
)
from ...types import CollectionFailure, CollectionResult, ImportableResource
from ...utils import make_composite_id
from ..helpers import AWS_API_ERRORS, describe_aws_error, iter_page_items

# Set up logging
logger = logging.getLogger(__name__)


def collect_groups(iam_client: IAMClient, result: CollectionResult) -> None:
    """
    Append group, group membership and inline group policy records.

    Args:
        iam_client: IAM client for the target account
        result: Collection state to append records and failures to

    Raises:
        ClientError: If the ListGroups pagination itself fails
    """
    for group in iter_page_items(iam_client, "list_groups", "Groups"):
        group_name = group["GroupName"]
        result.resources.append(ImportableResource(
            resource_id=group_name,
            resource_name=group_name,
            resource_type=AWS_IAM_GROUP,
            provider=AWS_PROVIDER,
            allow_empty_values=list(IAM_ALLOW_EMPTY_VALUES),
        ))
        result.resources.append(ImportableResource(
            resource_id=group_name,
            resource_name=group_name,
            resource_type=AWS_IAM_GROUP_MEMBERSHIP,
            provider=AWS_PROVIDER,
            attributes={"group": group_name, "name": group_name},
            allow_empty_values=list(GROUP_MEMBERSHIP_ALLOW_EMPTY_VALUES),
        ))

        _collect_group_policies(iam_client, group_name, result)


def _collect_group_policies(iam_client: IAMClient, group_name: str, result: CollectionResult) -> None:
    try:
        for policy_name in iter_page_items(
            iam_client, "list_group_policies", "PolicyNames", GroupName=group_name
        ):
            result.resources.append(ImportableResource(
                resource_id=make_composite_id(group_name, policy_name),
                resource_name=f"{group_name}_{policy_name}",
                resource_type=AWS_IAM_GROUP_POLICY,
                provider=AWS_PROVIDER,
                allow_empty_values=list(IAM_ALLOW_EMPTY_VALUES),
            ))
    except AWS_API_ERRORS as e:
        logger.warning(f"Failed to list inline policies for group '{group_name}': {e}")
        result.failures.append(CollectionFailure(
            operation="list_group_policies",
            target=group_name,
            message=describe_aws_error(e),
        ))
