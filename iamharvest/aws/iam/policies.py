"""
AWS IAM customer managed policy enumeration.
"""

from mypy_boto3_iam.client import IAMClient

from ...constants import (
    AWS_IAM_POLICY,
    AWS_IAM_POLICY_ATTACHMENT,
    AWS_PROVIDER,
    IAM_ALLOW_EMPTY_VALUES,
    LOCAL_POLICY_SCOPE,
)
from ...types import CollectionResult, ImportableResource
from ..helpers import iter_page_items


def collect_policies(iam_client: IAMClient, result: CollectionResult) -> None:
    """
    Append an attachment record and a policy record for each customer managed policy.

    AWS managed policies are skipped (Scope=Local); they cannot be imported.

    Raises:
        ClientError: If the ListPolicies pagination fails
    """
    for policy in iter_page_items(
        iam_client, "list_policies", "Policies", Scope=LOCAL_POLICY_SCOPE
    ):
        policy_name = policy["PolicyName"]
        policy_arn = policy["Arn"]

        result.resources.append(ImportableResource(
            resource_id=policy_arn,
            resource_name=policy_name,
            resource_type=AWS_IAM_POLICY_ATTACHMENT,
            provider=AWS_PROVIDER,
            attributes={"policy_arn": policy_arn, "name": policy_name},
            allow_empty_values=list(IAM_ALLOW_EMPTY_VALUES),
        ))
        result.resources.append(ImportableResource(
            resource_id=policy_arn,
            resource_name=policy_name,
            resource_type=AWS_IAM_POLICY,
            provider=AWS_PROVIDER,
            allow_empty_values=list(IAM_ALLOW_EMPTY_VALUES),
        ))
