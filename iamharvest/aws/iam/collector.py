"""
IAM inventory collection pass.

Runs the per-kind enumerators in a fixed order (users, groups, policies,
roles) and gathers their records into a single CollectionResult. A failed
listing never aborts the pass: it is logged, recorded and the next kind
is collected.
"""

import logging
from typing import Callable, List, Tuple

from mypy_boto3_iam.client import IAMClient

from ...types import CollectionFailure, CollectionResult
from ..helpers import AWS_API_ERRORS, describe_aws_error
from .groups import collect_groups
from .policies import collect_policies
from .roles import collect_roles
from .users import collect_users

# Set up logging
logger = logging.getLogger(__name__)

KindCollector = Callable[[IAMClient, CollectionResult], None]


def collect_iam_resources(
    iam_client: IAMClient,
    include_user_group_memberships: bool = False,
) -> CollectionResult:
    """
    Enumerate the IAM surface of an account into importable resource records.

    Args:
        iam_client: IAM client for the target account
        include_user_group_memberships: Also emit aws_iam_user_group_membership records

    Returns:
        CollectionResult with records in enumeration order and any partial failures
    """
    result = CollectionResult()

    def users(client: IAMClient, state: CollectionResult) -> None:
        collect_users(client, state, include_group_memberships=include_user_group_memberships)

    passes: List[Tuple[str, str, KindCollector]] = [
        ("users", "list_users", users),
        ("groups", "list_groups", collect_groups),
        ("policies", "list_policies", collect_policies),
        ("roles", "list_roles", collect_roles),
    ]

    for kind, operation, collect in passes:
        collected_before = len(result.resources)
        try:
            collect(iam_client, result)
        except AWS_API_ERRORS as e:
            logger.error(f"Failed to list IAM {kind} from AWS API: {e}")
            result.failures.append(CollectionFailure(
                operation=operation,
                target=None,
                message=describe_aws_error(e),
            ))
        logger.info(f"Collected {len(result.resources) - collected_before} records for IAM {kind}")

    return result
