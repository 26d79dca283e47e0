"""
Policy document loading for collected IAM records.

Listing calls only return names and ARNs. This module fetches the policy
text for every record whose type carries a document, so the formatter and
the inventory have the permissions to render.
"""

import json
import logging
from dataclasses import replace
from typing import Any, Callable, Dict, Iterable
from urllib.parse import unquote

from mypy_boto3_iam.client import IAMClient

from ...constants import (
    AWS_IAM_GROUP_POLICY,
    AWS_IAM_POLICY,
    AWS_IAM_ROLE,
    AWS_IAM_ROLE_POLICY,
    AWS_IAM_USER_POLICY,
    POLICY_DOCUMENT_ATTRIBUTES,
)
from ...types import CollectionFailure, CollectionResult, ImportableResource
from ...utils import split_composite_id
from ..helpers import AWS_API_ERRORS, describe_aws_error

# Set up logging
logger = logging.getLogger(__name__)


class DocumentFetchError(Exception):
    """Raised when an IAM get call needed for a policy document fails."""

    def __init__(self, operation: str, error: Exception) -> None:
        super().__init__(f"{operation} failed: {error}")
        self.operation = operation
        self.error = error


def _call(iam_client: IAMClient, operation: str, **kwargs: Any) -> Any:
    """Invoke an IAM operation, tagging any botocore error with the operation name."""
    try:
        return getattr(iam_client, operation)(**kwargs)
    except AWS_API_ERRORS as e:
        raise DocumentFetchError(operation, e) from e


def _fetch_managed_policy(iam_client: IAMClient, resource: ImportableResource) -> Any:
    policy = _call(iam_client, "get_policy", PolicyArn=resource.resource_id)["Policy"]
    version = _call(
        iam_client,
        "get_policy_version",
        PolicyArn=resource.resource_id,
        VersionId=policy["DefaultVersionId"]
    )
    return version["PolicyVersion"]["Document"]


def _fetch_user_policy(iam_client: IAMClient, resource: ImportableResource) -> Any:
    user_name, policy_name = split_composite_id(resource.resource_id)
    return _call(iam_client, "get_user_policy", UserName=user_name, PolicyName=policy_name)["PolicyDocument"]


def _fetch_group_policy(iam_client: IAMClient, resource: ImportableResource) -> Any:
    group_name, policy_name = split_composite_id(resource.resource_id)
    return _call(iam_client, "get_group_policy", GroupName=group_name, PolicyName=policy_name)["PolicyDocument"]


def _fetch_role_policy(iam_client: IAMClient, resource: ImportableResource) -> Any:
    role_name, policy_name = split_composite_id(resource.resource_id)
    return _call(iam_client, "get_role_policy", RoleName=role_name, PolicyName=policy_name)["PolicyDocument"]


def _fetch_assume_role_policy(iam_client: IAMClient, resource: ImportableResource) -> Any:
    # Role records are keyed by RoleId, the API wants the name
    return _call(iam_client, "get_role", RoleName=resource.resource_name)["Role"]["AssumeRolePolicyDocument"]


_DOCUMENT_FETCHERS: Dict[str, Callable[[IAMClient, ImportableResource], Any]] = {
    AWS_IAM_POLICY: _fetch_managed_policy,
    AWS_IAM_USER_POLICY: _fetch_user_policy,
    AWS_IAM_GROUP_POLICY: _fetch_group_policy,
    AWS_IAM_ROLE_POLICY: _fetch_role_policy,
    AWS_IAM_ROLE: _fetch_assume_role_policy,
}


def render_policy_document(document: Any) -> str:
    """
    Render a policy document as pretty-printed JSON.

    boto3 normally decodes documents into dicts, but raw API responses carry
    URL-encoded JSON strings. A string is parsed as JSON first and only
    URL-decoded when that fails, so literal "%xx" sequences in decoded
    documents survive. A string that is not JSON either way is returned as
    decoded text.

    Args:
        document: Policy document as a dict or a (possibly URL-encoded) string

    Returns:
        JSON text with two-space indentation
    """
    if isinstance(document, str):
        try:
            document = json.loads(document)
        except json.JSONDecodeError:
            decoded = unquote(document)
            try:
                document = json.loads(decoded)
            except json.JSONDecodeError:
                logger.debug("Policy document is not JSON, keeping it as text")
                return decoded
    return json.dumps(document, indent=2)


def load_policy_documents(
    iam_client: IAMClient,
    resources: Iterable[ImportableResource],
) -> CollectionResult:
    """
    Return the records with their policy documents filled in.

    Records whose type carries no document are passed through as-is. A
    failed fetch is logged and recorded against the call that failed, and
    the record is passed through without a document.

    Args:
        iam_client: IAM client for the account the records were collected from
        resources: Records from a collection pass

    Returns:
        CollectionResult with one record per input record, in the same order
    """
    result = CollectionResult()

    for resource in resources:
        fetch = _DOCUMENT_FETCHERS.get(resource.resource_type)
        if fetch is None:
            result.resources.append(resource)
            continue

        try:
            document = fetch(iam_client, resource)
        except DocumentFetchError as e:
            logger.warning(
                f"Failed to load policy document for {resource.resource_type} '{resource.resource_id}': {e}"
            )
            result.failures.append(CollectionFailure(
                operation=e.operation,
                target=resource.resource_id,
                message=describe_aws_error(e.error),
            ))
            result.resources.append(resource)
            continue

        attribute = POLICY_DOCUMENT_ATTRIBUTES[resource.resource_type]
        attributes = {**resource.attributes, attribute: render_policy_document(document)}
        result.resources.append(replace(resource, attributes=attributes))

    logger.info(f"Loaded policy documents with {len(result.failures)} failures")
    return result
