"""
Shared AWS helper utilities for pagination and error reporting.
"""

from collections.abc import Iterator
from typing import Any

from botocore.client import BaseClient
from botocore.exceptions import BotoCoreError, ClientError

__all__ = ["AWS_API_ERRORS", "describe_aws_error", "get_aws_error_code", "iter_page_items"]

# Errors raised by botocore for a failed call; anything else is a bug and propagates
AWS_API_ERRORS = (ClientError, BotoCoreError)


def iter_page_items(
    client: BaseClient,
    operation_name: str,
    result_key: str,
    **operation_kwargs: Any
) -> Iterator[Any]:
    """
    Yield every item under result_key across all pages of a paginated operation.

    Errors surface lazily, at the page that failed, so items from earlier
    pages have already been yielded.
    """
    paginator = client.get_paginator(operation_name)
    for page in paginator.paginate(**operation_kwargs):
        yield from page.get(result_key, [])


def get_aws_error_code(error: Exception) -> str:
    """
    Return the AWS error code of a ClientError, or the class name of any other error.

    BotoCoreErrors such as ProfileNotFound or NoCredentialsError carry no code.
    """
    if isinstance(error, ClientError):
        return error.response.get("Error", {}).get("Code", "Unknown")
    return type(error).__name__


def describe_aws_error(error: Exception) -> str:
    """
    Return a short description of a botocore error.

    ClientErrors are reduced to "Code: Message"; other errors use str().
    """
    if isinstance(error, ClientError):
        message = error.response.get("Error", {}).get("Message", str(error))
        return f"{get_aws_error_code(error)}: {message}"
    return str(error)
