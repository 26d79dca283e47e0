"""
Shared test helpers for iamharvest tests.

FakeIamClient serves canned paginator pages so collector tests can assert
on exact record sequences without touching AWS.
"""

from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from botocore.exceptions import ClientError

# Parent-name parameters used by nested IAM listings
_PARENT_PARAMS = ("UserName", "GroupName", "RoleName")

PageKey = Union[str, Tuple[str, str]]


def make_client_error(code: str = "AccessDenied", operation: str = "ListUsers") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": f"{code} for {operation}"}}, operation)


class _FakePaginator:
    def __init__(self, client: "FakeIamClient", operation_name: str) -> None:
        self._client = client
        self._operation_name = operation_name

    def paginate(self, **kwargs: Any) -> Iterator[Dict[str, Any]]:
        self._client.calls.append((self._operation_name, kwargs))
        parent: Optional[str] = next((kwargs[p] for p in _PARENT_PARAMS if p in kwargs), None)
        key: PageKey = (self._operation_name, parent) if parent else self._operation_name
        pages = self._client.pages.get(key, [])
        if isinstance(pages, Exception):
            raise pages
        return self._iterate(pages)

    @staticmethod
    def _iterate(pages: List[Any]) -> Iterator[Dict[str, Any]]:
        for page in pages:
            if isinstance(page, Exception):
                raise page
            yield page


class FakeIamClient:
    """
    Minimal stand-in for an IAM client's paginators.

    pages maps an operation name, or (operation name, parent name) for nested
    listings, to either a list of pages or an exception. A page may itself be
    an exception to simulate a failure part-way through pagination.
    """

    def __init__(self, pages: Dict[PageKey, Any]) -> None:
        self.pages = pages
        self.calls: List[Tuple[str, Dict[str, Any]]] = []

    def get_paginator(self, operation_name: str) -> _FakePaginator:
        return _FakePaginator(self, operation_name)
