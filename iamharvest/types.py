"""
Shared data types and models for the iamharvest application.

This module contains the data classes passed between the collector,
the document loader, the formatter and the writers.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# Type aliases for JSON-serializable data
JsonDict = Dict[str, Any]
"""Type for JSON-serializable dictionaries."""

AttributeMap = Dict[str, str]
"""Flat attribute map of a resource record (attribute name to string value)."""


@dataclass(frozen=True)
class ImportableResource:
    """
    A single discovered cloud object, ready for import into configuration.

    Records are never mutated after creation. Steps that enrich or rewrite
    a record return a new instance (see dataclasses.replace).

    Attributes:
        resource_id: Opaque id used to import the object (name, ARN or composite id)
        resource_name: Display name, used to derive the configuration block name
        resource_type: Terraform resource type tag (e.g. "aws_iam_user")
        provider: Provider tag (always "aws" here)
        attributes: Known attribute values for the object
        allow_empty_values: Attribute-path prefixes that may legitimately be empty
        additional_fields: Extra fields passed through to the generator untouched
    """
    resource_id: str
    resource_name: str
    resource_type: str
    provider: str
    attributes: AttributeMap = field(default_factory=dict)
    allow_empty_values: List[str] = field(default_factory=list)
    additional_fields: JsonDict = field(default_factory=dict)

    def to_dict(self) -> JsonDict:
        """Return a JSON-serializable view of the record."""
        return {
            "id": self.resource_id,
            "name": self.resource_name,
            "type": self.resource_type,
            "provider": self.provider,
            "attributes": dict(self.attributes),
            "allow_empty_values": list(self.allow_empty_values),
            "additional_fields": dict(self.additional_fields),
        }


@dataclass(frozen=True)
class CollectionFailure:
    """
    A list or get call that failed during a collection pass.

    Attributes:
        operation: boto3 operation name (e.g. "list_role_policies")
        target: Parent entity the call was made for, None for top-level listings
        message: Error text
    """
    operation: str
    target: Optional[str]
    message: str

    def to_dict(self) -> JsonDict:
        return {"operation": self.operation, "target": self.target, "message": self.message}


@dataclass
class CollectionResult:
    """Ordered records from one pass plus the failures that were skipped over."""
    resources: List[ImportableResource] = field(default_factory=list)
    failures: List[CollectionFailure] = field(default_factory=list)
