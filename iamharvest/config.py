import logging
from typing import Optional

from pydantic import BaseModel, field_validator


# Centralized defaults for output locations
DEFAULT_OUTPUT_DIR = "generated/iam"
DEFAULT_TERRAFORM_FILENAME = "iam.tf"
DEFAULT_INVENTORY_FILENAME = "iam_inventory.json"
DEFAULT_ROLE_NAME = "OrganizationAccountAccessRole"
DEFAULT_SESSION_NAME = "IamHarvestSession"


class HarvestConfig(BaseModel):
    # Named AWS profile for the base session
    profile_name: Optional[str] = None
    # When set, assume role_name in this account before collecting
    target_account_id: Optional[str] = None
    role_name: str = DEFAULT_ROLE_NAME
    session_name: str = DEFAULT_SESSION_NAME
    # Also emit aws_iam_user_group_membership records
    include_user_group_memberships: bool = False
    # Fetch policy text for policy-bearing records
    load_policy_documents: bool = True
    # Directory where the Terraform file and the JSON inventory are written
    output_dir: str = DEFAULT_OUTPUT_DIR
    terraform_filename: str = DEFAULT_TERRAFORM_FILENAME
    inventory_filename: str = DEFAULT_INVENTORY_FILENAME
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @field_validator("target_account_id")
    @classmethod
    def _validate_account_id(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not (len(value) == 12 and value.isdigit()):
            raise ValueError(f"target_account_id must be a 12-digit account ID, got '{value}'")
        return value
