"""AWS session management utilities."""

import logging
from typing import Optional

from boto3.session import Session
from mypy_boto3_sts.client import STSClient
from mypy_boto3_sts.type_defs import AssumeRoleResponseTypeDef, CredentialsTypeDef

from ..config import HarvestConfig

logger = logging.getLogger(__name__)


def assume_role(
    role_arn: str,
    session_name: str,
    base_session: Optional[Session] = None
) -> Session:
    """
    Assume an IAM role and return a session with temporary credentials.

    Args:
        role_arn: ARN of the role to assume
        session_name: Name for the role session
        base_session: Session to use for assuming role (defaults to boto3.Session())

    Returns:
        boto3 Session with assumed role credentials

    Raises:
        ClientError: If role assumption fails (AccessDenied, InvalidParameterValue, etc.)
    """
    if base_session is None:
        base_session = Session()

    sts: STSClient = base_session.client("sts")
    resp: AssumeRoleResponseTypeDef = sts.assume_role(
        RoleArn=role_arn,
        RoleSessionName=session_name
    )
    logger.info(f"Assumed role {role_arn}")

    creds: CredentialsTypeDef = resp["Credentials"]
    return Session(
        aws_access_key_id=creds["AccessKeyId"],
        aws_secret_access_key=creds["SecretAccessKey"],
        aws_session_token=creds["SessionToken"]
    )


def get_harvest_session(config: HarvestConfig) -> Session:
    """
    Build the session used to enumerate IAM.

    Starts from the configured profile (or the default credential chain) and,
    when target_account_id is set, assumes role_name in that account.

    Raises:
        ClientError: If role assumption fails
    """
    if config.profile_name:
        base_session = Session(profile_name=config.profile_name)
    else:
        base_session = Session()

    if not config.target_account_id:
        logger.debug("No target_account_id provided, collecting with the base session")
        return base_session

    role_arn = f"arn:aws:iam::{config.target_account_id}:role/{config.role_name}"
    return assume_role(role_arn, config.session_name, base_session)
