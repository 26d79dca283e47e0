"""
Tests for iamharvest.aws.sessions module.

Tests for AWS session management and role assumption utilities.
"""

import pytest
from botocore.exceptions import ClientError
from unittest.mock import MagicMock, patch

from iamharvest.aws.sessions import assume_role, get_harvest_session
from iamharvest.config import HarvestConfig

CREDENTIALS = {
    "Credentials": {
        "AccessKeyId": "FAKE_ACCESS_KEY_ID",
        "SecretAccessKey": "FAKE_SECRET_ACCESS_KEY",
        "SessionToken": "FAKE_SESSION_TOKEN"
    }
}


class TestAssumeRole:
    """Test assume_role function."""

    def test_assume_role_success(self) -> None:
        """Test successful role assumption."""
        mock_base_session = MagicMock()
        mock_sts_client = MagicMock()
        mock_base_session.client.return_value = mock_sts_client
        mock_sts_client.assume_role.return_value = CREDENTIALS

        with patch("iamharvest.aws.sessions.Session") as mock_session_class:
            mock_new_session = MagicMock()
            mock_session_class.return_value = mock_new_session

            result = assume_role(
                role_arn="arn:aws:iam::123456789012:role/TestRole",
                session_name="TestSession",
                base_session=mock_base_session
            )

            mock_sts_client.assume_role.assert_called_once_with(
                RoleArn="arn:aws:iam::123456789012:role/TestRole",
                RoleSessionName="TestSession"
            )
            mock_session_class.assert_called_once_with(
                aws_access_key_id="FAKE_ACCESS_KEY_ID",
                aws_secret_access_key="FAKE_SECRET_ACCESS_KEY",
                aws_session_token="FAKE_SESSION_TOKEN"
            )
            assert result is mock_new_session

    def test_assume_role_client_error(self) -> None:
        """Test role assumption failure propagates."""
        mock_base_session = MagicMock()
        mock_base_session.client.return_value.assume_role.side_effect = ClientError(
            {"Error": {"Code": "AccessDenied", "Message": "not allowed"}}, "AssumeRole"
        )

        with pytest.raises(ClientError):
            assume_role("arn:aws:iam::123456789012:role/TestRole", "TestSession", mock_base_session)


class TestGetHarvestSession:
    """Test get_harvest_session function."""

    def test_default_session_without_target_account(self) -> None:
        """Test the default credential chain is used as-is."""
        with patch("iamharvest.aws.sessions.Session") as mock_session_class:
            result = get_harvest_session(HarvestConfig())

            mock_session_class.assert_called_once_with()
            assert result is mock_session_class.return_value

    def test_profile_session(self) -> None:
        """Test a named profile is passed to the base session."""
        with patch("iamharvest.aws.sessions.Session") as mock_session_class:
            get_harvest_session(HarvestConfig(profile_name="audit"))

            mock_session_class.assert_called_once_with(profile_name="audit")

    def test_assumes_role_in_target_account(self) -> None:
        """Test the configured role is assumed in the target account."""
        config = HarvestConfig(target_account_id="111111111111", role_name="IamReader")
        with patch("iamharvest.aws.sessions.Session") as mock_session_class, \
                patch("iamharvest.aws.sessions.assume_role") as mock_assume_role:
            result = get_harvest_session(config)

            mock_assume_role.assert_called_once_with(
                "arn:aws:iam::111111111111:role/IamReader",
                "IamHarvestSession",
                mock_session_class.return_value,
            )
            assert result is mock_assume_role.return_value
