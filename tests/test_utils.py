import pytest
from botocore.exceptions import ClientError, NoCredentialsError

from iamharvest.aws.helpers import describe_aws_error, get_aws_error_code
from iamharvest.utils import make_composite_id, make_safe_resource_name, split_composite_id


class TestCompositeIds:
    """Test composite id helpers."""

    def test_make_composite_id(self) -> None:
        """Test parent and child are joined with a colon."""
        assert make_composite_id("ci", "inline") == "ci:inline"

    def test_split_on_first_separator(self) -> None:
        """Test splitting keeps any later colons in the child name."""
        assert split_composite_id("ci:inline") == ("ci", "inline")
        assert split_composite_id("ci:a:b") == ("ci", "a:b")

    def test_split_rejects_plain_id(self) -> None:
        """Test ids without a separator are rejected."""
        with pytest.raises(ValueError):
            split_composite_id("AROACI")


class TestMakeSafeResourceName:
    """Test make_safe_resource_name function."""

    @pytest.mark.parametrize("name,expected", [
        ("AIDAALICE", "aidaalice"),
        ("Deploy-Role@Prod", "deploy_role_prod"),
        ("aliceexample.com_s3-read", "aliceexample_com_s3_read"),
        ("__edge__", "edge"),
        ("123abc", "r_123abc"),
        ("@@@", "r"),
    ])
    def test_names(self, name: str, expected: str) -> None:
        """Test conversion of display names to block names."""
        assert make_safe_resource_name(name) == expected


class TestAwsErrorHelpers:
    """Test botocore error description helpers."""

    def test_client_error(self) -> None:
        """Test ClientErrors report their code and message."""
        error = ClientError({"Error": {"Code": "AccessDenied", "Message": "denied"}}, "ListUsers")
        assert get_aws_error_code(error) == "AccessDenied"
        assert describe_aws_error(error) == "AccessDenied: denied"

    def test_botocore_error(self) -> None:
        """Test BotoCoreErrors report their class name."""
        error = NoCredentialsError()
        assert get_aws_error_code(error) == "NoCredentialsError"
        assert describe_aws_error(error) == str(error)
