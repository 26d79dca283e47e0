import json
import tempfile
from pathlib import Path
from unittest.mock import MagicMock, mock_open, patch

import pytest
from botocore.exceptions import ClientError, ProfileNotFound

from conftest import FakeIamClient, make_client_error
from iamharvest.config import HarvestConfig
from iamharvest.main import main, run_collection, setup_configuration
from iamharvest.types import CollectionFailure, CollectionResult, ImportableResource
from iamharvest.usage import load_yaml_config, parse_cli_args


class TestLoadYamlConfig:
    """Test load_yaml_config function with various scenarios."""

    def test_load_yaml_config_valid_file(self) -> None:
        yaml_content = """
        output_dir: out/iam
        include_user_group_memberships: true
        """
        with patch('builtins.open', mock_open(read_data=yaml_content)):
            result = load_yaml_config("test.yaml")
            assert result["output_dir"] == "out/iam"
            assert result["include_user_group_memberships"] is True

    def test_load_yaml_config_file_not_found(self) -> None:
        """Test handling of missing YAML file."""
        with patch('builtins.open', side_effect=FileNotFoundError):
            assert load_yaml_config("nonexistent.yaml") == {}

    def test_load_yaml_config_empty_file(self) -> None:
        """Test loading empty YAML file."""
        with patch('builtins.open', mock_open(read_data="")):
            assert load_yaml_config("empty.yaml") == {}


class TestParseCliArgs:
    """Test parse_cli_args function."""

    def test_parse_cli_args_valid(self) -> None:
        """Test parsing the required config argument."""
        with patch('sys.argv', ['iamharvest', '--config', 'test.yaml']):
            args = parse_cli_args()
            assert args.config == "test.yaml"
            assert args.output_dir is None
            assert not hasattr(args, "include_user_group_memberships")
            assert not hasattr(args, "load_policy_documents")

    def test_parse_cli_args_flags(self) -> None:
        """Test boolean flags map onto config fields."""
        argv = [
            'iamharvest', '--config', 'test.yaml',
            '--include-user-group-memberships', '--skip-policy-documents',
            '--profile', 'audit', '--target-account-id', '111111111111',
        ]
        with patch('sys.argv', argv):
            args = parse_cli_args()
            assert args.include_user_group_memberships is True
            assert args.load_policy_documents is False
            assert args.profile_name == "audit"
            assert args.target_account_id == "111111111111"

    def test_parse_cli_args_missing_required(self) -> None:
        """Test parsing CLI arguments with missing required argument."""
        with patch('sys.argv', ['iamharvest']):
            with pytest.raises(SystemExit):
                parse_cli_args()


class TestSetupConfiguration:
    """Test setup_configuration function."""

    def test_invalid_configuration_exits(self) -> None:
        """Test validation errors exit with status 1."""
        with patch('sys.argv', ['iamharvest', '--config', 'x.yaml', '--log-level', 'LOUD']):
            cli_args = parse_cli_args()
        with pytest.raises(SystemExit) as exc_info:
            setup_configuration(cli_args, {})
        assert exc_info.value.code == 1

    def test_valid_configuration(self) -> None:
        """Test a valid merge returns the config."""
        with patch('sys.argv', ['iamharvest', '--config', 'x.yaml', '--output-dir', 'out']):
            cli_args = parse_cli_args()
        assert setup_configuration(cli_args, {}).output_dir == "out"


class TestRunCollection:
    """Test run_collection function."""

    @patch('iamharvest.main.load_policy_documents')
    @patch('iamharvest.main.collect_iam_resources')
    def test_documents_loaded_and_formatted(self, mock_collect: MagicMock, mock_load: MagicMock) -> None:
        """Test failures from every step are combined and documents wrapped."""
        role = ImportableResource("AROACI", "ci", "aws_iam_role", "aws")
        loaded_role = ImportableResource("AROACI", "ci", "aws_iam_role", "aws", {"assume_role_policy": "{}"})
        mock_collect.return_value = CollectionResult(
            resources=[role],
            failures=[CollectionFailure("list_groups", None, "Throttling: slow down")],
        )
        mock_load.return_value = CollectionResult(
            resources=[loaded_role],
            failures=[CollectionFailure("get_role", "AROAOPS", "NoSuchEntity: gone")],
        )
        mock_session = MagicMock()

        result = run_collection(HarvestConfig(include_user_group_memberships=True), mock_session)

        mock_session.client.assert_called_once_with("iam")
        mock_collect.assert_called_once_with(
            mock_session.client.return_value, include_user_group_memberships=True
        )
        assert result.resources[0].attributes == {"assume_role_policy": "<<POLICY\n{}\nPOLICY"}
        assert [f.operation for f in result.failures] == ["list_groups", "get_role"]

    @patch('iamharvest.main.load_policy_documents')
    @patch('iamharvest.main.collect_iam_resources')
    def test_documents_skipped(self, mock_collect: MagicMock, mock_load: MagicMock) -> None:
        """Test load_policy_documents=False skips the document step."""
        mock_collect.return_value = CollectionResult()

        run_collection(HarvestConfig(load_policy_documents=False), MagicMock())

        mock_load.assert_not_called()


class TestMain:
    """Test main entry point."""

    def test_main_writes_outputs(self) -> None:
        """Test a full run against a fake IAM client writes both output files."""
        fake_client = FakeIamClient({
            "list_users": [{"Users": [{"UserName": "bob", "UserId": "AIDABOB"}]}],
            "list_roles": [{"Roles": [{"RoleName": "ci", "RoleId": "AROACI"}]}],
            ("list_role_policies", "ci"): make_client_error("AccessDenied", "ListRolePolicies"),
        })
        mock_session = MagicMock()
        mock_session.client.return_value = fake_client

        with tempfile.TemporaryDirectory() as temp_dir:
            yaml_config = {"output_dir": temp_dir, "load_policy_documents": False}
            with patch('sys.argv', ['iamharvest', '--config', 'x.yaml']), \
                    patch('iamharvest.main.load_yaml_config', return_value=yaml_config), \
                    patch('iamharvest.main.get_harvest_session', return_value=mock_session):
                main()

            terraform = (Path(temp_dir) / "iam.tf").read_text()
            inventory = json.loads((Path(temp_dir) / "iam_inventory.json").read_text())

        assert 'to = aws_iam_user.aidabob' in terraform
        assert 'to = aws_iam_role.ci\n  id = "ci"' in terraform
        assert inventory["summary"]["total_resources"] == 2
        assert inventory["failures"][0]["target"] == "ci"

    def test_main_session_error_exits(self) -> None:
        """Test an STS failure exits with status 1."""
        error = ClientError({"Error": {"Code": "AccessDenied", "Message": "denied"}}, "AssumeRole")
        with patch('sys.argv', ['iamharvest', '--config', 'x.yaml']), \
                patch('iamharvest.main.load_yaml_config', return_value={}), \
                patch('iamharvest.main.get_harvest_session', side_effect=error):
            with pytest.raises(SystemExit) as exc_info:
                main()
        assert exc_info.value.code == 1

    def test_main_missing_profile_exits(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test a botocore ProfileNotFound is reported and exits with status 1."""
        with patch('sys.argv', ['iamharvest', '--config', 'x.yaml', '--profile', 'nope']), \
                patch('iamharvest.main.load_yaml_config', return_value={}), \
                patch('iamharvest.main.get_harvest_session', side_effect=ProfileNotFound(profile='nope')):
            with pytest.raises(SystemExit) as exc_info:
                main()
        assert exc_info.value.code == 1
        assert "AWS API Error (ProfileNotFound)" in capsys.readouterr().out
