import argparse
import yaml
from typing import Any, Dict
from .config import HarvestConfig


def load_yaml_config(path: str) -> Dict[str, Any]:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to the YAML configuration file

    Returns:
        Dictionary containing the loaded configuration, or empty dict if file not found
    """
    try:
        with open(path, 'r') as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        print(f"Config file '{path}' not found. Continuing without it.")
        return {}


def parse_cli_args() -> argparse.Namespace:
    """
    Parse command line arguments for the iamharvest tool.

    Returns:
        Parsed command line arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog="iamharvest",
        description="iamharvest - enumerate AWS IAM and generate Terraform import configuration"
    )

    parser.add_argument(
        '--config',
        required=True,
        type=str,
        help='Path to config YAML'
    )

    # Output (overrides YAML if provided)
    parser.add_argument(
        '--output-dir',
        dest='output_dir',
        type=str,
        help='Directory for the Terraform file and JSON inventory (default generated/iam)'
    )

    # Credentials
    parser.add_argument(
        '--profile',
        dest='profile_name',
        type=str,
        help='Named AWS profile for the base session'
    )
    parser.add_argument(
        '--target-account-id',
        dest='target_account_id',
        type=str,
        help='AWS Account ID to collect from (assumes --role-name there)'
    )
    parser.add_argument(
        '--role-name',
        dest='role_name',
        type=str,
        help='Role to assume in the target account (default OrganizationAccountAccessRole)'
    )

    # Collection options
    parser.add_argument(
        '--include-user-group-memberships',
        dest='include_user_group_memberships',
        action='store_true',
        default=argparse.SUPPRESS,
        help='Also emit aws_iam_user_group_membership resources'
    )
    parser.add_argument(
        '--skip-policy-documents',
        dest='load_policy_documents',
        action='store_false',
        default=argparse.SUPPRESS,
        help='Do not fetch policy documents for policies and roles'
    )

    parser.add_argument(
        '--log-level',
        dest='log_level',
        type=str,
        help='Logging level (default INFO)'
    )

    return parser.parse_args()


def merge_configs(yaml_config: Dict[str, Any], cli_args: argparse.Namespace) -> HarvestConfig:
    """
    Merge YAML configuration with CLI arguments and validate the result.

    Args:
        yaml_config: Configuration loaded from YAML file
        cli_args: Parsed command line arguments

    Returns:
        Validated HarvestConfig object

    Raises:
        ValueError: If configuration validation fails
        TypeError: If configuration has type errors
    """
    # Start with YAML
    merged = yaml_config.copy()

    # Apply CLI overrides (only if CLI provided them)
    cli_dict = {
        k: v for k, v in vars(cli_args).items()
        if k in HarvestConfig.model_fields and v is not None
    }
    merged.update(cli_dict)

    # Validate and return final config (will raise if fields have wrong types)
    return HarvestConfig(**merged)
