import argparse
import logging
from pathlib import Path
from typing import Dict

from boto3.session import Session
from mypy_boto3_iam.client import IAMClient

from .aws.helpers import AWS_API_ERRORS, get_aws_error_code
from .aws.iam import collect_iam_resources, load_policy_documents
from .aws.sessions import get_harvest_session
from .config import HarvestConfig
from .formatting import format_policy_documents
from .output import OutputHandler
from .terraform import generate_import_terraform
from .types import CollectionResult
from .usage import load_yaml_config, merge_configs, parse_cli_args
from .write_results import build_summary, write_inventory

logger = logging.getLogger(__name__)


def setup_configuration(cli_args: argparse.Namespace, yaml_config: Dict) -> HarvestConfig:
    """
    Merge and validate configuration from YAML and CLI arguments.

    Args:
        cli_args: Parsed command line arguments
        yaml_config: Configuration loaded from YAML file

    Returns:
        Validated HarvestConfig object

    Raises:
        SystemExit: If configuration validation fails
    """
    try:
        final_config = merge_configs(yaml_config, cli_args)
    except (ValueError, TypeError) as e:
        OutputHandler.error("Configuration Error", e)
        exit(1)

    OutputHandler.success("Final Config", final_config.model_dump())

    return final_config


def run_collection(config: HarvestConfig, session: Session) -> CollectionResult:
    """
    Collect, enrich and format IAM records for one account.

    Args:
        config: Validated iamharvest configuration
        session: boto3 Session for the account to enumerate

    Returns:
        CollectionResult with formatted records and the failures of every step
    """
    iam_client: IAMClient = session.client("iam")

    result = collect_iam_resources(
        iam_client,
        include_user_group_memberships=config.include_user_group_memberships,
    )

    if config.load_policy_documents:
        loaded = load_policy_documents(iam_client, result.resources)
        result = CollectionResult(
            resources=loaded.resources,
            failures=result.failures + loaded.failures,
        )

    return CollectionResult(
        resources=format_policy_documents(result.resources),
        failures=result.failures,
    )


def write_outputs(config: HarvestConfig, result: CollectionResult) -> None:
    """
    Write the Terraform import file and the JSON inventory.

    Args:
        config: Validated iamharvest configuration
        result: Formatted collection result
    """
    output_dir = Path(config.output_dir)
    generate_import_terraform(result.resources, str(output_dir / config.terraform_filename))
    write_inventory(result, str(output_dir / config.inventory_filename))


def report_result(result: CollectionResult) -> None:
    summary = build_summary(result)
    OutputHandler.collection_completed(summary)
    OutputHandler.success("IAM Collection Summary", summary)
    if result.failures:
        OutputHandler.warning(
            f"{len(result.failures)} calls failed and were skipped",
            [failure.to_dict() for failure in result.failures],
        )


def main() -> None:
    """Main entry point for iamharvest."""
    cli_args = parse_cli_args()
    yaml_config = load_yaml_config(cli_args.config)

    final_config = setup_configuration(cli_args, yaml_config)
    logging.basicConfig(level=final_config.log_level)

    try:
        session = get_harvest_session(final_config)
        result = run_collection(final_config, session)
    except AWS_API_ERRORS as e:
        OutputHandler.error(f"AWS API Error ({get_aws_error_code(e)})", e)
        logger.error(f"AWS API error: {e}", exc_info=True)
        exit(1)

    OutputHandler.section_header("IAM IMPORT GENERATION")
    write_outputs(final_config, result)
    report_result(result)


if __name__ == "__main__":
    main()
