import logging
import sys
from importlib import metadata
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import NoReturn

import click
from appdirs import user_log_dir
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from slsarn.arns import build_arns
from slsarn.aws.account import resolve_config
from slsarn.config import ServiceConfig
from slsarn.constants import (
    DEFAULT_IAM_PARTITION,
    DEFAULT_IAM_REGION,
    DEFAULT_ROLE_ADMIN_NAME,
    DEFAULT_ROLE_CI_NAME,
    DEFAULT_ROLE_DEVELOPER_NAME,
    DEFAULT_STAGE,
)
from slsarn.exceptions import AccountResolutionError, MissingRequiredFieldError

console = Console()

app_logger = logging.getLogger("slsarn")
app_logger.setLevel(logging.DEBUG)

app_name = "slsarn"
log_dir = Path(user_log_dir(app_name))
log_dir.mkdir(parents=True, exist_ok=True)
log_file_path = log_dir / f"{app_name}.log"
file_handler = TimedRotatingFileHandler(
    filename=str(log_file_path), when="D", interval=1, backupCount=7, encoding="utf-8"
)
file_handler.setLevel(logging.DEBUG)
file_formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
file_handler.setFormatter(file_formatter)
app_logger.addHandler(file_handler)

logger = logging.getLogger(__name__)

# boto3 is chatty at DEBUG
logging.getLogger("botocore").setLevel(logging.WARNING)
logging.getLogger("urllib3").setLevel(logging.WARNING)


def _fail(message: str) -> NoReturn:
    console.print(f"[bold red]✗ {escape(message)}[/bold red]", highlight=False)
    raise SystemExit(1)


def _print_mapping(data: dict[str, str], json_output: bool) -> None:
    if json_output:
        console.print_json(data=data)
        return
    for key, value in data.items():
        console.print(
            f"[cyan]{key}[/cyan]: {escape(value)}", highlight=False, emoji=False, soft_wrap=True
        )


@click.group(invoke_without_command=True)
@click.option(
    "--verbose", "-v", count=True, help="Increase verbosity. -v for INFO, -vv for DEBUG logs."
)
@click.option("--version", is_flag=True, help="Show slsarn version.")
@click.pass_context
def cli(ctx: click.Context, verbose: int, version: bool) -> None:
    if version:
        _version()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        ctx.exit(0)

    if verbose > 0:
        console_handler = RichHandler(
            console=console,
            show_time=False,
            show_level=True,
            markup=True,
            tracebacks_suppress=[click],
            rich_tracebacks=True,
        )
        if verbose == 1:
            console_handler.setLevel(logging.INFO)
        elif verbose >= 2:  # noqa: PLR2004
            console_handler.setLevel(logging.DEBUG)

        console.print(f"[italic dim]Logs saved to: {log_file_path}[/]")
        app_logger.addHandler(console_handler)


@click.command()
@click.argument("service_name")
@click.option("--stage", "-s", default=DEFAULT_STAGE, show_default=True, help="Deployment stage")
@click.option("--region", default="", help="Deployment region (defaults to AWS session region)")
@click.option("--account-id", default="", help="AWS account id (defaults to caller identity)")
@click.option("--partition", default=DEFAULT_IAM_PARTITION, show_default=True)
@click.option("--iam-region", default=DEFAULT_IAM_REGION, show_default=True)
@click.option("--tf-service-name", default="", help="Defaults to tf-SERVICE_NAME")
@click.option("--sls-service-name", default="", help="Defaults to sls-SERVICE_NAME")
@click.option("--profile", default=None, help="AWS profile used for account/region lookup")
@click.option("--json", is_flag=True, help="Output in JSON format")
def arns(  # noqa: PLR0913
    service_name: str,
    stage: str,
    region: str,
    account_id: str,
    partition: str,
    iam_region: str,
    tf_service_name: str,
    sls_service_name: str,
    profile: str | None,
    json: bool,
) -> None:
    """Shows the IAM ARN patterns for a service stage."""
    config = ServiceConfig(
        service_name=service_name,
        stage=stage,
        region=region,
        iam_account_id=account_id,
        iam_partition=partition,
        iam_region=iam_region,
        tf_service_name=tf_service_name,
        sls_service_name=sls_service_name,
    )
    try:
        resolved = resolve_config(config, profile=profile)
    except (MissingRequiredFieldError, AccountResolutionError) as e:
        logger.debug("Resolution failed", exc_info=True)
        _fail(str(e))

    _print_mapping(build_arns(resolved).to_dict(), json)


@click.command()
@click.argument("service_name")
@click.option("--stage", "-s", default=DEFAULT_STAGE, show_default=True, help="Deployment stage")
@click.option("--json", is_flag=True, help="Output in JSON format")
def tags(service_name: str, stage: str, json: bool) -> None:
    """Shows the tags applied to a service stage."""
    try:
        service_tags = ServiceConfig(service_name=service_name, stage=stage).tags
    except MissingRequiredFieldError as e:
        _fail(str(e))
    _print_mapping(service_tags, json)


@click.command()
@click.argument("service_name")
@click.option("--stage", "-s", default=DEFAULT_STAGE, show_default=True, help="Deployment stage")
@click.option("--tf-service-name", default="", help="Defaults to tf-SERVICE_NAME")
@click.option("--role-admin-name", default=DEFAULT_ROLE_ADMIN_NAME, show_default=True)
@click.option("--role-developer-name", default=DEFAULT_ROLE_DEVELOPER_NAME, show_default=True)
@click.option("--role-ci-name", default=DEFAULT_ROLE_CI_NAME, show_default=True)
@click.option("--json", is_flag=True, help="Output in JSON format")
def roles(  # noqa: PLR0913
    service_name: str,
    stage: str,
    tf_service_name: str,
    role_admin_name: str,
    role_developer_name: str,
    role_ci_name: str,
    json: bool,
) -> None:
    """Shows the IAM group names for the admin, developer and ci roles."""
    config = ServiceConfig(
        service_name=service_name,
        stage=stage,
        tf_service_name=tf_service_name,
        role_admin_name=role_admin_name,
        role_developer_name=role_developer_name,
        role_ci_name=role_ci_name,
    )
    try:
        group_names = config.role_group_names
    except MissingRequiredFieldError as e:
        _fail(str(e))
    _print_mapping(group_names, json)


@click.command()
def version() -> None:
    """Shows version and exit."""
    _version()


cli.add_command(version)
cli.add_command(arns)
cli.add_command(tags)
cli.add_command(roles)


def _version() -> None:
    console.print(f"slsarn version: {metadata.version('slsarn')}", highlight=False)
    sys.exit(0)
