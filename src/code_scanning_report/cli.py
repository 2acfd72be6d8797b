"""Command line entry point for generating code scanning reports."""

import asyncio
import logging
from pathlib import Path

import click

from code_scanning_report import __version__
from code_scanning_report.api import CodeScanningClient, Repository
from code_scanning_report.config import REPORT_FORMATS, ReportConfig, resolve_github_token
from code_scanning_report.core import ReportPipeline
from code_scanning_report.domain import DetailLevel
from code_scanning_report.errors import ReportError, RepositoryResolutionError
from code_scanning_report.formatters import default_registry
from code_scanning_report.git import detect_repository, parse_repository_name
from code_scanning_report.input import AlertInput, GitHubAlertInput, JsonFileAlertInput
from code_scanning_report.logging_config import setup_logging
from code_scanning_report.output import ConsoleReportOutput, FileReportOutput, ReportOutput

logger = logging.getLogger(__name__)

DETAIL_HELP = (
    "Detail level: minimum (essentials only), medium (balanced), "
    "full (everything), raw (original API response)"
)


def _resolve_repository(config: ReportConfig) -> Repository:
    if config.repository:
        repository = parse_repository_name(config.repository)
        if repository is None:
            raise RepositoryResolutionError(
                f"Invalid repository '{config.repository}'. Expected owner/name."
            )
        return repository
    return detect_repository()


async def run_report(config: ReportConfig) -> int:
    """Fetch, format and write one report. Returns the process exit code."""
    # Progress goes to stderr when the report itself is written to stdout.
    def say(message: str) -> None:
        click.echo(message, err=config.writes_to_stdout)

    try:
        source: AlertInput
        if config.input_file is not None:
            say(f"Reading alerts from {config.input_file}...")
            source = JsonFileAlertInput(config.input_file)
            repo_name = config.repository or "local"
        else:
            say("Authenticating with GitHub...")
            token = resolve_github_token()

            say("Detecting repository from git remote...")
            repository = _resolve_repository(config)
            repo_name = repository.full_name
            say(f"   Repository: {repo_name}")

            say("Fetching code scanning alerts...")
            client = CodeScanningClient(access_token=token, base_url=config.api_url)
            source = GitHubAlertInput(client, repository)

        formatter = default_registry().get(config.report_format)
        output: ReportOutput
        if config.writes_to_stdout:
            output = ConsoleReportOutput()
        else:
            output = FileReportOutput(config.resolve_output_path())

        pipeline = ReportPipeline(
            source,
            formatter,
            output,
            detail_level=config.detail_level,
            repo_name=repo_name,
        )
        result = await pipeline.run()
    except ReportError as exc:
        click.echo(f"Error: {exc}", err=True)
        return 1
    except Exception as exc:
        logger.debug("Unexpected failure", exc_info=True)
        detail = f": {exc}" if str(exc) else ""
        click.echo(f"Error: An unexpected error occurred{detail}", err=True)
        return 1

    if result.alert_count == 0:
        say("No code scanning alerts found! Your repository is clean!")
        return 0

    say(f"   Found {result.alert_count} open alert(s)")
    say(
        f"Generated {config.report_format.upper()} report "
        f"({config.detail_level} detail), saved to: {result.destination}"
    )
    return 0


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--format",
    "-f",
    "report_format",
    type=click.Choice(REPORT_FORMATS),
    default="json",
    show_default=True,
    help="Output format",
)
@click.option(
    "--detail",
    "-d",
    "detail_level",
    type=click.Choice([level.value for level in DetailLevel]),
    default=DetailLevel.MEDIUM.value,
    show_default=True,
    help=DETAIL_HELP,
)
@click.option(
    "--output",
    "-o",
    "output_path",
    help="Output file path, '-' for stdout (defaults to code-scanning-report-[timestamp])",
)
@click.option("--repo", "-r", "repository", help="Repository as owner/name (skips git detection)")
@click.option(
    "--input-file",
    type=click.Path(path_type=Path, dir_okay=False),
    help="Render a saved raw JSON dump instead of calling the API",
)
@click.option("--verbose", is_flag=True, help="Enable debug logging")
@click.version_option(__version__, "-v", "--version", prog_name="code-scanning-report")
@click.pass_context
def main(
    ctx: click.Context,
    report_format: str,
    detail_level: str,
    output_path: str | None,
    repository: str | None,
    input_file: Path | None,
    verbose: bool,
) -> None:
    """Generate a report of a repository's open code scanning alerts."""
    config = ReportConfig.from_env(
        report_format=report_format,
        detail_level=DetailLevel(detail_level),
        output_path=output_path,
        repository=repository,
        input_file=input_file,
        verbose=verbose,
    )
    setup_logging(config.verbose)
    ctx.exit(asyncio.run(run_report(config)))
