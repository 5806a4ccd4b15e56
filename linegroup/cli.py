import sys

import click

from .config import FROM_CONFIG, EmptinessPolicy, RunConfig, load_config
from .errors import ConfigError, InputUnavailableError, ParseError
from .grouper import group_records
from .logging_config import LEVELS, setup_logging
from .parser import read_records
from .report import ReportWriter, write_report

EXIT_WRITE_FAILED = 3


@click.command(name="linegroup", help="Group lines of three quoted fields that share a value")
@click.argument("input_path", type=click.Path(dir_okay=False))
@click.argument("empty_flag", type=click.STRING)
@click.argument("output_path", type=click.Path(dir_okay=False), required=False)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML file with run defaults",
)
@click.option(
    "--log-level",
    type=click.Choice(LEVELS, case_sensitive=False),
    default=None,
    help="Logging level, overrides the config file",
)
def main(
    input_path: str,
    empty_flag: str,
    output_path: str,
    config_path: str,
    log_level: str,
):
    """EMPTY_FLAG is 1 if "" is considered empty, '-' to read it from the
    config. OUTPUT_PATH is optional, stdout is used without it."""
    try:
        config = load_config(config_path) if config_path else RunConfig()
    except ConfigError as e:
        raise click.ClickException(str(e))

    logger = setup_logging(log_level or config.log_level)
    if empty_flag == FROM_CONFIG:
        empty_flag = config.empty_flag
    policy = EmptinessPolicy.from_flag(empty_flag)

    try:
        records = read_records(input_path, encoding=config.encoding)
    except InputUnavailableError:
        click.echo(f"File {input_path} does not exist.", err=True)
        sys.exit(1)
    except ParseError as e:
        click.echo(f"Error occurred during reading: {e}", err=True)
        sys.exit(1)

    result = group_records(records, policy)

    with ReportWriter(output_path, encoding=config.encoding) as writer:
        write_report(result, writer)
    if writer.failures:
        logger.error("%d writes failed", writer.failures)
        sys.exit(EXIT_WRITE_FAILED)


if __name__ == "__main__":
    main()
