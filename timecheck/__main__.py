import json

import click
from pydantic import ValidationError

from timecheck.checks import CheckRunner, CheckStatus, ClockSyncProbe
from timecheck.logging import TIMECHECK_LOGGER, set_log_level
from timecheck.settings import TimeCheckSettings
from timecheck.time import read_timex


def build_runner(settings: TimeCheckSettings) -> CheckRunner:
    """Composition root: every available check is registered here."""
    checks = [
        ClockSyncProbe(acquire=read_timex, max_est_error_us=settings.max_est_error_us),
    ]
    return CheckRunner(TIMECHECK_LOGGER, checks)


def _run_and_exit(ctx: click.Context, name: str) -> None:
    runner: CheckRunner = ctx.obj["runner"]
    result = runner.run(name)

    if ctx.obj["as_json"]:
        chk = runner.get_check(name)
        click.echo(json.dumps({"name": name, "description": chk.description, **result.to_dict()}))
    elif result.status == CheckStatus.UNKNOWN:
        click.echo(f"Error executing {name}: {result.error}", err=True)
    else:
        click.echo(result.message)

    ctx.exit(result.status.exit_code)


@click.group()
@click.option("--log-level", default=None, help="Set logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)")
@click.option(
    "--max-est-error-us",
    type=click.IntRange(min=0),
    default=None,
    help="Largest kernel estimated clock error in microseconds (default: 100000)",
)
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the result as JSON")
@click.pass_context
def cli(ctx, log_level, max_est_error_us, as_json):
    overrides = {}
    if log_level is not None:
        overrides["log_level"] = log_level
    if max_est_error_us is not None:
        overrides["max_est_error_us"] = max_est_error_us
    try:
        settings = TimeCheckSettings(**overrides)
    except ValidationError as e:
        raise click.UsageError(f"Invalid settings: {e}") from e

    try:
        set_log_level(settings.log_level)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--log-level") from e

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings
    ctx.obj["runner"] = build_runner(settings)
    ctx.obj["as_json"] = as_json


@cli.command("time", short_help="Verify time is synced")
@click.pass_context
def time_cmd(ctx):
    """This check uses the adjtimex system call to validate time is synced."""
    _run_and_exit(ctx, "time")


@cli.command("list")
@click.pass_context
def list_cmd(ctx):
    """List the registered checks."""
    runner: CheckRunner = ctx.obj["runner"]
    for name in runner.names():
        click.echo(f"{name}\t{runner.get_check(name).description}")


if __name__ == "__main__":
    cli()
