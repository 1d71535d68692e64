"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from profile_typegen.configuration import EmitMode, TypegenSettings
from profile_typegen.profile_fetching import HttpClient, RequestsHttpClient
from profile_typegen.run_execution import (
    RunExecutionError,
    RunRequest,
    execute_profile_typegen_run,
)
from profile_typegen.shape_validation import is_url
from profile_typegen.type_emission import DatamodelCodeGenerator, SchemaCompiler

_PACKAGE_LOGGER = logging.getLogger("profile_typegen")
_PACKAGE_LOGGER.addHandler(logging.NullHandler())
_VERBOSE_HANDLER_NAME = "profile_typegen.verbose"


class CliError(Exception):
    """Custom CLI error."""


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="profile-typegen")
@click.option(
    "--url",
    "url",
    required=False,
    type=str,
    help="Base URL of the API; its discovery document is read from <url>/profile",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML/JSON configuration file",
)
@click.option(
    "--emit",
    "emit_mode",
    required=False,
    type=click.Choice([mode.value for mode in EmitMode]),
    help="Print only the first compiled schema (default) or all of them",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log progress to stderr.")
def cli(url: str | None, config_path: str | None, emit_mode: str | None, verbose: bool) -> None:
    """Generate type definitions from the JSON Schemas linked by an API profile."""
    _configure_logging(verbose)
    if not url:
        raise CliError("Url not specified")
    if not is_url(url):
        raise CliError("Invalid URL format")
    try:
        outcome = execute_profile_typegen_run(
            RunRequest(
                url=url,
                config_path=config_path,
                emit_mode=EmitMode(emit_mode) if emit_mode else None,
            ),
            http_client_factory=_build_http_client,
            compiler_factory=_build_compiler,
        )
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc
    for text in outcome.emitted:
        click.echo(text, nl=not text.endswith("\n"))


def _build_http_client(settings: TypegenSettings) -> HttpClient:
    return RequestsHttpClient(timeout_seconds=settings.http.timeout_seconds)


def _build_compiler(_settings: TypegenSettings) -> SchemaCompiler:
    return DatamodelCodeGenerator()


def _configure_logging(verbose: bool) -> None:
    for handler in list(_PACKAGE_LOGGER.handlers):
        if handler.get_name() == _VERBOSE_HANDLER_NAME:
            _PACKAGE_LOGGER.removeHandler(handler)
    if not verbose:
        _PACKAGE_LOGGER.setLevel(logging.WARNING)
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_VERBOSE_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    _PACKAGE_LOGGER.addHandler(handler)
    _PACKAGE_LOGGER.setLevel(logging.DEBUG)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    except Exception as exc:  # pylint: disable=broad-exception-caught
        click.echo(f"{type(exc).__name__}: {exc}", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
