"""CLI adapter for ``lib_env_resolver`` built on ``lib_cli_exit_tools``.

Purpose
-------
Let operators see which variable names a key is searched under, and which one
wins in the current process environment, without writing Python code.

Contents
--------
* :data:`CLICK_CONTEXT_SETTINGS` – shared Click settings ensuring ``-h`` works.
* :func:`cli` – root command that wires global traceback handling into
  ``lib_cli_exit_tools``.
* :func:`cli_info` – prints distribution metadata for quick diagnostics.
* :func:`cli_env_prefix` – exposes :func:`lib_env_resolver.core.default_env_prefix`.
* :func:`cli_candidates` – prints the six candidate names for a key.
* :func:`cli_get` – resolves a key against the process environment.
* :func:`cli_explain` – prints the search path and the winning candidate as JSON.
* :func:`main` – entry point used by ``console_scripts`` registration.

System Role
-----------
Outermost layer. It builds resolvers through
:func:`lib_env_resolver.core.from_process_env` and lets :class:`MissingKey`
propagate so ``lib_cli_exit_tools`` renders it and picks the exit code.
"""

from __future__ import annotations

import json
import sys
from importlib import metadata
from typing import Any, Callable, Final, Optional, Sequence

import lib_cli_exit_tools
import rich_click as click

from .core import DEFAULT_TARGET_VARIABLE, MissingKey, Resolver, from_process_env
from .core import default_env_prefix as _default_env_prefix
from .observability import bind_trace_id, log_error, log_info

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
_TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000


def _resolve_version() -> str:
    """Return the installed package version, or ``"0.0.0"`` for source checkouts."""

    try:
        return metadata.version("lib_env_resolver")
    except metadata.PackageNotFoundError:
        return "0.0.0"


def _resolver_options(command: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the options shared by every resolving command."""

    decorators = (
        click.option("--prefix", default="", show_default=True, help="Outermost key prefix (e.g. organisation)"),
        click.option("--namespace", default="", show_default=True, help="Namespace segment(s), '.' or '_' separated"),
        click.option(
            "--target",
            default=None,
            help="Deployment target; read from --target-variable when omitted",
        ),
        click.option(
            "--target-variable",
            default=DEFAULT_TARGET_VARIABLE,
            show_default=True,
            help="Environment variable that selects the deployment target",
        ),
    )
    for decorator in reversed(decorators):
        command = decorator(command)
    return command


@click.group(
    help="Layered environment key resolver",
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=False,
)
@click.version_option(
    version=_resolve_version(),
    prog_name="lib_env_resolver",
    message="lib_env_resolver version %(version)s",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool) -> None:
    """Root command configuring traceback handling for all subcommands.

    Side Effects
        Mutates ``lib_cli_exit_tools.config.traceback`` and
        ``lib_cli_exit_tools.config.traceback_force_color``.
    """

    ctx.ensure_object(dict)
    ctx.obj["traceback"] = traceback
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print basic distribution metadata so users can confirm installation."""

    try:
        meta = metadata.metadata("lib_env_resolver")
    except metadata.PackageNotFoundError:
        click.echo("lib_env_resolver (metadata unavailable)")
        return
    click.echo(f"Info for {meta.get('Name', 'lib_env_resolver')}:")
    click.echo(f"  Version         : {meta.get('Version', _resolve_version())}")
    click.echo(f"  Requires-Python : {meta.get('Requires-Python', '>=3.10')}")
    summary = meta.get("Summary")
    if summary:
        click.echo(f"  Summary         : {summary}")
    for entry in meta.get_all("Project-URL") or []:
        click.echo(f"  {entry}")


@cli.command("env-prefix", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("slug")
def cli_env_prefix(slug: str) -> None:
    """Compute the canonical environment prefix for *slug*.

    Examples
    --------
    >>> from click.testing import CliRunner
    >>> runner = CliRunner()
    >>> result = runner.invoke(cli, ["env-prefix", "billing-api"])
    >>> result.output.strip()
    'BILLING_API'
    """

    click.echo(_default_env_prefix(slug))


@cli.command("candidates", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("key")
@_resolver_options
def cli_candidates(key: str, prefix: str, namespace: str, target: Optional[str], target_variable: str) -> None:
    """Print the names searched for KEY, most specific first."""

    resolver = _build_resolver(prefix, namespace, target, target_variable)
    for candidate in resolver.candidate_keys(key):
        click.echo(candidate)


@cli.command("get", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("key")
@click.option("--default", "default", default=None, help="Value printed when no candidate is set")
@_resolver_options
def cli_get(
    key: str,
    default: Optional[str],
    prefix: str,
    namespace: str,
    target: Optional[str],
    target_variable: str,
) -> None:
    """Resolve KEY against the process environment and print its value.

    Exits non-zero with the full search path when nothing is set and no
    non-empty ``--default`` was given.
    """

    resolver = _build_resolver(prefix, namespace, target, target_variable)
    try:
        value = resolver.optional(key, default)
    except MissingKey as exc:
        log_error("cli_key_missing", key=key, candidate=None, candidates=list(exc.keys))
        raise
    click.echo(value)


@cli.command("explain", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("key")
@click.option("--indent", type=int, default=None, help="Pretty-print JSON output with the provided indent size")
@_resolver_options
def cli_explain(
    key: str,
    indent: Optional[int],
    prefix: str,
    namespace: str,
    target: Optional[str],
    target_variable: str,
) -> None:
    """Print the search path for KEY and the candidate that matched as JSON.

    ``matched`` and ``value`` are ``null`` when nothing is set; the command
    still succeeds so it can be used for diagnostics.
    """

    resolver = _build_resolver(prefix, namespace, target, target_variable)
    resolution = resolver.lookup(key)
    payload = {
        "key": key,
        "target": resolver.target,
        "candidates": list(resolver.candidate_keys(key)),
        "matched": resolution.candidate if resolution else None,
        "value": resolution.value if resolution else None,
    }
    click.echo(json.dumps(payload, indent=indent, separators=(",", ":")))


def _build_resolver(prefix: str, namespace: str, target: Optional[str], target_variable: str) -> Resolver:
    """Return a process-backed resolver, overriding the target when one was given."""

    resolver = from_process_env(prefix=prefix, namespace=namespace, target_variable=target_variable)
    if target is not None:
        resolver = resolver.with_target(target)
    log_info("cli_resolver_ready", key=None, candidate=None, target=resolver.target)
    return resolver


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Execute the CLI with shared exit handling and return the exit code."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    bind_trace_id(None)
    try:
        try:
            return lib_cli_exit_tools.run_cli(
                cli,
                argv=list(argv) if argv is not None else None,
                prog_name="lib_env_resolver",
            )
        except BaseException as exc:  # noqa: BLE001 - funnel through shared printers
            lib_cli_exit_tools.print_exception_message(
                trace_back=lib_cli_exit_tools.config.traceback,
                length_limit=(
                    _TRACEBACK_VERBOSE_LIMIT if lib_cli_exit_tools.config.traceback else _TRACEBACK_SUMMARY_LIMIT
                ),
            )
            return lib_cli_exit_tools.get_system_exit_code(exc)
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


if __name__ == "__main__":  # pragma: no cover - exercised via console entry point
    raise SystemExit(main(sys.argv[1:]))
