"""
CLI interface for callwrap.

Provides commands to describe, inspect, and call any importable callable.

Callables are named by reference ("package.module:Class.method") and
wrapped with callwrap.wrap() before use, so the names printed here are the
same canonical names the library produces.
"""


import json
import logging

import click
import yaml

from callwrap import __version__
from callwrap.errors import CallwrapError, InvalidCallable
from callwrap.refs import Ref
from callwrap.resolve import resolve
from callwrap.utils import print_error, print_success, setup_logging
from callwrap.wrapper import WrappedCallable, wrap


logger = logging.getLogger(__name__)


def _wrap_reference(reference: str) -> WrappedCallable:
    """Resolve and wrap a reference, exiting with status 1 if invalid."""
    try:
        return wrap(resolve(reference))
    except InvalidCallable as e:
        print_error(str(e))
        raise SystemExit(1)


def _parse_argument(raw: str):
    """Parse a command line argument as a YAML scalar (4 -> int, true -> bool)."""
    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError:
        return raw


@click.group()
@click.version_option(version=__version__, prog_name="callwrap")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, verbose: bool):
    """
    callwrap - Uniform wrappers for Python callables.

    Describe, inspect and call functions, methods and invokable objects
    by reference.
    """
    from callwrap.config import load_config_or_default

    ctx.ensure_object(dict)
    try:
        config = load_config_or_default()
    except CallwrapError as e:
        print_error(f"Invalid configuration: {e}")
        raise SystemExit(1)

    ctx.obj["config"] = config
    setup_logging(
        log_level="DEBUG" if verbose else config.log_level,
        log_format=config.log_format,
        log_file=config.get_log_file_path(),
    )


@main.command("describe")
@click.argument("reference")
def describe_cmd(reference: str):
    """Print the canonical name of a callable."""
    wrapped = _wrap_reference(reference)
    click.echo(wrapped.to_text())


@main.command("signature")
@click.argument("reference")
def signature_cmd(reference: str):
    """Show the name, signature and reference parameters of a callable."""
    wrapped = _wrap_reference(reference)

    click.echo(f"Name: {wrapped}")
    if wrapped.signature is None:
        click.echo("Signature: (unavailable)")
    else:
        click.echo(f"Signature: {wrapped.signature}")
    if wrapped.reference_parameters:
        click.echo(f"Reference parameters: {', '.join(wrapped.reference_parameters)}")
    else:
        click.echo("Reference parameters: none")


@main.command("call")
@click.argument("reference")
@click.argument("args", nargs=-1)
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
def call_cmd(reference: str, args: tuple[str, ...], as_json: bool):
    """
    Call a callable with positional ARGS and print the result.

    Each ARG is parsed as YAML, so 4 is an int, true a bool and
    "[1, 2]" a list. Arguments landing on Ref parameters are passed in
    Ref slots and their final values are printed after the call.
    """
    wrapped = _wrap_reference(reference)
    values = [_parse_argument(raw) for raw in args]

    slots: dict[str, Ref] = {}
    if wrapped.signature is not None and wrapped.reference_parameters:
        positional = [
            p.name for p in wrapped.signature.parameters.values()
            if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
        ]
        for index, name in enumerate(positional[:len(values)]):
            if name in wrapped.reference_parameters:
                slots[name] = Ref(values[index])
                values[index] = slots[name]

    try:
        result = wrapped.invoke(values)
    except Exception as e:
        logger.debug(f"{wrapped} raised", exc_info=True, extra={"callable_name": wrapped.display_name})
        print_error(f"{wrapped} raised {type(e).__name__}: {e}")
        raise SystemExit(1)

    if as_json:
        payload = {"callable": str(wrapped), "result": result}
        if slots:
            payload["references"] = {name: slot.value for name, slot in slots.items()}
        click.echo(json.dumps(payload, default=repr))
        return

    click.echo(repr(result))
    for name, slot in slots.items():
        click.echo(f"{name} = {slot.value!r}")


@main.command("init")
@click.option("--force", is_flag=True, help="Overwrite existing configuration")
def init(force: bool):
    """Initialize callwrap configuration."""
    from callwrap.config import CallwrapConfig, get_callwrap_home

    home = get_callwrap_home()
    if not home.exists():
        home.mkdir(parents=True)

    cfg_path = home / "config.yaml"
    if cfg_path.exists() and not force:
        click.echo(f"Config already exists at {cfg_path}. Use --force to overwrite.", err=True)
        raise SystemExit(1)

    default_cfg = CallwrapConfig(env_file=str(home / ".env")).to_dict()
    cfg_path.write_text(yaml.safe_dump(default_cfg, sort_keys=False))

    env_path = home / ".env"
    if not env_path.exists():
        env_path.write_text("# Environment loaded before callables are resolved\n")

    print_success(f"Initialized callwrap config at {cfg_path}")


if __name__ == "__main__":
    main()
