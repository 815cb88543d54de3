"""
smarthome-bridge CLI — `smarthome-bridge` command.

Commands:
  smarthome-bridge invoke <event.json>     Replay a directive against the backend
  smarthome-bridge discover <token>        Run discovery for an access token
  smarthome-bridge capabilities [type]     Show the device capability table
"""

import asyncio
import logging
from typing import Optional

try:
    import click
    from rich.console import Console
except ImportError:
    raise SystemExit("CLI requires extras: pip install smarthome-bridge[cli]")

from smarthome_bridge import __version__
from smarthome_bridge.client import AsyncBridge
from smarthome_bridge.config import ENV_HOST, ENV_PORT, ENV_VERBOSE, BridgeConfig
from smarthome_bridge.handler import configure_logging

console = Console()


def _get_bridge(ctx: click.Context) -> AsyncBridge:
    opts = ctx.obj or {}
    if not opts.get("host") or not opts.get("port"):
        console.print(f"[red]Remote backend not configured. Pass --host/--port or set {ENV_HOST}/{ENV_PORT}.[/red]")
        raise SystemExit(1)
    try:
        config = BridgeConfig(
            host=opts["host"],
            port=opts["port"],
            verbose=opts.get("verbose", False),
            scheme=opts.get("scheme", "http"),
            control_method=opts.get("method", "PUT"),
        )
    except ValueError as e:
        console.print(f"[red]Invalid backend configuration: {e}[/red]")
        raise SystemExit(1)
    return AsyncBridge(config)


def _run(coro):
    return asyncio.run(coro)


@click.group()
@click.version_option(__version__)
@click.option("--host", envvar=ENV_HOST, default=None, help="Remote backend host")
@click.option("--port", envvar=ENV_PORT, type=int, default=None, help="Remote backend port")
@click.option("--scheme", type=click.Choice(["http", "https"]), default="http")
@click.option("--method", type=click.Choice(["PUT", "POST"]), default="PUT", help="Method for control calls")
@click.option("-v", "--verbose", envvar=ENV_VERBOSE, is_flag=True, help="Log requests and envelopes")
@click.pass_context
def main(ctx: click.Context, host: Optional[str], port: Optional[int], scheme: str, method: str, verbose: bool):
    """smarthome-bridge CLI — drive the directive bridge by hand."""
    if verbose:
        logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    configure_logging(verbose)
    ctx.obj = {"host": host, "port": port, "scheme": scheme, "method": method, "verbose": verbose}


# Register subcommands from separate modules
from smarthome_bridge.cli.directives import capabilities_cmd, discover_cmd, invoke_cmd

main.add_command(invoke_cmd)
main.add_command(discover_cmd)
main.add_command(capabilities_cmd)


if __name__ == "__main__":
    main()
