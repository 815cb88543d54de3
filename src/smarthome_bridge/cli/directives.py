"""CLI: smarthome-bridge invoke|discover|capabilities"""

import json
from typing import Any, Optional

import click
from rich.console import Console
from rich.table import Table

from smarthome_bridge.capabilities import CAPABILITY_TABLE, capabilities_for
from smarthome_bridge.models.events import ProtocolVersion

console = Console()


def _get_bridge(ctx):
    from smarthome_bridge.cli.main import _get_bridge
    return _get_bridge(ctx)


def _run(coro):
    from smarthome_bridge.cli.main import _run
    return _run(coro)


def discovery_directive(token: str, protocol: ProtocolVersion) -> dict[str, Any]:
    if protocol is ProtocolVersion.LEGACY:
        return {
            "header": {
                "namespace": "Alexa.ConnectedHome.Discovery",
                "name": "DiscoverAppliancesRequest",
                "payloadVersion": protocol.value,
            },
            "payload": {"accessToken": token},
        }
    return {
        "directive": {
            "header": {"namespace": "Alexa.Discovery", "name": "Discover", "payloadVersion": protocol.value},
            "payload": {"scope": {"type": "BearerToken", "token": token}},
        },
    }


@click.command("invoke")
@click.argument("event_file", type=click.File("r"))
@click.pass_context
def invoke_cmd(ctx: click.Context, event_file):
    """Send a directive envelope (JSON file, - for stdin) through the bridge."""
    try:
        event = json.load(event_file)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"not valid JSON: {e}", param_hint="EVENT_FILE")

    bridge = _get_bridge(ctx)

    async def _invoke():
        async with bridge:
            return await bridge.handle(event)

    click.echo(json.dumps(_run(_invoke()), indent=2))


@click.command("discover")
@click.argument("token")
@click.option("--legacy", is_flag=True, help="Use the v2 envelope shape")
@click.option("--json-output", "--json", is_flag=True)
@click.pass_context
def discover_cmd(ctx: click.Context, token: str, legacy: bool, json_output: bool):
    """Run discovery for an access token."""
    protocol = ProtocolVersion.LEGACY if legacy else ProtocolVersion.V3

    bridge = _get_bridge(ctx)

    async def _discover():
        async with bridge:
            return await bridge.handle(discovery_directive(token, protocol))

    if json_output:
        click.echo(json.dumps(_run(_discover()), indent=2))
        return
    with console.status("Discovering..."):
        response = _run(_discover())

    if legacy:
        rows = [
            (a["applianceId"], a["friendlyName"], a["manufacturerName"], ", ".join(a["actions"]))
            for a in response["payload"]["discoveredAppliances"]
        ]
    else:
        rows = [
            (e["endpointId"], e["friendlyName"], e["manufacturerName"],
             ", ".join(c["interface"] for c in e["capabilities"]))
            for e in response["event"]["payload"]["endpoints"]
        ]
    table = Table(title=f"Endpoints ({len(rows)} found)")
    table.add_column("ID", style="bold")
    table.add_column("Name")
    table.add_column("Manufacturer")
    table.add_column("Legacy actions" if legacy else "Capabilities")
    for row in rows:
        table.add_row(*row)
    console.print(table)


@click.command("capabilities")
@click.argument("device_type", required=False)
def capabilities_cmd(device_type: Optional[str]):
    """Show which interfaces each device type gets."""
    types = [device_type] if device_type else list(CAPABILITY_TABLE)
    table = Table(title="Device capabilities")
    table.add_column("Device type", style="bold")
    table.add_column("Capabilities")
    for t in types:
        caps = sorted(c.value for c in capabilities_for(t))
        table.add_row(t, ", ".join(caps) if caps else "[yellow]unsupported[/yellow]")
    console.print(table)
