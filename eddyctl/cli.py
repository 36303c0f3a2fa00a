"""Typer CLI entrypoint."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import typer

from eddyctl.api import Client
from eddyctl.core.config import load_config
from eddyctl.core.errors import DecodeError, EddyctlError
from eddyctl.core.model import BeaconObservation, EmptyFrame, Frame, TelemetryFrame, UrlFrame

app = typer.Typer(help="Decode Eddystone BLE beacon advertisement frames")


@dataclass(frozen=True)
class CliOptions:
    config_path: Path | None = None
    verbose: bool = False


@app.callback()
def main(
    ctx: typer.Context,
    config: Path | None = typer.Option(None, "--config", help="Config file to use instead of the user config"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    ctx.obj = CliOptions(config_path=config, verbose=verbose)


def _build_client(ctx: typer.Context) -> Client:
    options = ctx.obj if isinstance(ctx.obj, CliOptions) else CliOptions()
    loaded = load_config(options.config_path)
    level = logging.DEBUG if options.verbose else loaded.config.log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    return Client(loaded=loaded)


def describe_frame(frame: Frame) -> str:
    if isinstance(frame, BeaconObservation):
        text = (
            f"{frame.beacon_type.name} beacon id={frame.identifier_hex} "
            f"tx_power={frame.transmit_power} rssi={frame.signal_strength}"
        )
        if frame.distance is not None:
            text += f" proximity={frame.distance:.4f}"
        return text
    if isinstance(frame, UrlFrame):
        return f"URL {frame.url} tx_power={frame.transmit_power}"
    if isinstance(frame, TelemetryFrame):
        return f"TLM payload={frame.payload.hex() or '<none>'}"
    if isinstance(frame, EmptyFrame):
        return "EMPTY"
    raise TypeError(f"Unsupported frame {frame!r}")


@app.command("classify")
def classify_frame(ctx: typer.Context, data: str = typer.Argument(..., help="Service data as hex")) -> None:
    """Print the frame type of an Eddystone service-data buffer."""
    try:
        client = _build_client(ctx)
        typer.echo(client.classify(data).name)
    except EddyctlError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from None


@app.command("decode")
def decode_frame(
    ctx: typer.Context,
    data: str = typer.Argument(..., help="Service data as hex"),
    rssi: int = typer.Option(0, "--rssi", help="Received signal strength in dBm"),
) -> None:
    """Decode a single Eddystone service-data buffer."""
    try:
        client = _build_client(ctx)
        result = client.decode(data, rssi)
    except EddyctlError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from None

    if isinstance(result, DecodeError):
        typer.echo(f"Error: {type(result).__name__}: {result}", err=True)
        raise typer.Exit(code=1)
    typer.echo(describe_frame(result))


@app.command("encode-url")
def encode_url(
    ctx: typer.Context,
    url: str,
    tx_power: int = typer.Option(0, "--tx-power", help="Calibrated power at 1 m in dBm"),
) -> None:
    """Print the Eddystone-URL frame for URL as hex."""
    try:
        client = _build_client(ctx)
        typer.echo(client.encode_url(url, tx_power=tx_power).hex())
    except EddyctlError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from None


@app.command("replay")
def replay(ctx: typer.Context, path: Path = typer.Argument(..., help="YAML capture file")) -> None:
    """Decode every advertisement recorded in a capture file."""
    try:
        client = _build_client(ctx)
        outcomes = client.replay(path)
    except EddyctlError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from None

    decoded = 0
    for outcome in outcomes:
        source = outcome.record.address or "<unknown>"
        if outcome.frame is not None:
            decoded += 1
            typer.echo(f"{source} {describe_frame(outcome.frame)}")
        else:
            typer.echo(f"Warning: {source} {outcome.frame_type.name}: {outcome.error}", err=True)
    typer.echo(f"Decoded {decoded} of {len(outcomes)} frames")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
