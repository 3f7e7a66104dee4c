"""Command-line access to the PTV timetable API."""

import argparse
import asyncio
import json
import logging
import sys
from datetime import datetime
from typing import Any

import aiohttp

from ptv_timetable.adapters.config import AppConfig
from ptv_timetable.adapters.ptv_api import PtvHttpClient, PtvTimetableClient, sign_request
from ptv_timetable.domain.exceptions import PtvError
from ptv_timetable.domain.models import TransportMode
from ptv_timetable.domain.ports import TimetableClient

logger = logging.getLogger(__name__)


def _parse_mode(value: str) -> TransportMode:
    """argparse type for transport modes given by name or code."""
    try:
        return TransportMode.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _parse_datetime(value: str) -> datetime:
    """argparse type for ISO-8601 timestamps."""
    try:
        return datetime.fromisoformat(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Invalid ISO-8601 date/time: {value!r}") from e


def _parse_param(value: str) -> tuple[str, str]:
    """argparse type for KEY=VALUE query parameters."""
    key, sep, param_value = value.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"Expected KEY=VALUE, got {value!r}")
    return key, param_value


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one sub-command per API operation."""
    modes = ", ".join(mode.label for mode in TransportMode)
    parser = argparse.ArgumentParser(
        prog="ptv-timetable",
        description="Query the PTV timetable API. Results are printed as JSON.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Credentials are read from PTV_DEVELOPER_ID and PTV_SECRET_KEY (or a .env file).
Modes may be given by name ({modes}) or by code.

Examples:
  # Stops near Southern Cross
  ptv-timetable nearby -37.8239 144.9462

  # Next departures at stop 1104 for any line and direction
  ptv-timetable departures train 1104 --limit 1

  # All metro train disruptions
  ptv-timetable disruptions metro-train
        """,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    subparsers.add_parser("healthcheck", help="Run the API health check")

    nearby = subparsers.add_parser("nearby", help="Stops nearest to a coordinate")
    nearby.add_argument("latitude", type=float)
    nearby.add_argument("longitude", type=float)

    poi = subparsers.add_parser("poi", help="Stops and ticket outlets within a bounding box")
    poi.add_argument("poi", help="Comma-separated POI codes (e.g. 1,2 or 100)")
    poi.add_argument("lat1", type=float, help="Latitude of the top left corner")
    poi.add_argument("long1", type=float, help="Longitude of the top left corner")
    poi.add_argument("lat2", type=float, help="Latitude of the bottom right corner")
    poi.add_argument("long2", type=float, help="Longitude of the bottom right corner")
    poi.add_argument("griddepth", type=int, help="Number of cell blocks per cluster")
    poi.add_argument("limit", type=int, help="Maximum number of POIs to return")

    search = subparsers.add_parser("search", help="Stops and lines matching search terms")
    search.add_argument("query", help="Search terms, may include suburb and mode")

    departures = subparsers.add_parser(
        "departures", help="Next departures at a stop for any line and direction"
    )
    departures.add_argument("mode", type=_parse_mode)
    departures.add_argument("stop", type=int)
    departures.add_argument("--limit", type=int, default=5)

    specific = subparsers.add_parser(
        "specific-departures", help="Next departures at a stop for one line and direction"
    )
    specific.add_argument("mode", type=_parse_mode)
    specific.add_argument("line", type=int)
    specific.add_argument("stop", type=int)
    specific.add_argument("direction", type=int)
    specific.add_argument("--limit", type=int, default=5)
    specific.add_argument("--for-utc", type=_parse_datetime, help="Start date/time (ISO-8601)")

    pattern = subparsers.add_parser("stopping-pattern", help="Stopping pattern of a run")
    pattern.add_argument("mode", type=_parse_mode)
    pattern.add_argument("run", type=int)
    pattern.add_argument("stop", type=int, help="Included in the request; ignored by the API")
    pattern.add_argument("--for-utc", type=_parse_datetime, help="Start date/time (ISO-8601)")

    line_stops = subparsers.add_parser("line-stops", help="All stops on a line")
    line_stops.add_argument("mode", type=_parse_mode)
    line_stops.add_argument("line", type=int)

    lines = subparsers.add_parser("lines", help="All lines of a mode")
    lines.add_argument("mode", type=_parse_mode)
    lines.add_argument("--name", help="Only lines whose name contains this text")

    facilities = subparsers.add_parser(
        "facilities",
        help="Facilities at a train or V/Line stop",
        description="The three detail flags must be given together or not at all.",
    )
    facilities.add_argument("stop", type=int)
    facilities.add_argument("mode", type=_parse_mode)
    for flag in ("location", "amenity", "accessibility"):
        facilities.add_argument(f"--{flag}", action=argparse.BooleanOptionalAction, default=None)

    disruptions = subparsers.add_parser("disruptions", help="Planned and unplanned disruptions")
    disruptions.add_argument("modes", nargs="+", help="Disruption modes (e.g. metro-train)")

    sign = subparsers.add_parser("sign", help="Print a signed request URL without sending it")
    sign.add_argument("path", help="Request path below /v2 (e.g. /healthcheck)")
    sign.add_argument("params", nargs="*", type=_parse_param, help="Query parameters KEY=VALUE")

    return parser


async def run_command(client: TimetableClient, args: argparse.Namespace) -> Any:
    """Dispatch a parsed command to the matching client operation."""
    if args.command == "healthcheck":
        return await client.healthcheck()
    if args.command == "nearby":
        return await client.stops_nearby(args.latitude, args.longitude)
    if args.command == "poi":
        return await client.transport_pois_by_map(
            args.poi, args.lat1, args.long1, args.lat2, args.long2, args.griddepth, args.limit
        )
    if args.command == "search":
        return await client.search(args.query)
    if args.command == "departures":
        return await client.broad_next_departures(args.mode, args.stop, args.limit)
    if args.command == "specific-departures":
        return await client.specific_next_departures(
            args.mode, args.line, args.stop, args.direction, args.limit, args.for_utc
        )
    if args.command == "stopping-pattern":
        return await client.stopping_pattern(args.mode, args.run, args.stop, args.for_utc)
    if args.command == "line-stops":
        return await client.stops_on_a_line(args.mode, args.line)
    if args.command == "lines":
        return await client.lines_by_mode(args.mode, args.name)
    if args.command == "facilities":
        return await client.stop_facilities(
            args.stop, args.mode, args.location, args.amenity, args.accessibility
        )
    if args.command == "disruptions":
        return await client.disruptions(args.modes)
    raise ValueError(f"Unknown command: {args.command}")


def signed_url(config: AppConfig, path: str, params: list[tuple[str, str]]) -> str:
    """Return the signed URL for a request without sending it."""
    credentials = config.require_credentials()
    http_client = PtvHttpClient(credentials, base_url=config.base_url)
    return str(http_client.build_url(sign_request(credentials, path, dict(params))))


async def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    try:
        config = AppConfig()
        config.load_config_file()

        if args.command == "sign":
            print(signed_url(config, args.path, args.params))
            return

        timeout = aiohttp.ClientTimeout(total=config.timeout_seconds)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            client = PtvTimetableClient.from_config(config, session=session)
            result = await run_command(client, args)
        print(json.dumps(result, indent=2, ensure_ascii=False))

    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)
    except (PtvError, ValueError, FileNotFoundError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
