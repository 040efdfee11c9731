"""Command-line entry points for the adapter processes."""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
from collections.abc import Mapping, Sequence

from toolgate import __version__
from toolgate.adapters import build_server
from toolgate.config import AdapterName, AdapterSettings, ConfigurationError, load_settings
from toolgate.observability import configure_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="toolgate",
        description="Expose a third-party web API as MCP tools over stdio.",
    )
    parser.add_argument(
        "adapter",
        choices=[adapter.value for adapter in AdapterName],
        help="Which backing service to expose.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override TOOLGATE_LOG_LEVEL (DEBUG, INFO, WARNING, ERROR).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(list(argv) if argv is not None else None)


async def _serve(settings: AdapterSettings) -> None:
    server = build_server(settings)
    server.install_signal_handlers()
    await server.serve()


def run_adapter(
    adapter: AdapterName | str,
    *,
    environ: Mapping[str, str] | None = None,
    log_level: str | None = None,
) -> int:
    """
    Load settings, then serve until the channel closes.

    Returns:
        Process exit status: 0 on clean shutdown, 1 on startup failure
        or an unhandled fault
    """
    env = dict(os.environ if environ is None else environ)
    if log_level:
        env["TOOLGATE_LOG_LEVEL"] = log_level

    # Settings may be invalid, so log at INFO until they are loaded
    configure_logging("INFO")

    try:
        settings = load_settings(adapter, env)
    except ConfigurationError as e:
        logger.error(f"[toolgate] {e}")
        return EXIT_FAILURE

    configure_logging(settings.log_level, json_format=settings.log_format == "json")

    try:
        asyncio.run(_serve(settings))
    except KeyboardInterrupt:
        logger.info("[toolgate] interrupted")
    except Exception as e:
        logger.error(f"[toolgate] server error: {e}", exc_info=True)
        return EXIT_FAILURE

    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    return run_adapter(args.adapter, log_level=args.log_level)


def search_main() -> int:
    return run_adapter(AdapterName.SEARCH)


def github_main() -> int:
    return run_adapter(AdapterName.GITHUB)


def gitlab_main() -> int:
    return run_adapter(AdapterName.GITLAB)
