"""
ArtBrowser Main Entry Point
Builds the services with dependency injection and starts the terminal browser
"""
import argparse
import logging
import signal
import sys
from pathlib import Path

from pydantic import ValidationError

from artbrowser.cli import BrowserCli
from artbrowser.config import SettingsManager
from artbrowser.core.di_container import AppContainer

logger = logging.getLogger("ArtBrowser")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="artbrowser",
        description="Browse the artwork collection page by page and select across pages.",
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to settings.yml")
    parser.add_argument("--page", type=int, default=None, help="Page to open first")
    parser.add_argument("--rows", type=int, default=None, help="Artworks per page (1-100)")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--save", action="store_true", help="Write --page/--rows to the config file and exit"
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    settings = SettingsManager(args.config)
    overrides = {}
    if args.page is not None:
        overrides["pagination.start_page"] = args.page
    if args.rows is not None:
        overrides["pagination.rows_per_page"] = args.rows
    try:
        if args.save:
            settings.update_settings(**overrides)
        else:
            settings.override(**overrides)
    except ValidationError as e:
        print(f"Invalid option: {e}", file=sys.stderr)
        return 2

    if args.save:
        print(f"Saved settings to {settings.config_path}")
        return 0

    container = AppContainer.create(settings=settings)

    def signal_handler(sig, frame):
        print("\nShutting down...")
        sys.exit(0)

    signal.signal(signal.SIGINT, signal_handler)

    logger.info("ArtBrowser starting...")
    try:
        cli = BrowserCli(container.session, loader=container.page_loader)
        return cli.run()
    finally:
        container.close()


if __name__ == "__main__":
    sys.exit(main())
