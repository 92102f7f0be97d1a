"""prnotify entry point.

Runs the webhook server that turns GitHub pull request events into Slack
direct messages. Usage: prnotify [--config PATH] [--check].
"""

import argparse
import logging
import sys
from pathlib import Path

from prnotify.config import AppConfig, load_config
from prnotify.logging import PRNotifyLogging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(
        prog="prnotify",
        description="prnotify - GitHub pull request events to Slack direct messages",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("config.yaml"),
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only load and validate config, then exit",
    )
    return parser.parse_args(argv)


def run(config: AppConfig) -> None:
    """Set up logging and run the webhook server."""
    from prnotify.webhook.server import run_webhook_server

    PRNotifyLogging(config.logging).setup()
    log = logging.getLogger("prnotify.main")
    if not config.webhook.enabled:
        log.warning("Webhook disabled in config; nothing to do.")
        return
    log.info("prnotify started | users=%d | slack token=%s", len(config.users), bool(config.slack_token_resolved))
    run_webhook_server(config)


def main(argv: list[str] | None = None) -> int:
    """Entry point for prnotify."""
    args = parse_args(argv)
    config_path = args.config
    if not config_path.is_file() and config_path == Path("config.yaml"):
        if Path("config.example.yaml").is_file():
            config_path = Path("config.example.yaml")
            logging.basicConfig(level=logging.INFO)
            logging.getLogger("prnotify.main").warning("config.yaml not found, using config.example.yaml")

    try:
        config = load_config(config_path)
    except ValueError as e:
        logging.basicConfig(level=logging.INFO)
        logging.getLogger("prnotify.main").error("Invalid config %s: %s", config_path, e)
        return 1

    if args.check:
        print("Config OK:", len(config.users), "user(s),", "webhook", config.webhook.path)
        return 0

    try:
        run(config)
    except KeyboardInterrupt:
        return 0
    except Exception as e:
        logging.getLogger("prnotify.main").exception("Fatal error: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
