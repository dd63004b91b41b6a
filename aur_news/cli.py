"""Command-line interface for aur_news."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from .comments import fetch_comments
from .config import AppConfig, parse_app_config
from .errors import AurError
from .news import fetch_news
from .renderers import build_comments_text, build_news_rich, build_news_text

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Read Arch Linux news and AUR package comments."
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to an optional configuration XML file.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (e.g. DEBUG, INFO, WARNING). Overrides config.",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Optional path to a log file. Overrides config.",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="HTTP timeout in seconds. Overrides config.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    news_parser = subparsers.add_parser("news", help="Show the latest news entries.")
    news_parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Number of entries to show. Overrides config.",
    )
    news_parser.add_argument("--url", default=None, help="News feed URL.")
    news_parser.add_argument(
        "--color",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Highlight code spans and links.",
    )

    comments_parser = subparsers.add_parser(
        "comments", help="Show the comments on an AUR package."
    )
    comments_parser.add_argument("package", help="AUR package name.")
    comments_parser.add_argument("--aur-url", default=None, help="AUR base URL.")

    return parser


def configure_logging(level_name: str, log_file: Optional[str] = None) -> None:
    """Initialise logging according to options."""
    log_level = getattr(logging, level_name.upper(), None)
    if not isinstance(log_level, int):
        raise ValueError(f"Unsupported log level: {level_name}")

    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    root_logger.setLevel(log_level)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    if log_file:
        log_path = Path(log_file)
        if log_path.parent and not log_path.parent.exists():
            log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
        logger.debug(
            "Logger initialised with level %s and file output to %s",
            level_name.upper(),
            log_path,
        )
    else:
        logger.debug(
            "Logger initialised with console output at level %s", level_name.upper()
        )


def _run_news(args: argparse.Namespace, config: AppConfig, timeout: float) -> None:
    limit = args.limit if args.limit is not None else config.limit
    if limit <= 0:
        raise ValueError("--limit must be positive.")

    entries = fetch_news(args.url or config.news_url, timeout=timeout)[:limit]
    if args.color:
        Console(highlight=False).print(build_news_rich(entries))
    else:
        print(build_news_text(entries), end="")


def _run_comments(args: argparse.Namespace, config: AppConfig, timeout: float) -> None:
    comments = fetch_comments(
        args.package, aur_url=args.aur_url or config.aur_url, timeout=timeout
    )
    if not comments:
        logger.info("No comments found for '%s'", args.package)
        return
    print(build_comments_text(comments), end="")


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = parse_app_config(args.config) if args.config else AppConfig()

        # CLI overrides config
        log_level = args.log_level or config.logging.level
        log_file = args.log_file or config.logging.file
        configure_logging(log_level, log_file)

        timeout = args.timeout if args.timeout is not None else config.timeout
        if timeout <= 0:
            raise ValueError("--timeout must be positive.")

        if args.command == "news":
            _run_news(args, config, timeout)
        else:
            _run_comments(args, config, timeout)
    except ValueError as exc:
        parser.error(str(exc))
    except (AurError, FileNotFoundError) as exc:
        logger.error("%s", exc)
        return 1
    except Exception:  # noqa: BLE001
        logger.exception("Unexpected error during execution.")
        return 1

    return 0
