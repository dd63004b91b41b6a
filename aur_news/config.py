"""Configuration loading for aur_news."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
from xml.etree import ElementTree as ET

from .comments import DEFAULT_AUR_URL
from .news import DEFAULT_NEWS_URL
from .transport import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


@dataclass
class LoggingConfig:
    level: str = "INFO"
    file: Optional[str] = None


@dataclass
class AppConfig:
    news_url: str = DEFAULT_NEWS_URL
    aur_url: str = DEFAULT_AUR_URL
    timeout: float = DEFAULT_TIMEOUT
    limit: int = 5
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _resolve_path(base_path: Path, target_path: str) -> str:
    """Resolve a path relative to the base config file if it's not absolute."""
    target = Path(target_path)
    if target.is_absolute():
        return str(target)
    return str((base_path.parent / target).resolve())


def _parse_number(root: ET.Element, tag: str, default, kind):
    value = root.findtext(tag)
    if value is None or not value.strip():
        return default
    try:
        return kind(value.strip())
    except ValueError:
        raise ValueError(f"Config value <{tag}> is not a valid number: {value!r}") from None


def parse_app_config(path: str) -> AppConfig:
    """Parse the application configuration XML."""
    config_path = Path(path).resolve()
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    logger.info("Loading application configuration from %s", config_path)
    try:
        root = ET.parse(config_path).getroot()
    except ET.ParseError as exc:
        raise ValueError(f"Config file is not valid XML: {exc}") from exc

    defaults = AppConfig()
    news_url = (root.findtext("news-url") or "").strip() or defaults.news_url
    aur_url = (root.findtext("aur-url") or "").strip() or defaults.aur_url
    timeout = _parse_number(root, "timeout", defaults.timeout, float)
    limit = _parse_number(root, "limit", defaults.limit, int)

    # Logging
    log_node = root.find("logging")
    logging_config = LoggingConfig()
    if log_node is not None:
        logging_config.level = (log_node.findtext("level") or "INFO").strip()
        log_file = log_node.findtext("file")
        if log_file and log_file.strip():
            logging_config.file = _resolve_path(config_path, log_file.strip())

    return AppConfig(
        news_url=news_url,
        aur_url=aur_url,
        timeout=timeout,
        limit=limit,
        logging=logging_config,
    )
