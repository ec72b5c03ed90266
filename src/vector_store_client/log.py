# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the terms described in the LICENSE file in
# the root directory of this source tree.

import logging  # allow-direct-logging
import os

from rich.console import Console
from rich.logging import RichHandler

# Default log level
DEFAULT_LOG_LEVEL = logging.WARNING

# Predefined categories
CATEGORIES = [
    "client",
    "client::dispatcher",
    "client::pagination",
    "client::http",
]
UNCATEGORIZED = "uncategorized"

ROOT_LOGGER_NAME = "vector_store_client"

# Initialize category levels with default level
_category_levels: dict[str, int] = dict.fromkeys([*CATEGORIES, UNCATEGORIZED], DEFAULT_LOG_LEVEL)
_handler_installed = False


def parse_environment_config(env_config: str) -> dict[str, int]:
    """
    Parse the VECTOR_STORE_CLIENT_LOGGING environment variable and return a dictionary of category log levels.

    Parameters:
        env_config (str): The value of the VECTOR_STORE_CLIENT_LOGGING environment variable,
            e.g. "client=debug;all=warning".

    Returns:
        Dict[str, int]: A dictionary mapping categories to their log levels.
    """
    category_levels = {}
    for pair in env_config.split(";"):
        if not pair.strip():
            continue

        try:
            category, level = pair.split("=", 1)
            category = category.strip().lower()
            level = level.strip().upper()

            level_value = logging._nameToLevel.get(level)
            if level_value is None:
                logging.warning(
                    f"Unknown log level '{level}' for category '{category}'. Falling back to default 'WARNING'."
                )
                continue

            if category == "all":
                for cat in _category_levels:
                    category_levels[cat] = level_value
            else:
                category_levels[category] = level_value
        except ValueError:
            logging.warning(f"Invalid logging configuration: '{pair}'. Expected format: 'category=level'.")

    return category_levels


def _category_level(category: str) -> int:
    # "client::dispatcher" falls back to "client" when it has no explicit level
    while category:
        if category in _category_levels:
            return _category_levels[category]
        if "::" not in category:
            break
        category = category.rsplit("::", 1)[0]
    return _category_levels[UNCATEGORIZED]


def setup_logging(category_levels: dict[str, int] | None = None) -> None:
    """Install the console handler on the package root logger and apply category levels."""
    global _handler_installed

    if category_levels:
        _category_levels.update(category_levels)

    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not _handler_installed:
        handler = RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            show_path=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("[%(category)s] %(message)s"))
        root.addHandler(handler)
        root.propagate = False
        _handler_installed = True

    # the root logger stays permissive; levels are enforced per category logger
    root.setLevel(logging.DEBUG)


def get_logger(name: str, category: str = UNCATEGORIZED) -> logging.LoggerAdapter:
    """
    Returns a logger for `name` whose level follows the configured level of `category`.

    Parameters:
        name (str): The name of the logger (e.g. the module's __name__).
        category (str): A category such as "client::dispatcher".

    Returns:
        logging.LoggerAdapter: Configured logger that tags every record with its category.
    """
    logger = logging.getLogger(name)
    logger.setLevel(_category_level(category))
    return logging.LoggerAdapter(logger, {"category": category})


_env_config = os.environ.get("VECTOR_STORE_CLIENT_LOGGING", "")
setup_logging(parse_environment_config(_env_config) if _env_config else None)
