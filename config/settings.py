"""
Runtime settings for the transaction validator.

Settings come from environment variables. A local .env file is loaded
first if it exists (for local development).

Variables:
    LOG_LEVEL: Logging level name (default: INFO)
    RECORDS_FILE: Path to a YAML records file (optional)
"""

import os
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "INFO"


def get_log_level() -> int:
    """
    Resolve LOG_LEVEL to a logging level number.

    Unknown level names fall back to INFO.
    """
    name = os.environ.get('LOG_LEVEL', DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        logger.warning(f"Unknown LOG_LEVEL '{name}', using {DEFAULT_LOG_LEVEL}")
        return logging.INFO
    return level


def get_records_file() -> Path:
    """
    Determine which records file to use.

    Priority:
    1. RECORDS_FILE environment variable
    2. config/records.yaml (user's own records, gitignored)
    3. config/records.yaml.example (sample records)

    Returns:
        Path to the records file

    Raises:
        FileNotFoundError: If no records file is configured or found
    """
    env_path = os.environ.get('RECORDS_FILE')
    if env_path:
        return Path(env_path)

    config_dir = Path(__file__).parent

    custom_records = config_dir / "records.yaml"
    if custom_records.exists():
        return custom_records

    example_records = config_dir / "records.yaml.example"
    if example_records.exists():
        logger.warning(
            "Using records.yaml.example - copy it to records.yaml to validate your own records"
        )
        return example_records

    raise FileNotFoundError(
        "No records file found.\n"
        "Set RECORDS_FILE or copy config/records.yaml.example to config/records.yaml"
    )
