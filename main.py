"""
ISO Transaction Validator - Batch Runner

This script:
1. Resolves the records file (CLI argument, RECORDS_FILE, or config/)
2. Loads transaction records from YAML
3. Validates each record and saves the processable ones
4. Logs an execution summary

Usage:
    python main.py [path/to/records.yaml]

Exits with status 1 if the file cannot be loaded or any record is rejected.
"""

import sys
import logging
from pathlib import Path
from typing import List, Optional

from config.settings import get_log_level, get_records_file
from iso_validator.batch import validate_batch
from iso_validator.loader import load_records, RecordLoadError
from iso_validator.validator import TransactionValidator

# Configure logging
logging.basicConfig(
    level=get_log_level(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)
logger = logging.getLogger(__name__)


def resolve_records_file(argv: List[str]) -> Path:
    """
    Pick the records file from the command line or settings.

    Args:
        argv: Command-line arguments without the program name

    Returns:
        Path to the records file

    Raises:
        FileNotFoundError: If no file is given and none is configured
    """
    if argv:
        return Path(argv[0])
    return get_records_file()


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for batch validation.

    Returns:
        Process exit code
    """
    argv = sys.argv[1:] if argv is None else argv

    logger.info("=" * 50)
    logger.info("ISO Transaction Validator - Starting")
    logger.info("=" * 50)

    try:
        records_file = resolve_records_file(argv)
        records = load_records(records_file)
    except (FileNotFoundError, RecordLoadError) as e:
        logger.error(f"Could not load records: {e}")
        return 1

    if not records:
        logger.info("No records to validate.")
        return 0

    result = validate_batch(records, TransactionValidator())

    logger.info("")
    logger.info("=" * 50)
    logger.info("EXECUTION SUMMARY")
    logger.info("=" * 50)
    logger.info(f"Records file:     {records_file}")
    logger.info(f"Total records:    {result.total}")
    logger.info(f"Saved:            {result.saved}")
    logger.info(f"Not processable:  {result.skipped}")
    logger.info(f"Rejected:         {result.failed}")
    logger.info("-" * 50)

    for index, error in result.failures:
        cause = f" ({error.cause})" if error.cause else ""
        logger.info(f"[REJECTED] Record {index}: {error}{cause}")

    logger.info("=" * 50)

    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
