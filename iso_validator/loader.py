"""
YAML loader for transaction records.

Accepted file shapes:

    # a plain list
    - bit02: "4111111111111111"
      bit04: "02"

    # or a mapping with a records key
    records:
      - bit02: "4111111111111111"
        bit04: "02"

Bit values must be quoted strings. An unquoted 02 is read by YAML as
the integer 2 and is rejected.
"""

import logging
from pathlib import Path
from typing import List, Union

import yaml

from .models import ISOModel

logger = logging.getLogger(__name__)


class RecordLoadError(Exception):
    """Error raised when a records file cannot be loaded."""
    pass


def load_records(path: Union[str, Path]) -> List[ISOModel]:
    """
    Load transaction records from a YAML file.

    Args:
        path: Path to the YAML file

    Returns:
        List of ISOModel records in file order (empty for an empty file)

    Raises:
        RecordLoadError: If the file is missing, is not valid YAML,
            has the wrong shape, or contains an invalid record
    """
    path = Path(path)

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise RecordLoadError(f"Records file not found: {path}")
    except (OSError, UnicodeDecodeError) as e:
        raise RecordLoadError(f"Cannot read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise RecordLoadError(f"Invalid YAML in {path}: {e}")

    if data is None:
        logger.warning(f"Records file is empty: {path}")
        return []

    if isinstance(data, dict):
        if 'records' not in data:
            raise RecordLoadError(f"Missing 'records' key in {path}")
        data = data['records'] or []

    if not isinstance(data, list):
        raise RecordLoadError(
            f"Expected a list of records in {path}, got {type(data).__name__}"
        )

    records = []
    for index, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise RecordLoadError(
                f"Record {index} in {path} is not a mapping: {entry!r}"
            )
        try:
            records.append(ISOModel.from_dict(entry))
        except ValueError as e:
            raise RecordLoadError(f"Record {index} in {path}: {e}")

    logger.info(f"Loaded {len(records)} record(s) from {path}")
    return records
