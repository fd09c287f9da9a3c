"""
Batch validation of transaction records.

Runs every record through a TransactionValidator and collects the
outcome instead of stopping at the first rejection.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from .exceptions import InvalidArgumentError
from .models import ISOModel
from .validator import TransactionValidator

logger = logging.getLogger(__name__)


@dataclass
class BatchResult:
    """
    Outcome of validating a batch of records.

    Attributes:
        total: Number of records validated
        saved: Records that passed validation and were saved
        skipped: Records that passed validation but were not processable
        failures: (index, error) for every rejected record

    Example:
        >>> result = validate_batch(records)
        >>> if not result.success:
        ...     for index, error in result.failures:
        ...         print(f"Record {index}: {error}")
    """
    total: int = 0
    saved: int = 0
    skipped: int = 0
    failures: List[Tuple[int, InvalidArgumentError]] = field(default_factory=list)

    @property
    def failed(self) -> int:
        return len(self.failures)

    @property
    def success(self) -> bool:
        """True if no record was rejected."""
        return not self.failures


def validate_batch(
    records: Iterable[ISOModel],
    validator: Optional[TransactionValidator] = None,
) -> BatchResult:
    """
    Validate each record in order.

    Args:
        records: Records to validate
        validator: Validator to use. A default one is created if omitted.

    Returns:
        BatchResult with saved/skipped counts and the rejected records

    Raises:
        Any exception that is not an InvalidArgumentError
    """
    validator = validator or TransactionValidator()
    result = BatchResult()

    for index, record in enumerate(records):
        result.total += 1
        try:
            validator.validate(record)
        except InvalidArgumentError as e:
            logger.warning(f"Record {index} rejected: {e}")
            result.failures.append((index, e))
            continue

        if validator.is_processable(record):
            result.saved += 1
        else:
            logger.info(f"Record {index} accepted but not processable, not saved")
            result.skipped += 1

    return result
