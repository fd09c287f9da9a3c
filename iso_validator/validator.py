"""
Transaction validator for ISO transaction records.

This module decides whether a record is well-formed and processable,
and if so hands it to the save step.

Flow:
1. Derive flags from bit02/bit03 (see compute_flags)
2. Reject records whose identifier bits are not populated
3. Check processability (bit03, bit04, bit05, bit12)
4. Save processable records; anything that fails here is logged
   with its cause and re-raised as ProcessingError

Records that pass step 2 but are not processable are accepted without
being saved and without an error.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Protocol

from .exceptions import FieldsNotPopulatedError, ProcessingError, ValidationFailedError
from .models import ISOModel, is_valid_type_code

DISCRIMINATOR_MISSING = "01"
DISCRIMINATOR_PRESENT = "02"


class ValidationLogger(Protocol):
    """Logging interface the validator writes to (logging.Logger fits)."""

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None: ...


@dataclass(frozen=True)
class ValidationFlags:
    """
    Flags derived from a record before any gate is applied.

    Attributes:
        bit02_missing: bit02 is absent
        bit02_empty: bit02 is present with an empty value
        aux_validation_required: bit02 is empty and bit03 is absent
        validation_discriminator: "01" when bit02 is missing, else "02"
    """

    bit02_missing: bool
    bit02_empty: bool
    aux_validation_required: bool
    validation_discriminator: str

    @property
    def fields_not_populated(self) -> bool:
        """
        Presence gate.

        The second clause can never be true (the discriminator is "01"
        only when bit02 is missing) but is kept as written.
        """
        return self.bit02_missing or (
            self.bit02_empty
            and not self.aux_validation_required
            and self.validation_discriminator == DISCRIMINATOR_MISSING
        )


def compute_flags(record: ISOModel) -> ValidationFlags:
    """Derive the validation flags for a record."""
    bit02_missing = record.bit02 is None
    bit02_empty = record.bit02 is not None and record.bit02.is_empty
    aux_validation_required = bit02_empty and record.bit03 is None

    return ValidationFlags(
        bit02_missing=bit02_missing,
        bit02_empty=bit02_empty,
        aux_validation_required=aux_validation_required,
        validation_discriminator=(
            DISCRIMINATOR_MISSING if bit02_missing else DISCRIMINATOR_PRESENT
        ),
    )


class TransactionValidator:
    """
    Validates transaction records and saves the processable ones.

    The logger is injected so tests can capture what was emitted.
    Records are never modified.

    Example:
        >>> validator = TransactionValidator()
        >>> validator.validate(record)  # raises InvalidArgumentError on failure
    """

    def __init__(self, logger: Optional[ValidationLogger] = None):
        """
        Initialize the validator.

        Args:
            logger: Logger to write to. Defaults to this module's logger.
        """
        self.logger = logger if logger is not None else logging.getLogger(__name__)

    def validate(self, record: ISOModel) -> None:
        """
        Validate a record and save it if it is processable.

        Args:
            record: The transaction record to check

        Raises:
            FieldsNotPopulatedError: If bit02 is not populated
            ProcessingError: If checking or saving the record failed.
                The original exception is available as .cause
                and as __cause__.
        """
        self.logger.info("Validation started")

        flags = compute_flags(record)

        if flags.fields_not_populated:
            raise FieldsNotPopulatedError()

        try:
            if self.is_processable(record):
                self._try_save(record, flags.aux_validation_required)
        except Exception as e:
            self.logger.error(f"Error processing transaction: {e}", exc_info=e)
            raise ProcessingError("processing error", cause=e) from e

    def is_processable(self, record: ISOModel) -> bool:
        """
        Return True if the record has every bit needed to be saved.

        Requires bit03, bit05 and bit12 to be present, and bit04 to be
        present with a valid type code.
        """
        return (
            record.bit03 is not None
            and record.bit04 is not None
            and is_valid_type_code(record.bit04.value)
            and record.bit05 is not None
            and record.bit12 is not None
        )

    def _try_save(self, record: ISOModel, aux_validation_required: bool) -> None:
        """
        Save step.

        No storage backend exists; a successful save only logs bit02.

        Raises:
            ValidationFailedError: If auxiliary validation is required
        """
        if aux_validation_required:
            raise ValidationFailedError()

        self.logger.info(f"Saving transaction {record.bit02.value}")
