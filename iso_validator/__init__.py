"""
ISO transaction record validation.

This package validates the "bits" of an ISO 8583-style transaction
record and decides whether the record can be saved.
"""

from .exceptions import (
    InvalidArgumentError,
    FieldsNotPopulatedError,
    ProcessingError,
    ValidationFailedError,
)
from .models import FieldValue, ISOModel, TransactionRecord, VALID_TYPE_CODES
from .validator import TransactionValidator, ValidationFlags, compute_flags

__all__ = [
    'InvalidArgumentError',
    'FieldsNotPopulatedError',
    'ProcessingError',
    'ValidationFailedError',
    'FieldValue',
    'ISOModel',
    'TransactionRecord',
    'VALID_TYPE_CODES',
    'TransactionValidator',
    'ValidationFlags',
    'compute_flags',
]
