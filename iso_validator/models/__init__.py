"""
Data models for ISO transaction records.

This module exports the immutable record types read by the validator.
"""

from .iso_model import (
    FieldValue,
    ISOModel,
    TransactionRecord,
    VALID_TYPE_CODES,
    BIT_NAMES,
    is_valid_type_code,
)

__all__ = [
    'FieldValue',
    'ISOModel',
    'TransactionRecord',
    'VALID_TYPE_CODES',
    'BIT_NAMES',
    'is_valid_type_code',
]
