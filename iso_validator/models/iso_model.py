"""
ISOModel dataclass for ISO 8583-style transaction records.

A record is a set of optional "bits" (named field slots). Only the five
bits the validator reads are modelled here: bit02, bit03, bit04, bit05
and bit12.

Absent vs. empty:
- A bit that was never set is None
- A bit that was set to an empty string is FieldValue("")
The validator treats these two cases differently, so the model keeps
them apart instead of collapsing both to "".
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional, Tuple

# Transaction type codes accepted in bit04
VALID_TYPE_CODES = frozenset({"02", "03", "04", "05", "12"})

BIT_NAMES: Tuple[str, ...] = ("bit02", "bit03", "bit04", "bit05", "bit12")


def is_valid_type_code(code: str) -> bool:
    """Return True if code is one of the accepted bit04 type codes."""
    return code in VALID_TYPE_CODES


@dataclass(frozen=True)
class FieldValue:
    """
    Wrapper around the string content of a single bit.

    Attributes:
        value: Raw string content of the field (may be empty)
    """

    value: str

    def __post_init__(self):
        # YAML reads an unquoted 02 as the integer 2, which would silently
        # fail the type code check later on
        if not isinstance(self.value, str):
            raise ValueError(
                f"Field value must be a string, got "
                f"{type(self.value).__name__}: {self.value!r}"
            )

    @property
    def is_empty(self) -> bool:
        return self.value == ""


@dataclass(frozen=True)
class ISOModel:
    """
    Immutable transaction record.

    Attributes:
        bit02: Primary identifier
        bit03: Processing code
        bit04: Transaction type code, one of VALID_TYPE_CODES
        bit05: Settlement amount
        bit12: Local transaction time

    Example:
        >>> record = ISOModel.from_dict({
        ...     "bit02": "4111111111111111",
        ...     "bit03": "000000",
        ...     "bit04": "02",
        ...     "bit05": "100.00",
        ...     "bit12": "120000",
        ... })
        >>> record.bit04.value
        '02'
        >>> record.present_bits
        ('bit02', 'bit03', 'bit04', 'bit05', 'bit12')
    """

    bit02: Optional[FieldValue] = None
    bit03: Optional[FieldValue] = None
    bit04: Optional[FieldValue] = None
    bit05: Optional[FieldValue] = None
    bit12: Optional[FieldValue] = None

    @property
    def present_bits(self) -> Tuple[str, ...]:
        """Names of the bits that are set, in field order."""
        return tuple(f.name for f in fields(self) if getattr(self, f.name) is not None)

    # ============================================================
    # Conversion Methods
    # ============================================================

    def to_dict(self) -> Dict[str, str]:
        """
        Convert to a dictionary of present bits.

        Absent bits are left out, so from_dict(to_dict()) gives back
        an equal record.
        """
        return {
            name: getattr(self, name).value
            for name in self.present_bits
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ISOModel":
        """
        Create an ISOModel from a mapping of bit name to string.

        Missing keys and None values both mean the bit is absent.

        Args:
            data: Mapping such as {"bit02": "1234", "bit04": "02"}

        Returns:
            ISOModel instance

        Raises:
            ValueError: If the mapping has unknown keys or non-string values
        """
        unknown = sorted(set(data) - set(BIT_NAMES), key=str)
        if unknown:
            raise ValueError(f"Unknown fields: {unknown}")

        values = {}
        for name in BIT_NAMES:
            raw = data.get(name)
            if raw is None:
                continue
            try:
                values[name] = FieldValue(raw)
            except ValueError as e:
                raise ValueError(f"Invalid {name}: {e}") from e

        return cls(**values)


# Name used by callers that think in terms of transactions rather than ISO messages
TransactionRecord = ISOModel
