"""
Strand information for locations on a reference sequence.

Three strand capabilities are modeled, each as its own enumeration:

* :class:`ReqStrand` -- the strand is always known (forward or reverse).
* :class:`Strand` -- the strand may be forward, reverse or unknown.
* :class:`NoStrand` -- the location definitively has no strand information.

Unknown strands are never *equal* to anything, including other unknown strands. Use :meth:`Strandedness.same`
(or the module level :func:`same`) when two unspecified strands should be considered a match.
"""
from enum import Enum
from typing import Optional, TypeVar

from bioannot.exc import InvalidStrandException, StrandParseError

T = TypeVar("T", bound="Strandedness")

_SYMBOLS = {1: "+", -1: "-", 0: "."}

_SYMBOL_VALUES = {"+": 1, "f": 1, "F": 1, "-": -1, "r": -1, "R": -1, ".": 0, "?": 0}


class Strandedness(Enum):
    """Behavior shared by all strand capabilities. Member values follow the integer strand convention:
    1 is forward, -1 is reverse and 0 is unknown."""

    def __str__(self):
        """Display format used as the suffix of a location string; empty for an unknown strand."""
        if self.is_unknown():
            return ""
        return f"({self.to_symbol()})"

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self is other and not self.is_unknown()

    def __hash__(self):
        return hash(self._name_)

    def __neg__(self):
        return self.reverse()

    @classmethod
    def has_value(cls, value: int) -> bool:
        return value in cls._value2member_map_

    @classmethod
    def from_display(cls, value: str):
        """Parses the strand suffix of a location display string. This is the inverse of ``str()``."""
        for member in cls:
            if str(member) == value:
                return member
        raise StrandParseError(f"{value!r} is not a valid {cls.__name__} designation")

    @classmethod
    def from_symbol(cls, value: str):
        """Converts a single character strand symbol to a member of this strand type.

        ``+``, ``f`` and ``F`` are forward; ``-``, ``r`` and ``R`` are reverse; ``.`` and ``?`` are unknown.
        """
        strand_value = _SYMBOL_VALUES.get(value)
        if strand_value is None or not cls.has_value(strand_value):
            raise StrandParseError(f"{value!r} can not be converted to a {cls.__name__}")
        return cls(strand_value)

    @classmethod
    def convert(cls, strand: "Strandedness"):
        """Converts a member of any strand type into this strand type.

        Known strands convert to ``NoStrand.UNKNOWN``; unknown strands cannot be converted into a
        :class:`ReqStrand` and raise :class:`InvalidStrandException`.
        """
        if cls.has_value(strand.value):
            return cls(strand.value)
        if strand.is_unknown():
            raise InvalidStrandException(f"Strand {strand!r} does not have a defined direction")
        return cls(0)

    def is_unknown(self) -> bool:
        return self.value == 0

    def to_symbol(self) -> str:
        return _SYMBOLS[self.value]

    def reverse(self):
        """Returns the opposite of this strand; unknown strands stay unknown."""
        return type(self)(-self.value)

    def try_req_strand(self) -> Optional["ReqStrand"]:
        """Returns the equivalent :class:`ReqStrand`, or None if this strand is unknown."""
        if self.is_unknown():
            return None
        return ReqStrand(self.value)

    def same(self, other: "Strandedness") -> bool:
        """Like equality, except that two unknown strands of the same type are the same."""
        return type(other) is type(self) and self is other


class ReqStrand(Strandedness):
    """Strand information for locations that require a strand."""

    FORWARD = 1
    REVERSE = -1

    def compose(self, other: T) -> T:
        """Returns the orientation of ``other`` when read on this strand: unchanged on the forward strand,
        reversed on the reverse strand."""
        if self is ReqStrand.FORWARD:
            return other
        return other.reverse()


class Strand(Strandedness):
    """Strand information for locations whose strand may be unknown."""

    FORWARD = 1
    REVERSE = -1
    UNKNOWN = 0


class NoStrand(Strandedness):
    """Strand information for locations that definitively have no strand."""

    UNKNOWN = 0


def same(first: Optional[Strandedness], second: Optional[Strandedness]) -> bool:
    """Extends :meth:`Strandedness.same` to optional values; works on anything with a ``same`` method.
    Two Nones are the same, a None and a value are not."""
    if first is None or second is None:
        return first is None and second is None
    return first.same(second)
