from abc import ABC, abstractmethod
from typing import Callable, Generic, Optional, Type, Union

from Bio.SeqFeature import CompoundLocation, FeatureLocation

from bioannot import RefID, S
from bioannot.location.strand import ReqStrand, Strand, Strandedness
from bioannot.util.object_validation import ObjectValidation


class Loc(ABC, Generic[RefID, S]):
    """A location on a named reference sequence (chromosome, contig, ...), which may also carry strand information.

    Locations are generic over the type of the reference sequence identifier (plain strings, interned handles,
    integers, ...) and over the strand capability (:class:`~bioannot.location.strand.NoStrand`,
    :class:`~bioannot.location.strand.Strand` or :class:`~bioannot.location.strand.ReqStrand`).
    """

    # Name of the reference sequence
    refid: RefID

    # Starting (lowest, left-most) 0-based position on the reference sequence
    start: int

    # Number of positions spanned on the reference sequence. Spliced locations include their introns.
    length: int

    # Strand of this location
    strand: S

    def __len__(self):
        return self.length

    @property
    def end(self) -> int:
        """0-based exclusive end position on the reference sequence"""
        return self.start + self.length

    @abstractmethod
    def __str__(self):
        """Returns the canonical display string of this location"""

    @abstractmethod
    def __repr__(self):
        """Returns the 'official' string representation of this location"""

    @abstractmethod
    def __eq__(self, other):
        """Returns True iff this location is equal to the other object. Unknown strands are never equal."""

    @abstractmethod
    def same(self, other: "Loc") -> bool:
        """Returns True iff this location is equal to the other, treating two unknown strands as a match"""

    @classmethod
    @abstractmethod
    def from_str(
        cls, value: str, strand_type: Type[Strandedness] = Strand, refid_factory: Callable[[str], RefID] = str
    ) -> "Loc":
        """Parses the canonical display string of a location.

        Parameters
        ----------
        value
            Display string
        strand_type
            Strand capability of the parsed location. :class:`ReqStrand` requires a strand suffix.
        refid_factory
            Converts the reference name into the identifier type, e.g. :meth:`RefIDSet.intern`.
        """

    @abstractmethod
    def pos_into(self, pos: "Pos") -> Optional["Pos"]:
        """Maps a position on the reference sequence *into* a position relative to this location.

        The first position of this location maps to 0, the next to 1, and so forth, reading along the strand
        of this location; on the reverse strand the right-most position maps to 0 and the strand of the
        mapped position is reversed. The returned position has no reference name.

        Returns None if the position is on another reference sequence or falls outside this location. Raises
        :class:`~bioannot.exc.InvalidStrandException` if the strand of this location is unknown.
        """

    @abstractmethod
    def pos_outof(self, pos: "Pos") -> Optional["Pos"]:
        """Maps a position relative to this location *out of* it onto the reference sequence; the inverse of
        :meth:`pos_into`. The reference name of ``pos`` is discarded.

        Returns None if the relative position is negative or not less than the (exon-only) length. Raises
        :class:`~bioannot.exc.InvalidStrandException` if the strand of this location is unknown.
        """

    @abstractmethod
    def contig_intersection(self, other: "Contig") -> Optional["Loc"]:
        """Returns the part of this location overlapping the contiguous region ``other``, keeping the structure
        and strand of this location. Returns None if the reference names differ or nothing overlaps."""

    @abstractmethod
    def reset_strand(self, new_strand: Strandedness) -> "Loc":
        """Returns a new location corresponding to this location with the given strand"""

    @abstractmethod
    def to_dict(self) -> dict:
        """Returns a dictionary representation suitable for the matching :mod:`bioannot.models` schema"""

    @abstractmethod
    def to_biopython(self) -> Union[FeatureLocation, CompoundLocation]:
        """Returns a BioPython location type; since they do not have a shared base class, we need a union"""

    def contig(self) -> "Contig":
        """Contiguous region that fully covers this location"""
        from bioannot.location.contig import Contig

        return Contig(self.refid, self.start, self.length, self.strand)

    def first_pos(self) -> "Pos":
        """The first position of this location, on its strand. The first position of a zero-length location
        is its start."""
        from bioannot.location.pos import Pos

        req_strand = ObjectValidation.require_known_strand(self)
        if req_strand is ReqStrand.FORWARD or self.length == 0:
            return Pos(self.refid, self.start, self.strand)
        return Pos(self.refid, self.end - 1, self.strand)

    def last_pos(self) -> "Pos":
        """The last position of this location, on its strand. The last position of a zero-length location
        is its start."""
        from bioannot.location.pos import Pos

        req_strand = ObjectValidation.require_known_strand(self)
        if req_strand is ReqStrand.REVERSE or self.length == 0:
            return Pos(self.refid, self.start, self.strand)
        return Pos(self.refid, self.end - 1, self.strand)

    def with_strand_type(self, strand_type: Type[Strandedness]) -> "Loc":
        """Returns a new location with the strand converted to another strand capability. Converting an unknown
        strand to :class:`ReqStrand` raises :class:`~bioannot.exc.InvalidStrandException`."""
        return self.reset_strand(strand_type.convert(self.strand))

    def into_stranded(self, strand: ReqStrand) -> "Loc":
        """Returns a new location placed on the given known strand"""
        ObjectValidation.require_object_has_type(strand, ReqStrand)
        return self.reset_strand(strand)

    def _biopython_ref(self) -> Optional[str]:
        return None if self.refid is None else str(self.refid)
