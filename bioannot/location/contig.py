from typing import Callable, Optional, Type

from Bio.SeqFeature import FeatureLocation

from bioannot import RefID, S
from bioannot.location.location import Loc
from bioannot.location.parsing import CONTIG_RE, match_display, parse_block, parse_strand
from bioannot.location.pos import Pos
from bioannot.location.strand import ReqStrand, Strand, Strandedness
from bioannot.util.object_validation import ObjectValidation


class Contig(Loc[RefID, S]):
    """A contiguous region ``[start, start + length)`` on a reference sequence, which may carry a strand.

    Contigs may be extended in place with :meth:`extend_upstream` and :meth:`extend_downstream`, and are
    therefore not hashable.
    """

    def __init__(self, refid: RefID, start: int, length: int, strand: S):
        ObjectValidation.require_non_negative_length(length)
        self.refid = refid
        self.start = start
        self.length = length
        self.strand = strand

    @classmethod
    def with_first_length(cls, pos: Pos, length: int) -> "Contig":
        """Constructs a contig of the given length whose first position, on the strand of ``pos``, is ``pos``.

        Contigs shorter than 2 positions do not need a known strand; otherwise an unknown strand raises
        :class:`~bioannot.exc.InvalidStrandException`.
        """
        if length < 2:
            start = pos.start
        elif ObjectValidation.require_known_strand(pos) is ReqStrand.FORWARD:
            start = pos.start
        else:
            start = pos.start - length + 1
        return cls(pos.refid, start, length, pos.strand)

    def __str__(self):
        return f"{self.refid}:{self.start}-{self.end}{self.strand}"

    def __repr__(self):
        return f"<Contig[{type(self.strand).__name__}] {self}>"

    def __eq__(self, other):
        if type(other) is not Contig:
            return False
        return (
            self.refid == other.refid
            and self.start == other.start
            and self.length == other.length
            and self.strand == other.strand
        )

    def same(self, other: Loc) -> bool:
        return (
            type(other) is Contig
            and self.refid == other.refid
            and self.start == other.start
            and self.length == other.length
            and self.strand.same(other.strand)
        )

    @classmethod
    def from_str(
        cls, value: str, strand_type: Type[Strandedness] = Strand, refid_factory: Callable[[str], RefID] = str
    ) -> "Contig":
        match = match_display(CONTIG_RE, value)
        strand = parse_strand(strand_type, match.group(4))
        start, length = parse_block(match.group(2), match.group(3))
        return cls(refid_factory(match.group(1)), start, length, strand)

    def extend_upstream(self, dist: int):
        """Extends the contig by ``dist`` positions upstream, i.e. at its 5' end on its strand."""
        req_strand = ObjectValidation.require_known_strand(self)
        ObjectValidation.require_non_negative_distance(dist)
        self.length += dist
        if req_strand is ReqStrand.FORWARD:
            self.start -= dist

    def extend_downstream(self, dist: int):
        """Extends the contig by ``dist`` positions downstream, i.e. at its 3' end on its strand."""
        req_strand = ObjectValidation.require_known_strand(self)
        ObjectValidation.require_non_negative_distance(dist)
        self.length += dist
        if req_strand is ReqStrand.REVERSE:
            self.start -= dist

    def pos_into(self, pos: Pos) -> Optional[Pos]:
        req_strand = ObjectValidation.require_known_strand(self)
        if self.refid != pos.refid:
            return None
        offset = pos.pos - self.start
        if offset < 0 or offset >= self.length:
            return None
        if req_strand is ReqStrand.FORWARD:
            return Pos(None, offset, pos.strand)
        return Pos(None, self.length - offset - 1, pos.strand.reverse())

    def pos_outof(self, pos: Pos) -> Optional[Pos]:
        req_strand = ObjectValidation.require_known_strand(self)
        if req_strand is ReqStrand.FORWARD:
            offset = pos.pos
        else:
            offset = self.length - pos.pos - 1
        if offset < 0 or offset >= self.length:
            return None
        return Pos(self.refid, self.start + offset, req_strand.compose(pos.strand))

    def contig_intersection(self, other: Loc) -> Optional["Contig"]:
        """The overlap is allowed to be empty: contigs that abut intersect in a zero-length contig."""
        if self.refid != other.refid:
            return None
        start = max(self.start, other.start)
        end = min(self.end, other.end)
        if start > end:
            return None
        return Contig(self.refid, start, end - start, self.strand)

    def reset_strand(self, new_strand: Strandedness) -> "Contig":
        return Contig(self.refid, self.start, self.length, new_strand)

    def to_dict(self) -> dict:
        return dict(refid=self.refid, start=self.start, length=self.length, strand=self.strand.name)

    def to_biopython(self) -> FeatureLocation:
        return FeatureLocation(self.start, self.end, strand=self.strand.value, ref=self._biopython_ref())
