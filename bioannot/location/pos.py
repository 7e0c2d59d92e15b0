from typing import Callable, Optional, Type

from Bio.SeqFeature import FeatureLocation

from bioannot import RefID, S
from bioannot.location.location import Loc
from bioannot.location.parsing import POS_RE, match_display, parse_int, parse_strand
from bioannot.location.strand import ReqStrand, Strand, Strandedness
from bioannot.util.object_validation import ObjectValidation


class Pos(Loc[RefID, S]):
    """A single position on a reference sequence, which may carry a strand.

    Positions are 0-based. A position with a reference name of None is *relative*, such as the result of
    :meth:`Loc.pos_into`.

    Adding an integer to a stranded position slides it along its strand: forward positions move right and
    reverse positions move left.
    """

    length = 1

    def __init__(self, refid: RefID, pos: int, strand: S):
        self.refid = refid
        self.pos = pos
        self.strand = strand

    @property
    def start(self) -> int:
        return self.pos

    def __str__(self):
        return f"{self.refid}:{self.pos}{self.strand}"

    def __repr__(self):
        return f"<Pos[{type(self.strand).__name__}] {self}>"

    def __eq__(self, other):
        if type(other) is not Pos:
            return False
        return self.refid == other.refid and self.pos == other.pos and self.strand == other.strand

    def __hash__(self):
        return hash((self.refid, self.pos, self.strand))

    def __add__(self, dist: int) -> "Pos":
        if not isinstance(dist, int):
            return NotImplemented
        if ObjectValidation.require_known_strand(self) is ReqStrand.FORWARD:
            return Pos(self.refid, self.pos + dist, self.strand)
        return Pos(self.refid, self.pos - dist, self.strand)

    def __sub__(self, dist: int) -> "Pos":
        if not isinstance(dist, int):
            return NotImplemented
        return self + (-dist)

    def same(self, other: Loc) -> bool:
        return (
            type(other) is Pos
            and self.refid == other.refid
            and self.pos == other.pos
            and self.strand.same(other.strand)
        )

    @classmethod
    def from_str(
        cls, value: str, strand_type: Type[Strandedness] = Strand, refid_factory: Callable[[str], RefID] = str
    ) -> "Pos":
        match = match_display(POS_RE, value)
        strand = parse_strand(strand_type, match.group(3))
        return cls(refid_factory(match.group(1)), parse_int(match.group(2)), strand)

    def pos_into(self, pos: "Pos") -> Optional["Pos"]:
        req_strand = ObjectValidation.require_known_strand(self)
        if self.refid != pos.refid or self.pos != pos.pos:
            return None
        return Pos(None, 0, req_strand.compose(pos.strand))

    def pos_outof(self, pos: "Pos") -> Optional["Pos"]:
        req_strand = ObjectValidation.require_known_strand(self)
        if pos.pos != 0:
            return None
        return Pos(self.refid, self.pos, req_strand.compose(pos.strand))

    def contig_intersection(self, other: Loc) -> Optional["Pos"]:
        if self.refid != other.refid:
            return None
        if other.start <= self.pos < other.end:
            return Pos(self.refid, self.pos, self.strand)
        return None

    def reset_strand(self, new_strand: Strandedness) -> "Pos":
        return Pos(self.refid, self.pos, new_strand)

    def to_dict(self) -> dict:
        return dict(refid=self.refid, pos=self.pos, strand=self.strand.name)

    def to_biopython(self) -> FeatureLocation:
        return FeatureLocation(self.pos, self.pos + 1, strand=self.strand.value, ref=self._biopython_ref())
