"""
Spliced locations: a series of exons on a single reference sequence, separated by introns.

A spliced location is stored as the length of its first exon, which starts at the location start, followed by
any number of intron/exon pairs. Every intron and every exon after the first has a positive length, so exons are
always sorted, non-overlapping and never abut. A zero-length spliced location has a single zero-length exon.
"""
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, List, NamedTuple, Optional, Sequence, Type, Union

from Bio.SeqFeature import CompoundLocation, FeatureLocation
from methodtools import lru_cache

from bioannot import RefID, S
from bioannot.exc import (
    ExonCountMismatchError,
    ExonLengthError,
    ExonOverlapError,
    ExonStartError,
    IntronLengthError,
    NoExonsError,
    SplicedParseError,
    SplicingException,
)
from bioannot.location.contig import Contig
from bioannot.location.location import Loc
from bioannot.location.parsing import SPLICED_RE, match_display, parse_block, parse_exon_blocks, parse_strand
from bioannot.location.pos import Pos
from bioannot.location.strand import ReqStrand, Strand, Strandedness
from bioannot.util.object_validation import ObjectValidation


@dataclass(frozen=True)
class InEx:
    """An intron followed by an exon, both with positive lengths."""

    intron_length: int
    exon_length: int

    def __post_init__(self):
        if self.intron_length < 1:
            raise IntronLengthError(f"Intron length must be positive: {self.intron_length}")
        if self.exon_length < 1:
            raise ExonLengthError(f"Exon length must be positive: {self.exon_length}")

    @property
    def length(self) -> int:
        return self.intron_length + self.exon_length


class Block(NamedTuple):
    """An exon or intron, with its start relative to the start of the spliced location."""

    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length


class Spliced(Loc[RefID, S]):
    """A spliced region on a reference sequence, which may carry a strand.

    Exon positions are always listed left to right on the reference sequence, independent of strand;
    :meth:`exon_contigs` and :meth:`intron_contigs` list them in strand order instead.
    """

    def __init__(self, refid: RefID, start: int, exon_0_length: int, strand: S, inexes: Iterable[InEx] = ()):
        self._inexes = tuple(inexes)
        if exon_0_length < 0:
            raise ExonLengthError(f"First exon length must be non-negative: {exon_0_length}")
        self.refid = refid
        self.start = start
        self.exon_0_length = exon_0_length
        self.strand = strand
        for inex in self._inexes:
            ObjectValidation.require_object_has_type(inex, InEx)
        self.length = exon_0_length + sum(inex.length for inex in self._inexes)

    @classmethod
    def with_lengths_starts(
        cls,
        refid: RefID,
        start: int,
        exon_lengths: Sequence[int],
        exon_starts: Sequence[int],
        strand: S,
    ) -> "Spliced":
        """Constructs a spliced location from the lengths and starts of its exons, in the style of BED12 blocks.

        Parameters
        ----------
        refid
            Reference sequence name
        start
            Start of the first exon on the reference sequence
        exon_lengths
            Length of each exon
        exon_starts
            Start of each exon relative to ``start``. The first exon must start at 0.
        strand
            Strand of the location

        Raises
        ------
        NoExonsError
            If no exons are given.
        ExonStartError
            If the first exon does not start at 0.
        ExonCountMismatchError
            If the numbers of lengths and starts differ.
        ExonOverlapError
            If an exon starts before the previous one has ended, or abuts it.
        ExonLengthError
            If an exon after the first has a non-positive length, or the first exon has a negative length.
        """
        if len(exon_starts) == 0:
            raise NoExonsError("Spliced location requires at least one exon")
        if exon_starts[0] != 0:
            raise ExonStartError(f"First exon must start at 0, not {exon_starts[0]}")
        if len(exon_starts) != len(exon_lengths):
            raise ExonCountMismatchError(
                f"Number of exon starts ({len(exon_starts)}) does not match number of lengths ({len(exon_lengths)})"
            )

        inexes = []
        intron_start = exon_lengths[0]
        for exon_start, exon_length in zip(exon_starts[1:], exon_lengths[1:]):
            if intron_start >= exon_start:
                raise ExonOverlapError(f"Exon starting at {exon_start} overlaps the previous exon")
            inexes.append(InEx(exon_start - intron_start, exon_length))
            intron_start = exon_start + exon_length

        return cls(refid, start, exon_lengths[0], strand, inexes)

    def __str__(self):
        blocks = ";".join(f"{self.start + ex.start}-{self.start + ex.end}" for ex in self._exons())
        return f"{self.refid}:{blocks}{self.strand}"

    def __repr__(self):
        return f"<Spliced[{type(self.strand).__name__}] {self}>"

    def __eq__(self, other):
        if type(other) is not Spliced:
            return False
        return self._key() == other._key() and self.strand == other.strand

    def __hash__(self):
        return hash((self._key(), self.strand))

    def _key(self):
        return self.refid, self.start, self.exon_0_length, self._inexes

    def same(self, other: Loc) -> bool:
        return type(other) is Spliced and self._key() == other._key() and self.strand.same(other.strand)

    @classmethod
    def from_str(
        cls, value: str, strand_type: Type[Strandedness] = Strand, refid_factory: Callable[[str], RefID] = str
    ) -> "Spliced":
        match = match_display(SPLICED_RE, value)
        strand = parse_strand(strand_type, match.group(5))
        first_start, first_length = parse_block(match.group(2), match.group(3))
        blocks = parse_exon_blocks(match.group(4))

        exon_starts = [0] + [block_start - first_start for block_start, _ in blocks]
        exon_lengths = [first_length] + [block_length for _, block_length in blocks]
        try:
            return cls.with_lengths_starts(refid_factory(match.group(1)), first_start, exon_lengths, exon_starts, strand)
        except SplicingException as err:
            raise SplicedParseError(f"Invalid exon structure in {value!r}: {err}") from err

    def _exons(self) -> Iterator[Block]:
        yield Block(0, self.exon_0_length)
        curr_start = self.exon_0_length
        for inex in self._inexes:
            yield Block(curr_start + inex.intron_length, inex.exon_length)
            curr_start += inex.length

    def _introns(self) -> Iterator[Block]:
        curr_start = self.exon_0_length
        for inex in self._inexes:
            yield Block(curr_start, inex.intron_length)
            curr_start += inex.length

    @property
    def inexes(self) -> List[InEx]:
        return list(self._inexes)

    @property
    def exon_count(self) -> int:
        return len(self._inexes) + 1

    def exon_starts(self) -> List[int]:
        """Exon starts relative to the start of this location; the first is always 0."""
        return [ex.start for ex in self._exons()]

    def exon_lengths(self) -> List[int]:
        return [ex.length for ex in self._exons()]

    @lru_cache(maxsize=1)
    def exon_total_length(self) -> int:
        """Summed length of the exons, excluding introns."""
        return self.exon_0_length + sum(inex.exon_length for inex in self._inexes)

    def is_zero_length(self) -> bool:
        return self.exon_0_length == 0 and not self._inexes

    def _stranded_contigs(self, blocks: Iterable[Block]) -> List[Contig]:
        contigs = [Contig(self.refid, self.start + block.start, block.length, self.strand) for block in blocks]
        if self.strand.try_req_strand() is ReqStrand.REVERSE:
            contigs.reverse()
        return contigs

    def exon_contigs(self) -> List[Contig]:
        """Each exon as a contig, in strand order: reverse strand locations list the right-most exon first."""
        return self._stranded_contigs(self._exons())

    def intron_contigs(self) -> List[Contig]:
        """Each intron as a contig, in strand order."""
        return self._stranded_contigs(self._introns())

    def contig_cover(self) -> Contig:
        return self.contig()

    def pos_into(self, pos: Pos) -> Optional[Pos]:
        req_strand = ObjectValidation.require_known_strand(self)
        if self.refid != pos.refid:
            return None
        pos_offset = pos.pos - self.start
        if pos_offset < 0:
            return None

        offset_before = 0
        for ex in self._exons():
            if ex.start <= pos_offset < ex.end:
                offset = offset_before + pos_offset - ex.start
                if req_strand is ReqStrand.FORWARD:
                    return Pos(None, offset, pos.strand)
                return Pos(None, self.exon_total_length() - offset - 1, pos.strand.reverse())
            offset_before += ex.length
        return None

    def pos_outof(self, pos: Pos) -> Optional[Pos]:
        req_strand = ObjectValidation.require_known_strand(self)
        if req_strand is ReqStrand.FORWARD:
            offset = pos.pos
        else:
            offset = self.exon_total_length() - pos.pos - 1
        if offset < 0:
            return None

        for ex in self._exons():
            if offset < ex.length:
                return Pos(self.refid, self.start + ex.start + offset, req_strand.compose(pos.strand))
            offset -= ex.length
        return None

    def contig_intersection(self, other: Loc) -> Optional["Spliced"]:
        """Clips each exon to the window of ``other`` and keeps those that still have a positive length.
        Returns None if no exon overlaps the window."""
        if self.refid != other.refid:
            return None
        window_start = other.start - self.start
        window_end = other.end - self.start

        exon_starts = []
        exon_lengths = []
        for ex in self._exons():
            clip_start = max(window_start, ex.start)
            clip_end = min(window_end, ex.end)
            if clip_start < clip_end:
                exon_starts.append(clip_start)
                exon_lengths.append(clip_end - clip_start)

        if not exon_starts:
            return None

        first_start = exon_starts[0]
        rel_starts = [exon_start - first_start for exon_start in exon_starts]
        try:
            return Spliced.with_lengths_starts(
                self.refid, self.start + first_start, exon_lengths, rel_starts, self.strand
            )
        except SplicingException as err:
            raise RuntimeError(f"Clipping {self} to {other} produced invalid exons {exon_starts}") from err

    def reset_strand(self, new_strand: Strandedness) -> "Spliced":
        return Spliced(self.refid, self.start, self.exon_0_length, new_strand, self._inexes)

    def to_dict(self) -> dict:
        return dict(
            refid=self.refid,
            start=self.start,
            exon_starts=self.exon_starts(),
            exon_lengths=self.exon_lengths(),
            strand=self.strand.name,
        )

    def to_biopython(self) -> Union[FeatureLocation, CompoundLocation]:
        """Exons are listed in strand order, which is how BioPython orders the parts of a compound location"""
        blocks = [ex.to_biopython() for ex in self.exon_contigs()]
        if len(blocks) == 1:
            return blocks[0]
        return CompoundLocation(blocks)
