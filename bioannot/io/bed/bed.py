"""
BED comes in a handful of flavors: BED3, BED6, BED12, and BED12+.

The 12 defined columns are:

1. ``chrom``: Sequence.
2. ``start``: 0-based start.
3. ``end``: 0-based exclusive end.
4. ``name``: A name.
5. ``score``: A score. Should be an integer between 0 and 1000.
6. ``strand``: A string. Any of ``[+, -, .]``.
7. ``thickStart``: Translation start site.
8. ``thickEnd``: Translation end site.
9. ``itemRgb``: String encoded tuple for an RGB value to display.
10. ``blockCount``: Number of spliced blocks.
11. ``blockSizes``: Length of each block.
12. ``BlockStarts``: Start of each block relative to ``start``.

BED3 is the first 3 columns, BED6 is the first 6, and BED12 is the full thing.

BED12+ basically is just people tacking on extra self-defined columns. These are ignored when parsing.

BED3 and BED6 lines convert to and from :class:`~bioannot.location.contig.Contig`; BED12 lines convert to and from
:class:`~bioannot.location.spliced.Spliced`, whose exon lengths and relative starts are exactly the block sizes
and block starts. Thick start/end and colors have no location counterpart.
"""
import logging
from dataclasses import dataclass, astuple
from typing import List, Optional, Type

from bioannot.exc import AnnotParseException
from bioannot.io.bed.exc import BEDMissingSequenceNameError, BEDParseException
from bioannot.location.contig import Contig
from bioannot.location.location import Loc
from bioannot.location.spliced import Spliced
from bioannot.location.strand import NoStrand, Strand, Strandedness

logger = logging.getLogger(__name__)

BED3_COLUMNS = 3
BED6_COLUMNS = 6
BED12_COLUMNS = 12


def _split_line(line: str, num_columns: int) -> List[str]:
    columns = line.rstrip("\r\n").split("\t")
    if len(columns) < num_columns:
        raise BEDParseException(f"Expected at least {num_columns} columns, found {len(columns)}: {line!r}")
    if len(columns) > num_columns:
        logger.warning(f"Ignoring {len(columns) - num_columns} extra columns in BED line: {line!r}")
    return columns[:num_columns]


def _parse_int(value: str, column: str) -> int:
    try:
        return int(value)
    except ValueError as err:
        raise BEDParseException(f"{column} column is not an integer: {value!r}") from err


def _parse_int_list(value: str, column: str) -> List[int]:
    # UCSC writes a trailing comma
    return [_parse_int(item, column) for item in value.split(",") if item]


def _parse_strand(value: str, strand_type: Type[Strandedness]) -> Strandedness:
    try:
        return strand_type.from_symbol(value)
    except AnnotParseException as err:
        raise BEDParseException(f"Invalid strand column for {strand_type.__name__}: {value!r}") from err


def _require_chrom(location: Loc) -> str:
    if location.refid is None:
        raise BEDMissingSequenceNameError(f"Cannot export {location!r} to BED without a sequence name")
    return str(location.refid)


@dataclass(frozen=True)
class RGB:
    r: int = 0
    g: int = 0
    b: int = 0

    def __str__(self) -> str:
        return ",".join(str(color) for color in astuple(self))

    @staticmethod
    def from_str(value: str) -> "RGB":
        """Parses ``r,g,b``; the single value ``0`` means no color."""
        colors = _parse_int_list(value, "itemRgb")
        if colors == [0]:
            return RGB()
        if len(colors) != 3:
            raise BEDParseException(f"itemRgb column must have 3 values: {value!r}")
        return RGB(*colors)


@dataclass
class BED3:
    """BED3 includes basic interval information; the simplest type of interval"""

    chrom: str
    start: int
    end: int

    def __str__(self) -> str:
        return "\t".join(str(col) for col in astuple(self))

    @classmethod
    def from_line(cls, line: str) -> "BED3":
        chrom, start, end = _split_line(line, BED3_COLUMNS)
        return cls(chrom, _parse_int(start, "start"), _parse_int(end, "end"))

    @staticmethod
    def from_contig(contig: Contig) -> "BED3":
        return BED3(_require_chrom(contig), contig.start, contig.end)

    def to_contig(self, strand_type: Type[Strandedness] = NoStrand) -> Contig:
        """BED3 has no strand column, so the contig strand is always unknown."""
        return Contig(self.chrom, self.start, self.end - self.start, strand_type.convert(NoStrand.UNKNOWN))


@dataclass
class BED6(BED3):
    """BED6 includes name, score and strand information. Cannot be spliced."""

    name: str
    score: int
    strand: Strand

    def __str__(self) -> str:
        return "\t".join(map(str, [self.chrom, self.start, self.end, self.name, self.score, self.strand.to_symbol()]))

    @classmethod
    def from_line(cls, line: str) -> "BED6":
        chrom, start, end, name, score, strand = _split_line(line, BED6_COLUMNS)
        return cls(
            chrom,
            _parse_int(start, "start"),
            _parse_int(end, "end"),
            name,
            _parse_int(score, "score"),
            _parse_strand(strand, Strand),
        )

    @staticmethod
    def from_contig(contig: Contig, name: str = ".", score: int = 0) -> "BED6":
        return BED6(_require_chrom(contig), contig.start, contig.end, name, score, Strand.convert(contig.strand))

    def to_contig(self, strand_type: Type[Strandedness] = Strand) -> Contig:
        return Contig(self.chrom, self.start, self.end - self.start, strand_type.convert(self.strand))


@dataclass
class BED12(BED6):
    """BED12 contains splicing and CDS information. It does not contain frame/phase information."""

    thick_start: int
    thick_end: int
    item_rgb: RGB
    block_count: int
    block_sizes: List[int]
    block_starts: List[int]

    def __str__(self) -> str:
        return "\t".join(
            (
                str(x)
                for x in [
                    self.chrom,
                    self.start,
                    self.end,
                    self.name,
                    self.score,
                    self.strand.to_symbol(),
                    self.thick_start,
                    self.thick_end,
                    self.item_rgb,
                    self.block_count,
                    ",".join(map(str, self.block_sizes)),
                    ",".join(map(str, self.block_starts)),
                ]
            )
        )

    @classmethod
    def from_line(cls, line: str) -> "BED12":
        columns = _split_line(line, BED12_COLUMNS)
        block_count = _parse_int(columns[9], "blockCount")
        block_sizes = _parse_int_list(columns[10], "blockSizes")
        block_starts = _parse_int_list(columns[11], "blockStarts")
        if not len(block_sizes) == len(block_starts) == block_count:
            raise BEDParseException(
                f"blockCount {block_count} does not match {len(block_sizes)} sizes and {len(block_starts)} starts"
            )
        return cls(
            columns[0],
            _parse_int(columns[1], "start"),
            _parse_int(columns[2], "end"),
            columns[3],
            _parse_int(columns[4], "score"),
            _parse_strand(columns[5], Strand),
            _parse_int(columns[6], "thickStart"),
            _parse_int(columns[7], "thickEnd"),
            RGB.from_str(columns[8]),
            block_count,
            block_sizes,
            block_starts,
        )

    @staticmethod
    def from_spliced(
        spliced: Spliced,
        name: str = ".",
        score: int = 0,
        thick_start: Optional[int] = None,
        thick_end: Optional[int] = None,
        item_rgb: RGB = RGB(),
    ) -> "BED12":
        """Thick start and end default to the bounds of the spliced location, i.e. a fully thick feature."""
        return BED12(
            _require_chrom(spliced),
            spliced.start,
            spliced.end,
            name,
            score,
            Strand.convert(spliced.strand),
            spliced.start if thick_start is None else thick_start,
            spliced.end if thick_end is None else thick_end,
            item_rgb,
            spliced.exon_count,
            spliced.exon_lengths(),
            spliced.exon_starts(),
        )

    def to_spliced(self, strand_type: Type[Strandedness] = Strand) -> Spliced:
        """Converts the blocks of this line to a spliced location.

        Raises a :class:`~bioannot.exc.SplicingException` if the blocks are not a valid exon structure.
        """
        if self.thick_start != self.start or self.thick_end != self.end:
            logger.info(
                f"Thick region {self.thick_start}-{self.thick_end} of {self.name} is not kept in the spliced location"
            )
        spliced = Spliced.with_lengths_starts(
            self.chrom, self.start, self.block_sizes, self.block_starts, strand_type.convert(self.strand)
        )
        if spliced.end != self.end:
            logger.warning(f"Blocks of {self.name} end at {spliced.end}, not at the BED end {self.end}")
        return spliced
