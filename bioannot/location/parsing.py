"""
Regular expressions and helpers for parsing the display strings of locations.

Display strings are ``refid:pos(+/-)``, ``refid:start-end(+/-)`` and ``refid:s0-e0;s1-e1;...;sN-eN(+/-)``. The
strand suffix is optional only where the strand type allows an unknown strand.
"""
import re
from typing import List, Tuple, Type

from bioannot.exc import EndBeforeStartError, IntegerParseError, PatternMismatchError
from bioannot.location.strand import Strandedness

POS_RE = re.compile(r"^(.*):(\d+)(\([+-]\))?$", re.ASCII)
CONTIG_RE = re.compile(r"^(.*):(\d+)-(\d+)(\([+-]\))?$", re.ASCII)
SPLICED_RE = re.compile(r"^(.*):(\d+)-(\d+)((?:;\d+-\d+)*)(\([+-]\))?$", re.ASCII)
EXON_RE = re.compile(r";(\d+)-(\d+)", re.ASCII)


def match_display(pattern: re.Pattern, value: str) -> re.Match:
    match = pattern.fullmatch(value)
    if match is None:
        raise PatternMismatchError(f"{value!r} does not match the location pattern {pattern.pattern}")
    return match


def parse_int(value: str) -> int:
    try:
        return int(value)
    except ValueError as err:
        raise IntegerParseError(f"{value!r} is not a valid integer") from err


def parse_strand(strand_type: Type[Strandedness], suffix: str) -> Strandedness:
    """Parses an optional strand suffix; a missing suffix is the empty string."""
    return strand_type.from_display(suffix or "")


def parse_block(start: str, end: str) -> Tuple[int, int]:
    """Parses a half-open ``start-end`` block into a start and a non-negative length."""
    block_start = parse_int(start)
    block_end = parse_int(end)
    if block_end < block_start:
        raise EndBeforeStartError(f"End position {block_end} < start position {block_start}")
    return block_start, block_end - block_start


def parse_exon_blocks(exons: str) -> List[Tuple[int, int]]:
    """Parses the ``;start-end`` exon list that follows the first exon of a spliced display string."""
    return [parse_block(start, end) for start, end in EXON_RE.findall(exons)]
