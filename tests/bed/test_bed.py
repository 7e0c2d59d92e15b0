"""
Locations can be read from and written to single BED lines.
"""
import logging

import pytest

from bioannot.exc import InvalidStrandException, SplicingException
from bioannot.io.bed import BED3, BED6, BED12, RGB
from bioannot.io.bed.exc import BEDMissingSequenceNameError, BEDParseException
from bioannot.location import Contig, NoStrand, ReqStrand, Spliced, Strand

TAD3_LINE = "chrXII\t765265\t766358\ttad3\t0\t-\t765265\t766358\t0,0,0\t3\t808,52,109\t0,864,984"


class TestBED3:
    def test_from_contig(self, tma22):
        assert str(BED3.from_contig(tma22)) == "chrX\t461829\t462426"

    def test_to_contig(self):
        contig = BED3.from_line("chrX\t461829\t462426\n").to_contig()
        assert contig.same(Contig("chrX", 461829, 597, NoStrand.UNKNOWN))
        assert BED3.from_line("chrX\t461829\t462426").to_contig(Strand).strand is Strand.UNKNOWN

    def test_to_contig_req_strand(self):
        with pytest.raises(InvalidStrandException):
            BED3("chrX", 461829, 462426).to_contig(ReqStrand)

    def test_missing_sequence_name(self):
        with pytest.raises(BEDMissingSequenceNameError):
            BED3.from_contig(Contig(None, 0, 10, NoStrand.UNKNOWN))

    @pytest.mark.parametrize("line", ["chrX\t461829", "chrX\tstart\t462426", "chrX 461829 462426"])
    def test_invalid(self, line):
        with pytest.raises(BEDParseException):
            BED3.from_line(line)


class TestBED6:
    def test_round_trip(self, tma19):
        bed = BED6.from_contig(tma19, name="tma19")
        assert str(bed) == "chrXI\t334412\t334916\ttma19\t0\t-"
        assert BED6.from_line(str(bed)).to_contig(ReqStrand) == tma19

    def test_unknown_strand(self):
        bed = BED6.from_contig(Contig("chrX", 10, 5, NoStrand.UNKNOWN))
        assert str(bed) == "chrX\t10\t15\t.\t0\t."
        assert BED6.from_line(str(bed)).to_contig().strand is Strand.UNKNOWN

    def test_extra_columns(self, caplog):
        with caplog.at_level(logging.WARNING):
            bed = BED6.from_line("chrX\t10\t15\tname\t5\t+\textra")
        assert bed.strand is Strand.FORWARD
        assert bed.score == 5
        assert "extra columns" in caplog.text

    @pytest.mark.parametrize(
        "line",
        ["chrX\t10\t15\tname\t0", "chrX\t10\t15\tname\tfive\t+", "chrX\t10\t15\tname\t0\tx"],
    )
    def test_invalid(self, line):
        with pytest.raises(BEDParseException):
            BED6.from_line(line)


class TestBED12:
    def test_from_spliced(self, tad3):
        assert str(BED12.from_spliced(tad3, name="tad3")) == TAD3_LINE

    def test_to_spliced(self, tad3):
        assert BED12.from_line(TAD3_LINE).to_spliced(ReqStrand) == tad3

    def test_trailing_commas(self, rpl7b):
        line = "chrXVI\t173151\t174702\trpl7b\t0\t+\t173151\t174702\t255,0,0\t3\t11,94,630,\t0,420,921,"
        bed = BED12.from_line(line)
        assert bed.item_rgb == RGB(255, 0, 0)
        assert bed.to_spliced(ReqStrand) == rpl7b

    def test_thick_region(self, rpl7b, caplog):
        bed = BED12.from_spliced(rpl7b, name="rpl7b", thick_start=173155, thick_end=174500, item_rgb=RGB(0, 0, 255))
        assert str(bed).split("\t")[6:9] == ["173155", "174500", "0,0,255"]
        with caplog.at_level(logging.INFO):
            assert bed.to_spliced(ReqStrand) == rpl7b
        assert "Thick region" in caplog.text

    def test_bed12_plus(self, caplog):
        with caplog.at_level(logging.WARNING):
            bed = BED12.from_line(TAD3_LINE + "\tgene=TAD3\t1.5")
        assert bed.block_count == 3
        assert "Ignoring 2 extra columns" in caplog.text

    def test_single_block(self):
        spliced = Spliced("chrX", 100, 50, Strand.FORWARD)
        bed = BED12.from_spliced(spliced)
        assert str(bed) == "chrX\t100\t150\t.\t0\t+\t100\t150\t0,0,0\t1\t50\t0"

    @pytest.mark.parametrize(
        "line",
        [
            "chrX\t100\t150\t.\t0\t+\t100\t150\t0,0,0\t2\t50\t0",
            "chrX\t100\t150\t.\t0\t+\t100\t150\t0,0\t1\t50\t0",
            "chrX\t100\t150\t.\t0\t+\t100\t150\t0,0,0\t1\t50,a\t0",
            "chrX\t100\t150\t.\t0\t+\t100\t150\t0,0,0\t1",
        ],
    )
    def test_invalid(self, line):
        with pytest.raises(BEDParseException):
            BED12.from_line(line)

    def test_invalid_blocks(self):
        bed = BED12.from_line("chrX\t100\t200\t.\t0\t+\t100\t200\t0\t2\t50,50\t0,40")
        with pytest.raises(SplicingException):
            bed.to_spliced()
