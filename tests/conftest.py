import pytest

from bioannot.location import Contig, ReqStrand, Spliced, Strand


@pytest.fixture
def tma22() -> Contig:
    return Contig("chrX", 461829, 462426 - 461829, ReqStrand.FORWARD)


@pytest.fixture
def tma19() -> Contig:
    return Contig("chrXI", 334412, 334916 - 334412, ReqStrand.REVERSE)


@pytest.fixture
def rpl7b() -> Spliced:
    return Spliced.with_lengths_starts("chrXVI", 173151, [11, 94, 630], [0, 420, 921], ReqStrand.FORWARD)


@pytest.fixture
def tad3() -> Spliced:
    return Spliced.with_lengths_starts("chrXII", 765265, [808, 52, 109], [0, 864, 984], ReqStrand.REVERSE)


@pytest.fixture
def tma20() -> Spliced:
    return Spliced.with_lengths_starts("chrV", 166236, [535, 11], [0, 638], Strand.REVERSE)
