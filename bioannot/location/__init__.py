"""
Locations are defined with respect to a named reference sequence. :class:`Pos` is a single position, :class:`Contig`
a contiguous region and :class:`Spliced` a series of exons separated by introns. All three share the
:class:`Loc` API for mapping positions into and out of a location and intersecting with contiguous regions.
"""

from bioannot.location.strand import ReqStrand, Strand, NoStrand  # noqa F401
from bioannot.location.location import Loc  # noqa F401
from bioannot.location.pos import Pos  # noqa F401
from bioannot.location.contig import Contig  # noqa F401
from bioannot.location.spliced import Spliced  # noqa F401
from bioannot.location.refids import RefIDSet  # noqa F401
