"""
Data models. These models allow for validation of serialized locations before constructing a BioAnnot location.

Reference sequence identifiers are opaque and loaded unchanged, so integer or interned identifiers round trip.
Strands are stored by name, so a model can be loaded into any strand type with the ``strand_type`` argument of
its conversion method.
"""
from dataclasses import field
from typing import Any, ClassVar, List, Type

from marshmallow import Schema, fields
from marshmallow.validate import Length, Range
from marshmallow_dataclass import dataclass

from bioannot.location.contig import Contig
from bioannot.location.pos import Pos
from bioannot.location.spliced import Spliced
from bioannot.location.strand import Strand, Strandedness


@dataclass
class BaseModel:
    """Base for all of the models."""

    Schema: ClassVar[Type[Schema]] = Schema  # noqa: F811

    class Meta:
        ordered = True


@dataclass
class PosModel(BaseModel):
    """Data model that allows construction of a :class:`~bioannot.location.pos.Pos` object."""

    refid: Any = field(metadata={"marshmallow_field": fields.Raw(required=True)})
    pos: int
    strand: Strand

    def to_pos(self, strand_type: Type[Strandedness] = Strand) -> Pos:
        return Pos(self.refid, self.pos, strand_type.convert(self.strand))

    @staticmethod
    def from_pos(pos: Pos) -> "PosModel":
        return PosModel.Schema().load(pos.to_dict())


@dataclass
class ContigModel(BaseModel):
    """Data model that allows construction of a :class:`~bioannot.location.contig.Contig` object."""

    refid: Any = field(metadata={"marshmallow_field": fields.Raw(required=True)})
    start: int
    length: int = field(metadata={"validate": Range(min=0)})
    strand: Strand = Strand.UNKNOWN

    def to_contig(self, strand_type: Type[Strandedness] = Strand) -> Contig:
        return Contig(self.refid, self.start, self.length, strand_type.convert(self.strand))

    @staticmethod
    def from_contig(contig: Contig) -> "ContigModel":
        return ContigModel.Schema().load(contig.to_dict())


@dataclass
class SplicedModel(BaseModel):
    """Data model that allows construction of a :class:`~bioannot.location.spliced.Spliced` object.

    Exon starts are relative to ``start``, as in BED12 blocks. The exon structure is validated on conversion.
    """

    refid: Any = field(metadata={"marshmallow_field": fields.Raw(required=True)})
    start: int
    exon_starts: List[int] = field(metadata={"validate": Length(min=1)})
    exon_lengths: List[int] = field(metadata={"validate": Length(min=1)})
    strand: Strand = Strand.UNKNOWN

    def to_spliced(self, strand_type: Type[Strandedness] = Strand) -> Spliced:
        return Spliced.with_lengths_starts(
            self.refid, self.start, self.exon_lengths, self.exon_starts, strand_type.convert(self.strand)
        )

    @staticmethod
    def from_spliced(spliced: Spliced) -> "SplicedModel":
        return SplicedModel.Schema().load(spliced.to_dict())
