"""
Data models. These models allow for validation of serialized locations before constructing a BioAnnot location.
"""

from bioannot.models.models import PosModel, ContigModel, SplicedModel  # noqa: F401
