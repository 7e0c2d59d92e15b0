__version__ = "0.1.0"

from typing import TypeVar

# Identifier of a reference sequence (chromosome name, interned handle, integer, ...)
RefID = TypeVar("RefID")

# Strand capability of a location: one of NoStrand, Strand or ReqStrand
S = TypeVar("S")
