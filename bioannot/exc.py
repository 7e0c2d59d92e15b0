class BioAnnotException(Exception):
    """
    Base exception class for BioAnnot.
    """

    pass


class InvalidStrandException(BioAnnotException):
    """
    Raised when an operation is performed on an invalid strand -- usually this is when an operation
    requires a known strand (forward or reverse) but the location's strand is unknown.
    """

    pass


class LocationException(BioAnnotException):
    """
    Raised when a location constructor is given invalid inputs, such as a negative length.
    """

    pass


class SplicingException(LocationException):
    """
    Raised when a spliced location is given an invalid exon/intron structure.
    """

    pass


class NoExonsError(SplicingException):
    """
    Raised when a spliced location is constructed without any exons.
    """

    pass


class ExonStartError(SplicingException):
    """
    Raised when the first exon of a spliced location does not start at relative position 0.
    """

    pass


class ExonCountMismatchError(SplicingException):
    """
    Raised when the number of exon starts does not match the number of exon lengths.
    """

    pass


class ExonOverlapError(SplicingException):
    """
    Raised when exon blocks overlap, or abut without a positive-length intron between them.
    """

    pass


class IntronLengthError(SplicingException):
    """
    Raised when an intron has a non-positive length.
    """

    pass


class ExonLengthError(SplicingException):
    """
    Raised when an exon other than the first has a non-positive length.
    """

    pass


class AnnotParseException(BioAnnotException):
    """
    Base exception for errors parsing the text representation of a location.
    """

    pass


class PatternMismatchError(AnnotParseException):
    """
    Raised when a string does not have the shape of a location display string.
    """

    pass


class IntegerParseError(AnnotParseException):
    """
    Raised when a coordinate in a location display string is not a valid integer.
    """

    pass


class StrandParseError(AnnotParseException):
    """
    Raised when a strand designation cannot be represented by the requested strand type.
    """

    pass


class EndBeforeStartError(AnnotParseException):
    """
    Raised when a block in a location display string ends before it starts.
    """

    pass


class SplicedParseError(AnnotParseException):
    """
    Raised when a parsed spliced location has an invalid exon/intron structure. The underlying
    :class:`SplicingException` is chained as the cause.
    """

    pass
