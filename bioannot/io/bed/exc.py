from bioannot.exc import BioAnnotException


class BEDException(BioAnnotException):
    pass


class BEDParseException(BEDException):
    """
    Raised when a BED line has too few columns, or a column that cannot be parsed.
    """

    pass


class BEDMissingSequenceNameError(BEDException):
    """
    Raised when exporting a location without a reference sequence name.
    """

    pass
