from bioannot.exc import InvalidStrandException, LocationException


class ObjectValidation:
    @staticmethod
    def require_known_strand(location):
        """Returns the strand of the location as a :class:`ReqStrand`, raising if it is unknown."""
        req_strand = location.strand.try_req_strand()
        if req_strand is None:
            raise InvalidStrandException("Location must have a known strand:\n{}".format(repr(location)))
        return req_strand

    @staticmethod
    def require_non_negative_length(length: int):
        if length < 0:
            raise LocationException("Length must be non-negative: {}".format(length))

    @staticmethod
    def require_non_negative_distance(dist: int):
        if dist < 0:
            raise ValueError("Extension distances must be non-negative: {}".format(dist))

    @staticmethod
    def require_object_has_type(obj, required_type):
        if not isinstance(obj, required_type):
            raise TypeError("Object must have type {}".format(required_type))
