from typing import Callable, Dict, Generic, Iterator, TypeVar

R = TypeVar("R")


class RefIDSet(Generic[R]):
    """Interns reference sequence names, so that all locations on the same reference share one identifier.

    The ``factory`` converts a name into its identifier the first time the name is seen; the default keeps the
    first string instance. Pass :meth:`intern` as the ``refid_factory`` when parsing locations.
    """

    def __init__(self, factory: Callable[[str], R] = str):
        self._factory = factory
        self._refids: Dict[str, R] = {}

    def __len__(self):
        return len(self._refids)

    def __contains__(self, name: str):
        return name in self._refids

    def __iter__(self) -> Iterator[str]:
        return iter(self._refids)

    def __repr__(self):
        return f"<RefIDSet {len(self)} refids>"

    def intern(self, name: str) -> R:
        """Returns the shared identifier for ``name``, creating it if necessary."""
        refid = self._refids.get(name)
        if refid is None:
            refid = self._factory(name)
            self._refids[name] = refid
        return refid
