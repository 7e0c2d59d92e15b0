from bioannot.location import Contig, RefIDSet, Spliced, Strand


class TestRefIDSet:
    def test_intern_shares_handle(self):
        refids = RefIDSet()
        first = refids.intern("".join(["chr", "IV"]))
        second = refids.intern("".join(["chr", "IV"]))
        assert first == "chrIV"
        assert first is second
        assert len(refids) == 1
        assert "chrIV" in refids
        assert "chrV" not in refids

    def test_factory(self):
        refids = RefIDSet(factory=lambda name: (len(name), name))
        assert refids.intern("chrX") == (4, "chrX")
        assert refids.intern("chrX") is refids.intern("chrX")
        refids.intern("chrXVI")
        assert list(refids) == ["chrX", "chrXVI"]

    def test_parse_with_interning(self):
        refids = RefIDSet()
        contig = Contig.from_str("chrXVI:173151-173162(+)", refid_factory=refids.intern)
        spliced = Spliced.from_str("chrXVI:173151-173162;173571-173665(+)", Strand, refids.intern)
        assert contig.refid is spliced.refid
        assert len(refids) == 1
        assert spliced.contig_intersection(contig).refid is contig.refid
