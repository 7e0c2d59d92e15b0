from bioannot.io.bed.bed import RGB, BED3, BED6, BED12  # noqa: F401
