"""Census of the build tags used by Go packages.

Modules:
- registry.py: Known GOOS, GOARCH, release and special tags.
- filename.py: Implicit tags from _GOOS/_GOARCH file name suffixes.
- header.py: File header extraction and build constraint line scanning.
- constraint.py: //go:build and // +build expression parsing.
- classify.py: Partitioning of collected tags into buckets.
- census.py: Tag collection across package directories.
- fs_scan.py: Go file listing.
- golist.py: Package pattern resolution through `go list`.
- model.py: Tag set and report data structures.
"""

__all__ = [
	"registry",
	"filename",
	"header",
	"constraint",
	"classify",
	"census",
	"fs_scan",
	"golist",
	"model",
	"config",
	"errors",
]
