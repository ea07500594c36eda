"""Known GOOS, GOARCH, release and special build tags.

The GOOS and GOARCH lists hold past, present and future values, as listed in
cmd/go/internal/imports/build.go of the Go distribution.
"""

from __future__ import annotations

from typing import FrozenSet


KNOWN_OS: FrozenSet[str] = frozenset(
	{
		"aix",
		"android",
		"darwin",
		"dragonfly",
		"freebsd",
		"hurd",
		"illumos",
		"ios",
		"js",
		"linux",
		"nacl",
		"netbsd",
		"openbsd",
		"plan9",
		"solaris",
		"windows",
		"zos",
	}
)

KNOWN_ARCH: FrozenSet[str] = frozenset(
	{
		"386",
		"amd64",
		"amd64p32",
		"arm",
		"armbe",
		"arm64",
		"arm64be",
		"mips",
		"mipsle",
		"mips64",
		"mips64le",
		"mips64p32",
		"mips64p32le",
		"ppc",
		"ppc64",
		"ppc64le",
		"riscv",
		"riscv64",
		"s390",
		"s390x",
		"sparc",
		"sparc64",
		"wasm",
	}
)

# go1.N release tags are generated for 1 <= N < RELEASE_TAG_LIMIT.
RELEASE_TAG_PREFIX = "go1"
RELEASE_TAG_LIMIT = 256


def _release_tags() -> FrozenSet[str]:
	tags = {RELEASE_TAG_PREFIX}
	for minor in range(1, RELEASE_TAG_LIMIT):
		tags.add(f"{RELEASE_TAG_PREFIX}.{minor}")
	return frozenset(tags)


KNOWN_RELEASE_TAGS: FrozenSet[str] = _release_tags()

# TODO: decide whether msan and race belong with the special tags.
KNOWN_SPECIAL_TAGS: FrozenSet[str] = frozenset({"cgo", "gc", "gccgo"})


def is_known_os(tag: str) -> bool:
	return tag in KNOWN_OS


def is_known_arch(tag: str) -> bool:
	return tag in KNOWN_ARCH


def is_release_tag(tag: str) -> bool:
	return tag in KNOWN_RELEASE_TAGS


def is_special_tag(tag: str) -> bool:
	return tag in KNOWN_SPECIAL_TAGS
