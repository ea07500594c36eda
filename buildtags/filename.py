"""Implicit build tags carried by Go file names.

Adapted from the goodOSArchFile method in src/go/build/build.go of the Go
distribution: name_GOOS, name_GOARCH and name_GOOS_GOARCH, each optionally
followed by _test.
"""

from __future__ import annotations

from typing import List

from .registry import is_known_arch, is_known_os


def parse_filename_tags(name: str) -> List[str]:
	"""Return the GOARCH and GOOS tags implied by a file base name.

	The result holds at most two tags, architecture first.
	"""
	dot = name.find(".")
	if dot != -1:
		name = name[:dot]

	i = name.find("_")
	if i < 0:
		return []

	parts = name[i + 1 :].split("_")
	if parts and parts[-1] == "test":
		parts = parts[:-1]
	n = len(parts)

	if n >= 2 and is_known_os(parts[n - 2]) and is_known_arch(parts[n - 1]):
		return [parts[n - 1], parts[n - 2]]
	if n >= 1 and (is_known_os(parts[n - 1]) or is_known_arch(parts[n - 1])):
		return [parts[n - 1]]
	return []
