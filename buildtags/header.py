"""Go file headers: everything before the package clause.

The header holds the leading comments and blank lines of a Go source file.
Build constraint lines are only honored there.
"""

from __future__ import annotations

import logging
import re

from . import constraint
from .errors import ConstraintSyntaxError, HeaderError
from .model import TagSet


log = logging.getLogger(__name__)

_BOM = "\ufeff"
_IDENT = re.compile(r"[^\W\d]\w*")


def find_package_clause(text: str) -> int:
	"""Return the offset of the package keyword in Go source text.

	Leading whitespace, line comments and block comments are skipped. A
	HeaderError is raised when the first token is not `package <name>`.
	"""
	pos = 1 if text.startswith(_BOM) else 0
	n = len(text)
	while pos < n:
		if text[pos] in " \t\r\n":
			pos += 1
		elif text.startswith("//", pos):
			end = text.find("\n", pos)
			pos = n if end == -1 else end + 1
		elif text.startswith("/*", pos):
			end = text.find("*/", pos + 2)
			if end == -1:
				raise HeaderError("comment not terminated")
			pos = end + 2
		else:
			break

	m = _IDENT.match(text, pos)
	if m is None or m.group() != "package":
		found = m.group() if m else (text[pos] if pos < n else "EOF")
		raise HeaderError(f"expected 'package', found {found!r}")

	start = pos
	pos = m.end()
	while pos < n and text[pos] in " \t\r\n":
		pos += 1
	name = _IDENT.match(text, pos)
	if name is None:
		raise HeaderError("expected package name")
	_expect_clause_end(text, name.end())
	return start


def _expect_clause_end(text: str, pos: int) -> None:
	# The package name must be followed by a newline, a semicolon or EOF,
	# possibly after comments on the same line.
	n = len(text)
	while pos < n:
		if text[pos] in " \t\r":
			pos += 1
		elif text[pos] in ";\n" or text.startswith("//", pos):
			return
		elif text.startswith("/*", pos):
			end = text.find("*/", pos + 2)
			if end == -1:
				raise HeaderError("comment not terminated")
			if "\n" in text[pos:end]:
				return
			pos = end + 2
		else:
			m = _IDENT.match(text, pos)
			found = m.group() if m else text[pos]
			raise HeaderError(f"expected ';', found {found!r}")


def read_header(path: str) -> str:
	"""Return the header of the named Go file."""
	try:
		with open(path, "rb") as fh:
			src = fh.read()
	except OSError as e:
		raise HeaderError(f"read header: {e}") from e
	try:
		text = src.decode("utf-8")
	except UnicodeDecodeError as e:
		raise HeaderError(f"read header: illegal UTF-8 encoding: {e}") from e
	return text[: find_package_clause(text)]


def scan_header(tags: TagSet, header: str) -> None:
	"""Add the tags of every build constraint line in header to tags."""
	for lineno, line in enumerate(header.split("\n"), start=1):
		line = line.rstrip("\r")
		if not constraint.is_build_line(line):
			continue
		try:
			expr = constraint.parse(line)
		except ConstraintSyntaxError as e:
			raise ConstraintSyntaxError(f"line {lineno}: {e.message}", e.offset) from e
		log.debug("line %d: %s", lineno, line)
		constraint.collect_tags(tags, expr)
