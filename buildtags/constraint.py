"""Parsing of //go:build and // +build constraint lines.

Only the tag atoms matter here: expressions are parsed into a small tree and
walked to collect every tag, regardless of negation or grouping. The grammar
and error messages follow go/build/constraint.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .errors import ConstraintSyntaxError
from .model import TagSet


# Maximum number of terms in one //go:build expression.
MAX_SIZE = 1000
# Maximum number of AND/OR operators in one // +build line.
MAX_OLD_SIZE = 100
# Maximum parenthesis nesting in one //go:build expression.
MAX_DEPTH = 100

_GO_BUILD = "//go:build"
_PLUS_BUILD = "+build"
_IGNORE = "ignore"


@dataclass(frozen=True)
class TagExpr:
	tag: str

	def __str__(self) -> str:
		return self.tag


@dataclass(frozen=True)
class NotExpr:
	x: "Expr"

	def __str__(self) -> str:
		s = str(self.x)
		if isinstance(self.x, (AndExpr, OrExpr)):
			s = f"({s})"
		return "!" + s


@dataclass(frozen=True)
class AndExpr:
	x: "Expr"
	y: "Expr"

	def __str__(self) -> str:
		return f"{_and_arg(self.x)} && {_and_arg(self.y)}"


@dataclass(frozen=True)
class OrExpr:
	x: "Expr"
	y: "Expr"

	def __str__(self) -> str:
		return f"{_or_arg(self.x)} || {_or_arg(self.y)}"


Expr = Union[TagExpr, NotExpr, AndExpr, OrExpr]


def _and_arg(x: Expr) -> str:
	s = str(x)
	if isinstance(x, OrExpr):
		s = f"({s})"
	return s


def _or_arg(x: Expr) -> str:
	s = str(x)
	if isinstance(x, AndExpr):
		s = f"({s})"
	return s


def _is_tag_char(c: str) -> bool:
	return c.isalpha() or c.isdecimal() or c in "_."


def is_valid_tag(word: str) -> bool:
	return word != "" and all(_is_tag_char(c) for c in word)


def _strip_newline(line: str) -> Optional[str]:
	# A single trailing newline is allowed, nothing more.
	if line.endswith("\n"):
		line = line[:-1]
	if "\n" in line:
		return None
	return line


def _split_go_build(line: str) -> Optional[str]:
	line = _strip_newline(line)
	if line is None or not line.startswith(_GO_BUILD):
		return None
	rest = line.strip()[len(_GO_BUILD) :]
	expr = rest.strip()
	# "//go:buildfoo" is some other directive.
	if len(rest) == len(expr) and rest != "":
		return None
	return expr


def _split_plus_build(line: str) -> Optional[str]:
	line = _strip_newline(line)
	if line is None or not line.startswith("//"):
		return None
	# The space after // is optional.
	line = line[2:].strip()
	if not line.startswith(_PLUS_BUILD):
		return None
	rest = line[len(_PLUS_BUILD) :]
	expr = rest.strip()
	if len(rest) == len(expr) and rest != "":
		return None
	return expr


def is_go_build(line: str) -> bool:
	return _split_go_build(line) is not None


def is_plus_build(line: str) -> bool:
	return _split_plus_build(line) is not None


def is_build_line(line: str) -> bool:
	return is_go_build(line) or is_plus_build(line)


class _ExprParser:
	def __init__(self, text: str):
		self.s = text
		self.pos = 0
		self.tok = ""
		self.is_tag = False
		self.size = 0
		self.depth = 0

	def error(self, message: str, offset: Optional[int] = None) -> ConstraintSyntaxError:
		return ConstraintSyntaxError(message, self.pos if offset is None else offset)

	def lex(self) -> None:
		self.is_tag = False
		s = self.s
		while self.pos < len(s) and s[self.pos] in " \t":
			self.pos += 1
		if self.pos >= len(s):
			self.tok = ""
			self.pos = len(s)
			return

		c = s[self.pos]
		if c in "()!":
			self.tok = c
			self.pos += 1
			return
		if c in "&|":
			if self.pos + 1 >= len(s) or s[self.pos + 1] != c:
				raise self.error(f"invalid syntax at {c}")
			self.tok = c + c
			self.pos += 2
			return

		end = self.pos
		while end < len(s) and _is_tag_char(s[end]):
			end += 1
		if end == self.pos:
			raise self.error(f"invalid syntax at {c}")
		self.tok = s[self.pos : end]
		self.pos = end
		self.is_tag = True

	def parse(self) -> Expr:
		x = self.or_()
		if self.tok != "":
			raise self.error(f"unexpected token {self.tok}")
		return x

	def or_(self) -> Expr:
		x = self.and_()
		while self.tok == "||":
			x = OrExpr(x, self.and_())
		return x

	def and_(self) -> Expr:
		x = self.not_()
		while self.tok == "&&":
			x = AndExpr(x, self.not_())
		return x

	def not_(self) -> Expr:
		self.size += 1
		if self.size > MAX_SIZE:
			raise self.error("build expression too large")
		self.lex()
		if self.tok == "!":
			self.lex()
			if self.tok == "!":
				raise self.error("double negation not allowed")
			return NotExpr(self.atom())
		return self.atom()

	def atom(self) -> Expr:
		# The first token is already in self.tok.
		if self.tok == "(":
			start = self.pos
			self.depth += 1
			if self.depth > MAX_DEPTH:
				raise self.error("build expression too deeply nested")
			try:
				x = self.or_()
			except ConstraintSyntaxError as e:
				if e.message == "unexpected end of expression":
					raise ConstraintSyntaxError("missing close paren", e.offset) from e
				raise
			self.depth -= 1
			if self.tok != ")":
				raise self.error("missing close paren", start)
			self.lex()
			return x

		if not self.is_tag:
			if self.tok == "":
				raise self.error("unexpected end of expression")
			raise self.error(f"unexpected token {self.tok}")
		tok = self.tok
		self.lex()
		return TagExpr(tok)


def parse_go_build_expr(text: str) -> Expr:
	return _ExprParser(text).parse()


def parse_plus_build_expr(text: str) -> Expr:
	"""Parse the legacy form: space-separated OR of comma-separated AND terms.

	Literals that are not valid tags turn into the tag "ignore".
	"""
	size = 0
	x: Optional[Expr] = None
	for clause in text.split():
		y: Optional[Expr] = None
		for lit in clause.split(","):
			if lit.startswith("!!") or lit == "!":
				z: Expr = TagExpr(_IGNORE)
			else:
				neg = lit.startswith("!")
				if neg:
					lit = lit[1:]
				z = TagExpr(lit) if is_valid_tag(lit) else TagExpr(_IGNORE)
				if neg:
					z = NotExpr(z)
			if y is None:
				y = z
				continue
			size += 1
			if size > MAX_OLD_SIZE:
				raise ConstraintSyntaxError("expression too complex")
			y = AndExpr(y, z)
		if y is None:
			continue
		if x is None:
			x = y
			continue
		size += 1
		if size > MAX_OLD_SIZE:
			raise ConstraintSyntaxError("expression too complex")
		x = OrExpr(x, y)
	if x is None:
		x = TagExpr(_IGNORE)
	return x


def parse(line: str) -> Expr:
	"""Parse a single //go:build or // +build line into an expression."""
	text = _split_go_build(line)
	if text is not None:
		return parse_go_build_expr(text)
	text = _split_plus_build(line)
	if text is not None:
		return parse_plus_build_expr(text)
	raise ConstraintSyntaxError("not a build constraint")


def collect_tags(tags: TagSet, expr: Expr) -> None:
	"""Add every tag referenced by expr to tags."""
	stack = [expr]
	while stack:
		node = stack.pop()
		if isinstance(node, TagExpr):
			tags.add(node.tag)
		elif isinstance(node, NotExpr):
			stack.append(node.x)
		elif isinstance(node, (AndExpr, OrExpr)):
			stack.append(node.y)
			stack.append(node.x)
