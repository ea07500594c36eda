import pytest

from buildtags.constraint import (
	AndExpr,
	NotExpr,
	OrExpr,
	TagExpr,
	collect_tags,
	is_build_line,
	is_go_build,
	is_plus_build,
	parse,
)
from buildtags.errors import ConstraintSyntaxError
from buildtags.model import TagSet


def tags_of(line):
	tags = TagSet()
	collect_tags(tags, parse(line))
	return set(tags)


@pytest.mark.parametrize(
	"line,expected",
	[
		("//go:build linux", True),
		("//go:build", True),
		("//go:build\tlinux", True),
		("//go:build linux\n", True),
		("//go:buildlinux", False),
		("// go:build linux", False),
		(" //go:build linux", False),
		("//go:build linux\n\n", False),
		("//go:build a\nb", False),
		("// +build linux", False),
	],
)
def test_is_go_build(line, expected):
	assert is_go_build(line) is expected


@pytest.mark.parametrize(
	"line,expected",
	[
		("// +build linux", True),
		("//+build linux", True),
		("//   +build linux", True),
		("// +build", True),
		("// +buildlinux", False),
		("/* +build linux */", False),
		("# +build linux", False),
		("// +build a\nb", False),
		("//go:build linux", False),
	],
)
def test_is_plus_build(line, expected):
	assert is_plus_build(line) is expected


def test_is_build_line():
	assert is_build_line("//go:build linux")
	assert is_build_line("// +build linux")
	assert not is_build_line("// Package foo does things.")
	assert not is_build_line("")


def test_go_build_tree():
	expr = parse("//go:build (linux || darwin) && !cgo")
	assert expr == AndExpr(OrExpr(TagExpr("linux"), TagExpr("darwin")), NotExpr(TagExpr("cgo")))
	assert str(expr) == "(linux || darwin) && !cgo"


def test_go_build_precedence():
	expr = parse("//go:build a || b && c")
	assert expr == OrExpr(TagExpr("a"), AndExpr(TagExpr("b"), TagExpr("c")))


def test_plus_build_tree():
	expr = parse("// +build linux,!cgo darwin")
	assert expr == OrExpr(AndExpr(TagExpr("linux"), NotExpr(TagExpr("cgo"))), TagExpr("darwin"))


def test_collect_tags_ignores_structure():
	assert tags_of("// +build linux,!cgo darwin") == {"linux", "cgo", "darwin"}
	assert tags_of("//go:build (linux || darwin) && !cgo") == {"linux", "darwin", "cgo"}
	assert tags_of("//go:build !(go1.18 && (purego || appengine))") == {"go1.18", "purego", "appengine"}


def test_plus_build_invalid_literals_become_ignore():
	assert tags_of("// +build") == {"ignore"}
	assert tags_of("// +build !") == {"ignore"}
	assert tags_of("// +build !!linux") == {"ignore"}
	assert tags_of("// +build foo-bar linux") == {"ignore", "linux"}


@pytest.mark.parametrize(
	"line,message",
	[
		("//go:build", "unexpected end of expression"),
		("//go:build linux &&", "unexpected end of expression"),
		("//go:build linux darwin", "unexpected token darwin"),
		("//go:build (linux", "missing close paren"),
		("//go:build (linux ||", "missing close paren"),
		("//go:build !!linux", "double negation not allowed"),
		("//go:build linux & darwin", "invalid syntax at &"),
		("//go:build linux, darwin", "invalid syntax at ,"),
		("//go:build )", "unexpected token )"),
		("// a comment", "not a build constraint"),
	],
)
def test_parse_errors(line, message):
	with pytest.raises(ConstraintSyntaxError) as exc_info:
		parse(line)
	assert exc_info.value.message == message


def test_go_build_too_large():
	line = "//go:build " + " || ".join(f"t{i}" for i in range(1001))
	with pytest.raises(ConstraintSyntaxError, match="build expression too large"):
		parse(line)


def test_long_chain_at_size_limit():
	line = "//go:build " + " || ".join(f"t{i}" for i in range(1000))
	assert len(tags_of(line)) == 1000


def test_deep_parens():
	assert tags_of("//go:build " + "(" * 100 + "a" + ")" * 100) == {"a"}
	with pytest.raises(ConstraintSyntaxError, match="too deeply nested"):
		parse("//go:build " + "(" * 300 + "a" + ")" * 300)


def test_plus_build_operator_limit():
	# 101 literals join with 100 operators.
	assert len(tags_of("// +build " + " ".join(f"t{i}" for i in range(101)))) == 101
	assert len(tags_of("// +build " + ",".join(f"t{i}" for i in range(101)))) == 101
	with pytest.raises(ConstraintSyntaxError, match="expression too complex"):
		parse("// +build " + " ".join(f"t{i}" for i in range(150)))
	with pytest.raises(ConstraintSyntaxError, match="expression too complex"):
		parse("// +build " + " ".join(f"a{i},b{i}" for i in range(60)))
