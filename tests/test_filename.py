import pytest

from buildtags.filename import parse_filename_tags


@pytest.mark.parametrize(
	"name,expected",
	[
		("foo.go", []),
		("foo_test.go", []),
		("foo_linux.go", ["linux"]),
		("foo_amd64.go", ["amd64"]),
		("foo_linux_amd64.go", ["amd64", "linux"]),
		("foo_linux_test.go", ["linux"]),
		("foo_linux_amd64_test.go", ["amd64", "linux"]),
		("foo_amd64_linux.go", ["linux"]),
		("zsyscall_windows_386.go", ["386", "windows"]),
		("foo_bar.go", []),
		("foo_bar_baz_test.go", []),
		("linux.go", []),
		("_linux.go", ["linux"]),
		("foo_linux.pb.go", ["linux"]),
	],
)
def test_parse_filename_tags(name, expected):
	assert parse_filename_tags(name) == expected


def test_extension_does_not_matter():
	for name in ["foo", "foo_linux", "foo_linux_arm64", "foo_js_wasm_test", "a_b"]:
		assert parse_filename_tags(name) == parse_filename_tags(name + ".go")


def test_os_must_precede_arch():
	# Only the trailing component counts when the pair is out of order.
	assert parse_filename_tags("foo_amd64_linux.go") == ["linux"]
	assert parse_filename_tags("foo_amd64_custom.go") == []
