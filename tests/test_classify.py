from buildtags.classify import classify, format_report
from buildtags.model import TagReport, TagSet
from buildtags.registry import (
	KNOWN_ARCH,
	KNOWN_OS,
	KNOWN_RELEASE_TAGS,
	KNOWN_SPECIAL_TAGS,
	is_release_tag,
)


def test_classify_buckets():
	tags = TagSet(["linux", "amd64", "go1.18", "cgo", "purego", "darwin", "go1", "integration"])
	report = classify(tags)
	assert report == TagReport(
		goos=["darwin", "linux"],
		goarch=["amd64"],
		release_tags=["go1", "go1.18"],
		special_tags=["cgo"],
		build_tags=["integration", "purego"],
	)


def test_classify_is_deterministic():
	tags = TagSet(["z", "a", "windows", "arm", "gc", "go1.2", "m"])
	assert classify(tags) == classify(tags)
	assert classify(tags) == classify(list(reversed(tags.sorted())))


def test_buckets_are_disjoint():
	tags = TagSet(["linux", "arm64", "go1.21", "gccgo", "custom", "go1.256", "go2", "Linux"])
	report = classify(tags)
	seen = [tag for _, bucket in report.buckets() for tag in bucket]
	assert sorted(seen) == tags.sorted()
	assert len(seen) == len(set(seen))


def test_registry_sets_do_not_overlap():
	sets = [KNOWN_OS, KNOWN_ARCH, KNOWN_RELEASE_TAGS, KNOWN_SPECIAL_TAGS]
	for i, a in enumerate(sets):
		for b in sets[i + 1 :]:
			assert not a & b


def test_release_tags_range():
	assert is_release_tag("go1")
	for minor in range(1, 256):
		assert is_release_tag(f"go1.{minor}")
	assert not is_release_tag("go1.0")
	assert not is_release_tag("go1.256")
	assert not is_release_tag("go2")
	assert classify(["go1.256"]).build_tags == ["go1.256"]


def test_format_report():
	report = classify(["linux", "amd64", "go1.18", "cgo", "purego", "integration"])
	assert format_report(report) == [
		"GOOS: [linux]",
		"GOARCH: [amd64]",
		"release-tag: [go1.18]",
		"special-tag: [cgo]",
		"build-tag: [integration purego]",
	]


def test_format_empty_report():
	assert format_report(classify([])) == [
		"GOOS: []",
		"GOARCH: []",
		"release-tag: []",
		"special-tag: []",
		"build-tag: []",
	]
