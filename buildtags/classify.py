from __future__ import annotations

from typing import Iterable, List

from .model import TagReport
from .registry import is_known_arch, is_known_os, is_release_tag, is_special_tag


def classify(tags: Iterable[str]) -> TagReport:
	"""Partition tags into the GOOS, GOARCH, release, special and build buckets."""
	goos: List[str] = []
	goarch: List[str] = []
	release: List[str] = []
	special: List[str] = []
	build: List[str] = []
	for tag in set(tags):
		if is_known_os(tag):
			goos.append(tag)
		elif is_known_arch(tag):
			goarch.append(tag)
		elif is_release_tag(tag):
			release.append(tag)
		elif is_special_tag(tag):
			special.append(tag)
		else:
			build.append(tag)

	return TagReport(
		goos=sorted(goos),
		goarch=sorted(goarch),
		release_tags=sorted(release),
		special_tags=sorted(special),
		build_tags=sorted(build),
	)


def format_bucket(label: str, tags: List[str]) -> str:
	return f"{label}: [{' '.join(tags)}]"


def format_report(report: TagReport) -> List[str]:
	return [format_bucket(label, tags) for label, tags in report.buckets()]
