from __future__ import annotations

from typing import Iterable, Iterator, List, Set, Tuple

from pydantic import BaseModel


class TagSet:
	"""Accumulates unique build tags across files and directories."""

	def __init__(self, tags: Iterable[str] = ()):
		self._tags: Set[str] = set(tags)

	def add(self, tag: str) -> None:
		self._tags.add(tag)

	def update(self, tags: Iterable[str]) -> None:
		self._tags.update(tags)

	def sorted(self) -> List[str]:
		return sorted(self._tags)

	def __contains__(self, tag: object) -> bool:
		return tag in self._tags

	def __iter__(self) -> Iterator[str]:
		return iter(self._tags)

	def __len__(self) -> int:
		return len(self._tags)

	def __repr__(self) -> str:
		return f"TagSet({self.sorted()!r})"


class TagReport(BaseModel):
	goos: List[str] = []
	goarch: List[str] = []
	release_tags: List[str] = []
	special_tags: List[str] = []
	build_tags: List[str] = []

	def buckets(self) -> List[Tuple[str, List[str]]]:
		return [
			("GOOS", self.goos),
			("GOARCH", self.goarch),
			("release-tag", self.release_tags),
			("special-tag", self.special_tags),
			("build-tag", self.build_tags),
		]
