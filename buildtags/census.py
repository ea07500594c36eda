from __future__ import annotations

import logging
import os
from typing import Iterable

from .classify import classify
from .errors import BuildTagsError, ParseError
from .filename import parse_filename_tags
from .fs_scan import list_go_files
from .header import read_header, scan_header
from .model import TagReport, TagSet


log = logging.getLogger(__name__)


def parse_file(tags: TagSet, directory: str, name: str) -> None:
	"""Add the build tags of one Go file, from its name and its header."""
	tags.update(parse_filename_tags(name))

	path = os.path.join(directory, name)
	try:
		header = read_header(path)
		scan_header(tags, header)
	except BuildTagsError as e:
		raise ParseError(path, e) from e


def collect_tags(directories: Iterable[str]) -> TagSet:
	tags = TagSet()
	for directory in directories:
		names = list_go_files(directory)
		log.debug("%s: %d go files", directory, len(names))
		for name in names:
			parse_file(tags, directory, name)
	return tags


def run(directories: Iterable[str]) -> TagReport:
	tags = collect_tags(directories)
	log.debug("collected %d tags", len(tags))
	return classify(tags)
