from __future__ import annotations

import os
from typing import List

from .errors import ListDirError


GO_EXTENSION = ".go"


def is_go_file(filename: str) -> bool:
	_, ext = os.path.splitext(filename)
	return ext == GO_EXTENSION


def list_go_files(directory: str) -> List[str]:
	"""Return the names of the regular Go files in a package directory."""
	files: List[str] = []
	try:
		with os.scandir(directory) as entries:
			for entry in entries:
				# Symlinks and directories are skipped.
				if entry.is_file(follow_symlinks=False) and is_go_file(entry.name):
					files.append(entry.name)
	except OSError as e:
		raise ListDirError(f"readdir {directory}: {e}") from e
	return sorted(files)
