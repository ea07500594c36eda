from __future__ import annotations

import logging
import subprocess
from typing import List, Sequence

from .config import DEFAULT_GOCMD
from .errors import PackageListError


log = logging.getLogger(__name__)

LIST_FORMAT = "{{.Dir}}"


def _command_error(args: Sequence[str], returncode: int, stderr: str) -> PackageListError:
	name = " ".join(args[:2])
	detail = " ".join(stderr.split())
	if detail:
		return PackageListError(f"{name}: exit status {returncode}: {detail}")
	return PackageListError(f"{name}: exit status {returncode}")


def list_package_dirs(patterns: Sequence[str], gocmd: str = DEFAULT_GOCMD) -> List[str]:
	"""Return the source directories of the packages named by patterns."""
	args = [gocmd, "list", "-f", LIST_FORMAT, *patterns]
	log.debug("running %s", " ".join(args))
	try:
		proc = subprocess.run(args, capture_output=True, text=True, check=False)
	except OSError as e:
		raise PackageListError(f"{gocmd} list: {e}") from e
	if proc.returncode != 0:
		raise _command_error(args, proc.returncode, proc.stderr)

	dirs = [line for line in proc.stdout.splitlines() if line.strip()]
	log.debug("%d package directories", len(dirs))
	return dirs
