from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

import uvicorn

from buildtags.census import run
from buildtags.classify import format_report
from buildtags.config import Settings
from buildtags.errors import BuildTagsError
from buildtags.golist import list_package_dirs


log = logging.getLogger(__name__)


def cmd_report(args: argparse.Namespace) -> None:
	if args.dirs:
		directories = args.patterns
	else:
		settings = Settings.from_env()
		directories = list_package_dirs(args.patterns, gocmd=settings.gocmd)

	report = run(directories)
	if args.json:
		print(json.dumps(report.model_dump(), indent=2))
		return
	for line in format_report(report):
		print(line)


def cmd_serve(args: argparse.Namespace) -> None:
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)


def main(argv: Optional[List[str]] = None) -> None:
	parser = argparse.ArgumentParser(prog="buildtags")
	parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
	sub = parser.add_subparsers(dest="cmd", required=True)

	pr = sub.add_parser("report", help="Print the build tags used by Go packages")
	pr.add_argument("patterns", nargs="*", help="Go package patterns, as accepted by go list")
	pr.add_argument("--dirs", action="store_true", help="Treat arguments as package directories")
	pr.add_argument("--json", action="store_true", help="Print the report as JSON")
	pr.set_defaults(func=cmd_report)

	ps = sub.add_parser("serve", help="Run FastAPI server")
	ps.add_argument("--host", default="127.0.0.1")
	ps.add_argument("--port", type=int, default=8000)
	ps.add_argument("--reload", action="store_true")
	ps.set_defaults(func=cmd_serve)

	args = parser.parse_args(argv)
	level = logging.DEBUG if args.verbose else logging.WARNING
	logging.basicConfig(level=level, format="%(levelname)s: %(message)s")
	# basicConfig leaves the level alone when handlers already exist.
	logging.getLogger().setLevel(level)

	try:
		args.func(args)
	except BuildTagsError as e:
		log.debug("aborted", exc_info=True)
		sys.exit(str(e))


if __name__ == "__main__":
	main()
