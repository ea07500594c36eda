from __future__ import annotations


class BuildTagsError(Exception):
	pass


class PackageListError(BuildTagsError):
	pass


class ListDirError(BuildTagsError):
	pass


class HeaderError(BuildTagsError):
	pass


class ConstraintSyntaxError(BuildTagsError):
	def __init__(self, message: str, offset: int = 0):
		super().__init__(message)
		self.message = message
		self.offset = offset


class ParseError(BuildTagsError):
	"""Failure while collecting tags from one file, tagged with its path."""

	def __init__(self, path: str, cause: Exception):
		super().__init__(f"parse {path}: {cause}")
		self.path = path
		self.cause = cause
