from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel


DEFAULT_GOCMD = "go"


class Settings(BaseModel):
	gocmd: str = DEFAULT_GOCMD

	@classmethod
	def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
		env = os.environ if environ is None else environ
		# An empty GOCMD is kept as is.
		if "GOCMD" in env:
			return cls(gocmd=env["GOCMD"])
		return cls()
