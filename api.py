from __future__ import annotations

from typing import List

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from buildtags.census import run
from buildtags.config import Settings
from buildtags.errors import BuildTagsError
from buildtags.golist import list_package_dirs
from buildtags.model import TagReport


app = FastAPI(title="Go Build Tags")


class TagsRequest(BaseModel):
	patterns: List[str] = []
	dirs: bool = False


@app.post("/tags", response_model=TagReport)
def tags(req: TagsRequest) -> TagReport:
	try:
		if req.dirs:
			directories = req.patterns
		else:
			directories = list_package_dirs(req.patterns, gocmd=Settings.from_env().gocmd)
		return run(directories)
	except BuildTagsError as e:
		raise HTTPException(status_code=400, detail=str(e))


def create_app() -> FastAPI:
	return app
