# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def body_file(tmp_path: Path) -> Callable[..., str]:
	"""Write an invocation body under tmp_path and return its path for `main()`."""

	def write(text: str, name: str = "body.rs") -> str:
		path = tmp_path / name
		path.write_text(text)
		return str(path)

	return write
