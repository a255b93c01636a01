# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Prelude registry: default bindings with the lowest lookup priority.

One registry exists per `PreludeConfig` per process. It is built on first use
by `prelude_registry()` (memoized, so later calls return the same object) and
is immutable afterwards; `bindings()` hands out tuples, never lists.

Bundle order is fixed: core, then std, then the 2021 edition additions.
"""

from __future__ import annotations

import functools
from pathlib import Path
from typing import Tuple

from quote_use.core.config import PreludeConfig
from quote_use.core.errors import InternalInvariantViolation, UseSyntaxError
from quote_use.use_parser import Binding, parse_declaration_text

_BUNDLE_DIR = Path(__file__).parent

CORE_BUNDLE = "core.rs"
STD_BUNDLE = "std.rs"
EDITION_2021_BUNDLE = "rust_2021.rs"


def _load_bundle(name: str) -> Tuple[Binding, ...]:
	path = _BUNDLE_DIR / name
	try:
		return tuple(parse_declaration_text(path.read_text(), file=str(path)))
	except UseSyntaxError as err:
		raise InternalInvariantViolation(f"prelude bundle {name} should be valid: {err}") from err


class PreludeRegistry:
	"""Read-only view over the selected prelude bundles."""

	def __init__(self, config: PreludeConfig) -> None:
		self.config = config
		core = _load_bundle(CORE_BUNDLE) if config.include_core else ()
		std = _load_bundle(STD_BUNDLE) if config.include_std else ()
		edition = _load_bundle(EDITION_2021_BUNDLE) if config.include_edition_2021 else ()
		self._with_std: Tuple[Binding, ...] = core + std + edition
		self._without_std: Tuple[Binding, ...] = core + edition

	def bindings(self, *, std: bool = True) -> Tuple[Binding, ...]:
		"""
		All prelude bindings in priority order. `std=False` drops the std
		bundle (the `use no_std;` sentinel) and keeps core and edition items.
		"""
		return self._with_std if std else self._without_std

	def __len__(self) -> int:
		return len(self._with_std)

	def __repr__(self) -> str:
		return f"PreludeRegistry({self.config!r}, {len(self)} bindings)"


@functools.lru_cache(maxsize=None)
def prelude_registry(config: PreludeConfig) -> PreludeRegistry:
	"""Construct-once accessor; the same registry is returned for equal configs."""
	return PreludeRegistry(config)


__all__ = [
	"PreludeRegistry",
	"prelude_registry",
	"CORE_BUNDLE",
	"STD_BUNDLE",
	"EDITION_2021_BUNDLE",
]
