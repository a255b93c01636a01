# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Symbol table: explicit bindings first (declaration order), prelude after.

Lookup is by bound name and returns the first binding in that order, so an
explicit `use anyhow::Result;` shadows the prelude's `Result`.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from quote_use.core.config import ExpandConfig
from quote_use.prelude import prelude_registry
from quote_use.use_parser import Binding, NameSegment

NO_PRELUDE = "no_prelude"
NO_STD = "no_std"


def _is_sentinel(binding: Binding, name: str) -> bool:
	segments = binding.path.segments
	return (
		binding.name.text == name
		and len(segments) == 1
		and isinstance(segments[0], NameSegment)
		and segments[0].text == name
	)


def split_sentinels(bindings: Iterable[Binding]) -> Tuple[List[Binding], bool, bool]:
	"""
	Remove `use no_prelude;` / `use no_std;` from `bindings`.

	Returns `(real_bindings, prelude_enabled, std_enabled)`.
	"""
	prelude = True
	std = True
	real: List[Binding] = []
	for binding in bindings:
		if _is_sentinel(binding, NO_PRELUDE):
			prelude = False
		elif _is_sentinel(binding, NO_STD):
			std = False
		else:
			real.append(binding)
	return real, prelude, std


class SymbolTable:
	def __init__(self, explicit: Sequence[Binding], prelude: Sequence[Binding] = ()) -> None:
		self.explicit: Tuple[Binding, ...] = tuple(explicit)
		self.prelude: Tuple[Binding, ...] = tuple(prelude)
		self._index: Dict[str, Binding] = {}
		for binding in self:
			self._index.setdefault(binding.name.text, binding)

	@classmethod
	def build(cls, declared: Iterable[Binding], config: ExpandConfig) -> "SymbolTable":
		explicit, prelude_enabled, std_enabled = split_sentinels(declared)
		prelude: Sequence[Binding] = ()
		if prelude_enabled and config.prelude.enabled:
			prelude = prelude_registry(config.prelude).bindings(std=std_enabled)
		return cls(explicit, prelude)

	def __iter__(self) -> Iterator[Binding]:
		yield from self.explicit
		yield from self.prelude

	def __len__(self) -> int:
		return len(self.explicit) + len(self.prelude)

	def __contains__(self, name: object) -> bool:
		return name in self._index

	def lookup(self, name: str) -> Optional[Binding]:
		return self._index.get(name)

	def effective(self) -> List[Binding]:
		"""The binding each name resolves to, in priority order (shadowed ones omitted)."""
		return [b for b in self if self._index[b.name.text] is b]


__all__ = ["SymbolTable", "split_sentinels", "NO_PRELUDE", "NO_STD"]
