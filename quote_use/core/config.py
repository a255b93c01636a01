# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Expansion configuration.

Everything that used to be a build-time feature flag (which prelude bundles
exist, whether `$ident` namespacing is active) lives in one explicit,
immutable `ExpandConfig` value that is threaded into the prelude registry and
the token rewriter. Invalid combinations are rejected when the value is
built, never halfway through an expansion.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional

from .errors import ConfigurationError

NAMESPACE_PREFIX = "__quote_use_"

FEATURE_PRELUDE_CORE = "prelude_core"
FEATURE_PRELUDE_STD = "prelude_std"
FEATURE_PRELUDE_2021 = "prelude_2021"
FEATURE_NAMESPACE_IDENTS = "namespace_idents"

KNOWN_FEATURES = (
	FEATURE_PRELUDE_CORE,
	FEATURE_PRELUDE_STD,
	FEATURE_PRELUDE_2021,
	FEATURE_NAMESPACE_IDENTS,
)
DEFAULT_FEATURES = (FEATURE_PRELUDE_CORE, FEATURE_PRELUDE_STD, FEATURE_PRELUDE_2021)

_SEED_INVALID = re.compile(r"[^A-Za-z0-9_]")


class DeclarationStyle(Enum):
	"""How a declaration is introduced in an invocation body."""

	POUND = "pound"  # `# use a::b;`
	BARE = "bare"  # `use a::b;`


@dataclass(frozen=True)
class PreludeConfig:
	"""
	Which prelude bundles are compiled in.

	Layered policy: `include_std` implies `include_core`; the edition bundle
	requires a foundational bundle.
	"""

	include_core: bool = True
	include_std: bool = True
	include_edition_2021: bool = True

	def __post_init__(self) -> None:
		if self.include_std and not self.include_core:
			object.__setattr__(self, "include_core", True)
		if self.include_edition_2021 and not self.include_core:
			raise ConfigurationError(
				f"{FEATURE_PRELUDE_2021} only works when {FEATURE_PRELUDE_CORE} or {FEATURE_PRELUDE_STD} is enabled"
			)

	@classmethod
	def disabled(cls) -> "PreludeConfig":
		return cls(include_core=False, include_std=False, include_edition_2021=False)

	@property
	def enabled(self) -> bool:
		return self.include_core


@dataclass(frozen=True)
class ExpandConfig:
	"""Configuration for one expansion (shared by all invocations that use it)."""

	prelude: PreludeConfig = field(default_factory=PreludeConfig)
	namespace_idents: bool = False
	namespace_seed: Optional[str] = None
	style: DeclarationStyle = DeclarationStyle.POUND

	@classmethod
	def from_features(
		cls,
		features: Iterable[str] = (),
		*,
		default_features: bool = True,
		namespace_seed: Optional[str] = None,
		style: DeclarationStyle = DeclarationStyle.POUND,
	) -> "ExpandConfig":
		"""
		Build a configuration from feature names (`prelude_core`, `prelude_std`,
		`prelude_2021`, `namespace_idents`).

		With `default_features` the three prelude bundles are enabled in
		addition to whatever is listed.
		"""
		selected = set(DEFAULT_FEATURES) if default_features else set()
		for name in features:
			name = name.strip()
			if not name:
				continue
			if name not in KNOWN_FEATURES:
				raise ConfigurationError(
					f"unknown feature '{name}' (known: {', '.join(KNOWN_FEATURES)})"
				)
			selected.add(name)
		prelude = PreludeConfig(
			include_core=FEATURE_PRELUDE_CORE in selected,
			include_std=FEATURE_PRELUDE_STD in selected,
			include_edition_2021=FEATURE_PRELUDE_2021 in selected,
		)
		return cls(
			prelude=prelude,
			namespace_idents=FEATURE_NAMESPACE_IDENTS in selected,
			namespace_seed=namespace_seed,
			style=style,
		)

	def namespace_prefix(self) -> str:
		"""
		Prefix for `$ident` names: `__quote_use_<seed>_`, or `__quote_use_`
		when no seed is configured.
		"""
		if not self.namespace_seed:
			return NAMESPACE_PREFIX
		return f"{NAMESPACE_PREFIX}{_SEED_INVALID.sub('_', self.namespace_seed)}_"


DEFAULT_CONFIG = ExpandConfig()


__all__ = [
	"DeclarationStyle",
	"PreludeConfig",
	"ExpandConfig",
	"DEFAULT_CONFIG",
	"KNOWN_FEATURES",
	"DEFAULT_FEATURES",
	"NAMESPACE_PREFIX",
]
