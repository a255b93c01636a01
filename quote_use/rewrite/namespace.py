"""
`$ident` namespacing helpers.

With the `namespace_idents` feature an identifier written as `$name` becomes
`<prefix>name` (see `ExpandConfig.namespace_prefix`), and `$$` stands for a
literal `$`. The token rewriter applies this to token streams; the helpers
here apply it to plain strings.
"""

from __future__ import annotations

from typing import Any

from quote_use.core.config import DEFAULT_CONFIG, FEATURE_NAMESPACE_IDENTS, ExpandConfig
from quote_use.core.errors import ConfigurationError
from quote_use.tokens import Ident

ESCAPE = "$"


def namespace_text(text: str, prefix: str) -> str:
	if text.startswith(ESCAPE * 2):
		return text[1:]
	if text.startswith(ESCAPE):
		return prefix + text[1:]
	return text


def format_ident_namespaced(fmt: str, *args: Any, config: ExpandConfig = DEFAULT_CONFIG, **kwargs: Any) -> Ident:
	"""
	Like `fmt.format(...)` but a leading `$` is replaced by the namespace
	prefix first: `format_ident_namespaced("$ident_{}", 2)` gives
	`__quote_use_ident_2` when no seed is configured.
	"""
	if not config.namespace_idents:
		raise ConfigurationError(f"format_ident_namespaced requires the {FEATURE_NAMESPACE_IDENTS} feature")
	return Ident(namespace_text(fmt, config.namespace_prefix()).format(*args, **kwargs))


__all__ = ["ESCAPE", "namespace_text", "format_ident_namespaced"]
