# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import pytest

from quote_use.core.config import ExpandConfig
from quote_use.core.errors import ConfigurationError
from quote_use.macros import expand
from quote_use.rewrite import format_ident_namespaced, namespace_text
from quote_use.tokens import Ident, lex

NAMESPACED = ExpandConfig(namespace_idents=True)


def _expand(body: str, config: ExpandConfig = NAMESPACED) -> str:
	return str(expand(body, config=config))


def test_dollar_ident_is_prefixed():
	assert _expand("$ident;") == str(lex("__quote_use_ident;"))


def test_dollar_lifetime_is_prefixed():
	assert _expand("&$'a T") == str(lex("&'__quote_use_a T"))


def test_double_dollar_is_a_literal_dollar():
	assert _expand("$$ident") == str(lex("$ident"))


def test_dollar_before_non_ident_is_kept():
	assert _expand("$ (x)") == str(lex("$ (x)"))


def test_namespaced_names_skip_symbol_lookup():
	assert _expand("# use a::Some;\n$Some Some") == str(lex("__quote_use_Some ::a::Some"))


def test_dollar_inside_groups():
	assert _expand("f($x, [$y])") == str(lex("f(__quote_use_x, [__quote_use_y])"))


def test_seeded_prefix():
	config = ExpandConfig(namespace_idents=True, namespace_seed="my-file")
	assert config.namespace_prefix() == "__quote_use_my_file_"
	assert _expand("$x", config) == "__quote_use_my_file_x"


def test_disabled_namespacing_leaves_dollar_alone():
	assert _expand("$ident", ExpandConfig()) == str(lex("$ident"))


def test_namespace_text():
	assert namespace_text("$name", "p_") == "p_name"
	assert namespace_text("$$name", "p_") == "$name"
	assert namespace_text("name", "p_") == "name"


def test_format_ident_namespaced():
	assert format_ident_namespaced("$ident_{}", 2, config=NAMESPACED) == Ident("__quote_use_ident_2")
	assert format_ident_namespaced("plain_{n}", n="x", config=NAMESPACED) == Ident("plain_x")


def test_format_ident_namespaced_requires_feature():
	with pytest.raises(ConfigurationError):
		format_ident_namespaced("$ident_{}", 2)
