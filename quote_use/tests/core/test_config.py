from __future__ import annotations

import pytest

from quote_use.core.config import DeclarationStyle, ExpandConfig, PreludeConfig
from quote_use.core.errors import ConfigurationError


def test_defaults_enable_every_prelude_bundle():
	config = ExpandConfig.from_features()
	assert config.prelude == PreludeConfig()
	assert config.namespace_idents is False
	assert config.style is DeclarationStyle.POUND


def test_std_implies_core():
	assert PreludeConfig(include_core=False, include_std=True).include_core is True
	config = ExpandConfig.from_features(["prelude_std"], default_features=False)
	assert config.prelude.include_core is True
	assert config.prelude.include_edition_2021 is False


def test_edition_needs_a_foundational_bundle():
	with pytest.raises(ConfigurationError):
		PreludeConfig(include_core=False, include_std=False, include_edition_2021=True)
	with pytest.raises(ConfigurationError):
		ExpandConfig.from_features(["prelude_2021"], default_features=False)


def test_no_default_features_disables_prelude():
	config = ExpandConfig.from_features([], default_features=False)
	assert config.prelude.enabled is False


def test_unknown_feature_is_rejected():
	with pytest.raises(ConfigurationError) as excinfo:
		ExpandConfig.from_features(["prelude_rust_2015"])
	diag = excinfo.value.to_diagnostic()
	assert diag.phase == "config"
	assert "prelude_rust_2015" in diag.message


def test_namespace_feature_and_seed():
	config = ExpandConfig.from_features([" namespace_idents ", ""], namespace_seed="a.b")
	assert config.namespace_idents is True
	assert config.namespace_prefix() == "__quote_use_a_b_"
	assert ExpandConfig().namespace_prefix() == "__quote_use_"
