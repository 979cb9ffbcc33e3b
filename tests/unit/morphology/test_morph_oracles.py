"""
Unit tests for the morphological oracles.

The pymorphy3 analyzer is mocked so results do not depend on the
installed dictionaries.
"""

import sys
from types import SimpleNamespace
from unittest.mock import Mock, patch

import pytest

from morph_filter.config.settings import MorphologyConfig
from morph_filter.exceptions import ConfigurationError, ServiceInitializationError
from morph_filter.layers.morphology.oracle import (
    DictionaryOracle,
    MorphologyOracle,
    PymorphyOracle,
)


def make_parse(normal_form):
    return SimpleNamespace(normal_form=normal_form)


class TestPymorphyOracle:
    """Tests for the pymorphy3 backed oracle"""

    @pytest.fixture(autouse=True)
    def setup_analyzer(self):
        """Create oracle with a mocked analyzer"""
        self.analyzer = Mock()
        self.analyzer.word_is_known.return_value = True
        self.analyzer.parse.return_value = [
            make_parse("стать"),
            make_parse("сталь"),
            make_parse("стать"),
        ]
        self.oracle = PymorphyOracle(lang="ru", cache_size=100, analyzer=self.analyzer)

    def test_is_known_delegates(self):
        """Test recognition comes from word_is_known"""
        self.analyzer.word_is_known.return_value = False

        assert self.oracle.is_known("абырвалг") is False
        self.analyzer.word_is_known.assert_called_once_with("абырвалг")

    def test_normal_forms_unique_in_parse_order(self):
        """Test duplicate normal forms are collapsed, order kept"""
        assert self.oracle.normal_forms("стали") == ["стать", "сталь"]

    def test_normal_forms_returns_fresh_list(self):
        """Test callers may modify the returned list"""
        first = self.oracle.normal_forms("стали")
        first.append("Стать")

        assert self.oracle.normal_forms("стали") == ["стать", "сталь"]

    def test_lookups_are_cached(self):
        """Test repeated queries hit the cache"""
        self.oracle.is_known("стали")
        self.oracle.is_known("стали")
        self.oracle.normal_forms("стали")
        self.oracle.normal_forms("стали")

        assert self.analyzer.word_is_known.call_count == 1
        assert self.analyzer.parse.call_count == 1
        stats = self.oracle.get_cache_stats()
        assert stats["is_known_hits"] == 1
        assert stats["normal_forms_hits"] == 1
        assert stats["normal_forms_size"] == 1

    def test_clear_cache(self):
        """Test cache clearing forces a new lookup"""
        self.oracle.normal_forms("стали")
        self.oracle.clear_cache()
        self.oracle.normal_forms("стали")

        assert self.analyzer.parse.call_count == 2
        assert self.oracle.get_cache_stats()["normal_forms_size"] == 1

    def test_satisfies_protocol(self):
        """Test oracle matches the MorphologyOracle protocol"""
        assert isinstance(self.oracle, MorphologyOracle)


class TestPymorphyOracleInitialization:
    """Analyzer construction and failures"""

    def test_unsupported_language(self):
        """Test languages without pymorphy3 dictionaries are rejected"""
        with pytest.raises(ConfigurationError):
            PymorphyOracle(lang="en", analyzer=Mock())

    def test_builds_pymorphy3_analyzer(self):
        """Test analyzer is created for the requested language"""
        fake_module = SimpleNamespace(MorphAnalyzer=Mock(return_value="analyzer"))
        with patch.dict(sys.modules, {"pymorphy3": fake_module}):
            oracle = PymorphyOracle(lang="uk")

        fake_module.MorphAnalyzer.assert_called_once_with(lang="uk")
        assert oracle.analyzer == "analyzer"

    def test_missing_pymorphy3(self):
        """Test missing dependency raises ServiceInitializationError"""
        with patch.dict(sys.modules, {"pymorphy3": None}):
            with pytest.raises(ServiceInitializationError):
                PymorphyOracle()

    def test_analyzer_failure(self):
        """Test analyzer construction errors are wrapped"""
        fake_module = SimpleNamespace(MorphAnalyzer=Mock(side_effect=RuntimeError("no dictionaries")))
        with patch.dict(sys.modules, {"pymorphy3": fake_module}):
            with pytest.raises(ServiceInitializationError) as exc_info:
                PymorphyOracle(lang="ru")

        assert exc_info.value.details == {"lang": "ru"}

    def test_from_config(self):
        """Test language and cache size come from MorphologyConfig"""
        fake_module = SimpleNamespace(MorphAnalyzer=Mock(return_value=Mock()))
        config = MorphologyConfig(language="uk", cache_size=10)
        with patch.dict(sys.modules, {"pymorphy3": fake_module}):
            oracle = PymorphyOracle.from_config(config)

        assert oracle.lang == "uk"
        assert oracle._normal_forms_cached.cache_parameters()["maxsize"] == 10


class TestDictionaryOracle:
    """Tests for the in-memory oracle"""

    def test_lookup(self):
        """Test membership and forms"""
        oracle = DictionaryOracle({"cats": ["cat"], "baz": []})

        assert oracle.is_known("cats")
        assert oracle.is_known("baz")
        assert not oracle.is_known("dogs")
        assert oracle.normal_forms("cats") == ["cat"]
        assert oracle.normal_forms("baz") == []
        assert len(oracle) == 2

    def test_returns_fresh_lists(self):
        """Test mutation of a result does not affect the mapping"""
        source = {"foo": ["foo", "fooz"]}
        oracle = DictionaryOracle(source)

        oracle.normal_forms("foo").append("Foo")
        source["foo"].append("bar")

        assert oracle.normal_forms("foo") == ["foo", "fooz"]

    def test_satisfies_protocol(self):
        """Test oracle matches the MorphologyOracle protocol"""
        assert isinstance(DictionaryOracle({}), MorphologyOracle)
