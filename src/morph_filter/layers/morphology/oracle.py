"""Morphological oracles: word recognition and normal forms for the filter."""

from __future__ import annotations

from functools import lru_cache
from typing import (
    Any,
    Dict,
    Iterable,
    List,
    Mapping,
    Optional,
    Protocol,
    Sequence,
    Tuple,
    runtime_checkable,
)

from ...constants import DEFAULT_LANGUAGE, DEFAULT_MORPH_CACHE_SIZE, SUPPORTED_LANGUAGES
from ...exceptions import ConfigurationError, ServiceInitializationError
from ...utils.logging_config import get_logger


@runtime_checkable
class MorphologyOracle(Protocol):
    """
    What the morphology filter needs from a morphological engine.

    ``normal_forms`` may only be called for a word ``is_known`` accepted;
    anything else is undefined behaviour.
    """

    def is_known(self, word: str) -> bool:
        ...

    def normal_forms(self, word: str) -> Sequence[str]:
        ...


class PymorphyOracle:
    """Oracle backed by a ``pymorphy3.MorphAnalyzer``."""

    def __init__(
        self,
        lang: str = DEFAULT_LANGUAGE,
        cache_size: int = DEFAULT_MORPH_CACHE_SIZE,
        analyzer: Optional[Any] = None,
    ) -> None:
        """
        Initialize the oracle

        Args:
            lang: Dictionary language, one of SUPPORTED_LANGUAGES
            cache_size: Maximum number of cached lookups per method
            analyzer: Ready-made analyzer; a pymorphy3 analyzer is built when omitted
        """
        self.logger = get_logger(__name__)
        if lang not in SUPPORTED_LANGUAGES:
            raise ConfigurationError(
                f"Unsupported language '{lang}'",
                details={"supported": list(SUPPORTED_LANGUAGES)},
            )
        self.lang = lang
        self.analyzer = analyzer if analyzer is not None else self._initialize_pymorphy3(lang)

        # Per-instance caches; the analyzer is read-only after construction
        self._is_known_cached = lru_cache(maxsize=cache_size)(self._lookup_is_known)
        self._normal_forms_cached = lru_cache(maxsize=cache_size)(self._lookup_normal_forms)

        self.logger.info("Pymorphy oracle initialized for %s", lang)

    @classmethod
    def from_config(cls, config) -> "PymorphyOracle":
        """Build an oracle from a ``MorphologyConfig``."""
        return cls(lang=config.language, cache_size=config.cache_size)

    def _initialize_pymorphy3(self, lang: str):
        try:
            import pymorphy3

            return pymorphy3.MorphAnalyzer(lang=lang)
        except ImportError as exc:
            raise ServiceInitializationError(
                "pymorphy3 is not installed", details={"lang": lang}
            ) from exc
        except Exception as exc:
            self.logger.error("Error initializing pymorphy3 for %s: %s", lang, exc)
            raise ServiceInitializationError(
                f"Cannot initialize pymorphy3 analyzer for '{lang}': {exc}",
                details={"lang": lang},
            ) from exc

    def is_known(self, word: str) -> bool:
        return self._is_known_cached(word)

    def normal_forms(self, word: str) -> List[str]:
        """Distinct normal forms of ``word`` in the analyzer's parse order."""
        return list(self._normal_forms_cached(word))

    def clear_cache(self) -> None:
        """Clear cached lookups (useful for tests)."""
        self._is_known_cached.cache_clear()
        self._normal_forms_cached.cache_clear()

    def get_cache_stats(self) -> Dict[str, int]:
        known = self._is_known_cached.cache_info()
        forms = self._normal_forms_cached.cache_info()
        return {
            "is_known_hits": known.hits,
            "is_known_misses": known.misses,
            "normal_forms_hits": forms.hits,
            "normal_forms_misses": forms.misses,
            "normal_forms_size": forms.currsize,
        }

    def _lookup_is_known(self, word: str) -> bool:
        return bool(self.analyzer.word_is_known(word))

    def _lookup_normal_forms(self, word: str) -> Tuple[str, ...]:
        forms: List[str] = []
        for parse in self.analyzer.parse(word):
            normal_form = parse.normal_form
            if normal_form and normal_form not in forms:
                forms.append(normal_form)
        self.logger.debug("Normal forms for '%s' (%s): %s", word, self.lang, forms)
        return tuple(forms)


class DictionaryOracle:
    """In-memory oracle over a word -> normal forms mapping."""

    def __init__(self, mapping: Mapping[str, Iterable[str]]):
        self._forms: Dict[str, Tuple[str, ...]] = {
            word: tuple(forms) for word, forms in mapping.items()
        }

    def is_known(self, word: str) -> bool:
        return word in self._forms

    def normal_forms(self, word: str) -> List[str]:
        return list(self._forms[word])

    def __len__(self) -> int:
        return len(self._forms)
