"""
Translation Orchestrator
Glossary first, AI translator as fallback.

    START --(glossary requested and configured)--> TRY_GLOSSARY
    START --(otherwise)--------------------------> USE_FALLBACK
    TRY_GLOSSARY --(confident match)-------------> DONE
    TRY_GLOSSARY --(no match / any failure)------> USE_FALLBACK
    USE_FALLBACK --(translator ok)---------------> DONE
    USE_FALLBACK --(translator failed)-----------> FAILED

Glossary failures never reach the caller. Each way into USE_FALLBACK has
a FallbackReason recorded on the outcome and in the log.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from core.glossary import (
    FieldNormalizer,
    GlossaryIndex,
    GlossaryUnavailable,
    MatchTier,
    NoGlossaryMatch,
    NoUsableRecords,
    SubstitutionEngine,
    SubstitutionResult,
    TableResolver,
)

from .engines.base import TranslationEngine
from .exceptions import FallbackTranslationFailed, MissingTextError, TranslatorNotConfigured

logger = logging.getLogger(__name__)


class OrchestratorState(str, Enum):
    START = "start"
    TRY_GLOSSARY = "try_glossary"
    USE_FALLBACK = "use_fallback"
    DONE = "done"
    FAILED = "failed"


class TranslationPath(str, Enum):
    GLOSSARY = "glossary"
    FALLBACK = "fallback"


class FallbackReason(str, Enum):
    GLOSSARY_NOT_REQUESTED = "glossary_not_requested"
    GLOSSARY_NOT_CONFIGURED = "glossary_not_configured"
    GLOSSARY_UNAVAILABLE = "glossary_unavailable"
    NO_USABLE_RECORDS = "no_usable_records"
    NO_GLOSSARY_MATCH = "no_glossary_match"
    GLOSSARY_ERROR = "glossary_error"


# Opening quote -> closing quote
QUOTE_PAIRS = {
    '"': '"',
    "'": "'",
    "“": "”",
    "„": "“",
    "«": "»",
}


def clean_translator_output(raw: str) -> str:
    """Trim, and drop one pair of quotes wrapping the whole output."""
    text = raw.strip()
    if len(text) >= 2 and QUOTE_PAIRS.get(text[0]) == text[-1]:
        text = text[1:-1].strip()
    return text


@dataclass
class TranslationOutcome:
    """Final translation plus how it was produced."""
    translated_text: str
    original_text: str
    target_language: str
    path: TranslationPath
    fallback_reason: Optional[FallbackReason] = None
    table_name: Optional[str] = None
    match_tiers: List[MatchTier] = field(default_factory=list)
    transitions: List[OrchestratorState] = field(default_factory=list)

    def to_response(self) -> dict:
        return {
            "translatedText": self.translated_text,
            "originalText": self.original_text,
            "targetLanguage": self.target_language,
        }


@dataclass
class _GlossaryAttempt:
    result: SubstitutionResult
    table_name: str


class TranslationOrchestrator:
    """
    Single entry point for translating one string.

    Usage:
        orchestrator = TranslationOrchestrator(translator, resolver=resolver)
        outcome = await orchestrator.translate("Save changes", "German", use_glossary=True)
    """

    def __init__(
        self,
        translator: TranslationEngine,
        resolver: Optional[TableResolver] = None,
        normalizer: Optional[FieldNormalizer] = None,
        engine: Optional[SubstitutionEngine] = None,
    ):
        """
        Args:
            translator: Fallback AI translator
            resolver: Glossary table resolver, None when glossary credentials are missing
            normalizer: Field normalizer (defaults to the resolver's config)
            engine: Substitution engine
        """
        self.translator = translator
        self.resolver = resolver
        if normalizer is None:
            normalizer = FieldNormalizer(resolver.config if resolver else None)
        self.normalizer = normalizer
        self.engine = engine or SubstitutionEngine()

    @property
    def glossary_configured(self) -> bool:
        return self.resolver is not None

    def _transition(
        self,
        transitions: List[OrchestratorState],
        state: OrchestratorState,
        level: int = logging.INFO,
        **fields,
    ):
        transitions.append(state)
        logger.log(
            level,
            "Translation state -> %s", state.value,
            extra={"event": "state_transition", "state": state.value, **fields},
        )

    async def translate(
        self,
        text: str,
        target_language: str,
        use_glossary: bool = False,
    ) -> TranslationOutcome:
        """
        Translate text, preferring the glossary.

        Raises:
            MissingTextError: text is empty
            TranslatorNotConfigured: no fallback translator credentials
            FallbackTranslationFailed: the AI translator failed
        """
        if not text:
            raise MissingTextError()
        if not self.translator.is_available():
            raise TranslatorNotConfigured()

        transitions = [OrchestratorState.START]
        table_name: Optional[str] = None

        if not use_glossary:
            reason = FallbackReason.GLOSSARY_NOT_REQUESTED
        elif not self.glossary_configured:
            reason = FallbackReason.GLOSSARY_NOT_CONFIGURED
        else:
            self._transition(transitions, OrchestratorState.TRY_GLOSSARY, language=target_language)
            reason = None
            try:
                attempt = await self._try_glossary(text, target_language)
            except GlossaryUnavailable as e:
                reason = FallbackReason.GLOSSARY_UNAVAILABLE
                logger.warning("Glossary unavailable, falling back to AI: %s", e)
            except NoUsableRecords as e:
                reason = FallbackReason.NO_USABLE_RECORDS
                table_name = e.table_name
                logger.warning("No valid translations in glossary, falling back to AI: %s", e)
            except NoGlossaryMatch as e:
                reason = FallbackReason.NO_GLOSSARY_MATCH
                table_name = e.table_name
                logger.info("No glossary matches, falling back to AI")
            except Exception as e:
                reason = FallbackReason.GLOSSARY_ERROR
                logger.warning("Glossary translation failed, falling back to AI: %s", e, exc_info=True)
            else:
                tiers = attempt.result.tiers
                self._transition(
                    transitions, OrchestratorState.DONE,
                    path=TranslationPath.GLOSSARY.value,
                    table=attempt.table_name,
                    tiers=[t.value for t in tiers],
                )
                return TranslationOutcome(
                    translated_text=attempt.result.translated_text,
                    original_text=text,
                    target_language=target_language,
                    path=TranslationPath.GLOSSARY,
                    table_name=attempt.table_name,
                    match_tiers=tiers,
                    transitions=transitions,
                )

        self._transition(transitions, OrchestratorState.USE_FALLBACK, reason=reason.value)
        result = await self.translator.translate(text, target_language)

        if not result.success:
            self._transition(
                transitions, OrchestratorState.FAILED, level=logging.ERROR,
                engine=result.engine, status_code=result.status_code, error=result.error,
            )
            raise FallbackTranslationFailed(
                result.error or "Translation failed", status_code=result.status_code
            )

        translated = clean_translator_output(result.translated_text)
        if not translated:
            self._transition(transitions, OrchestratorState.FAILED, level=logging.ERROR, engine=result.engine)
            raise FallbackTranslationFailed("Translator returned empty content", status_code=result.status_code)

        self._transition(
            transitions, OrchestratorState.DONE,
            path=TranslationPath.FALLBACK.value, engine=result.engine,
        )
        return TranslationOutcome(
            translated_text=translated,
            original_text=text,
            target_language=target_language,
            path=TranslationPath.FALLBACK,
            fallback_reason=reason,
            table_name=table_name,
            transitions=transitions,
        )

    async def _try_glossary(self, text: str, target_language: str) -> _GlossaryAttempt:
        table = await self.resolver.resolve(target_language)
        index = GlossaryIndex.build(table.records, target_language, self.normalizer)
        logger.info("Loaded %d terms from table '%s'", index.size, table.name)

        if not index:
            raise NoUsableRecords(table.name, len(table.records))

        result = self.engine.apply(text, index)
        for match in result.matches:
            logger.info(
                "Glossary %s match: %r", match.tier.value, match.term,
                extra={"event": "term_matched", "tier": match.tier.value, "table": table.name},
            )
        if not result.matched:
            raise NoGlossaryMatch(table.name, index.size)

        return _GlossaryAttempt(result=result, table_name=table.name)
