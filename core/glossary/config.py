"""
Glossary Configuration
Which tables to try for a language, and which columns hold the terms.

The tables are maintained by hand, so the same glossary can be named
"German translations", "DE" or "Deutsch", and the English column can be
"English source", "EN" or "Source". Everything the resolver and normalizer
need to know about that variance lives here, so tests can build a config
with a synthetic language set.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


CONFIG_VERSION = 1

# Ordered: descriptive name, short name, ISO code, native name
DEFAULT_LANGUAGE_TABLES: Dict[str, Tuple[str, ...]] = {
    "German": ("German translations", "German", "DE", "Deutsch"),
    "Spanish": ("Spanish translations", "Spanish", "ES", "Español"),
    "Dutch": ("Dutch translations", "Dutch", "NL", "Nederlands"),
    "Italian": ("Italian translations", "Italian", "IT", "Italiano"),
    "Polish": ("Polish translations", "Polish", "PL", "Polski"),
    "Portuguese": ("Portuguese translations", "Portuguese", "PT", "Português"),
    "Swedish": ("Swedish translations", "Swedish", "SV", "Svenska"),
    "Finnish": ("Finnish translations", "Finnish", "FI", "Suomi"),
}

DEFAULT_ENGLISH_COLUMNS: Tuple[str, ...] = (
    "English source",
    "English",
    "EN",
    "Source",
    "english",
    "english source",
)

# {language} is the target language as given, {language_lower} its lowercase form
DEFAULT_TRANSLATION_COLUMNS: Tuple[str, ...] = (
    "{language} translation",
    "{language}",
    "{language_lower}",
    "{language_lower} translation",
    "Translation",
    "translation",
)


@dataclass(frozen=True)
class GlossaryConfig:
    """
    Versioned glossary lookup configuration.

    Attributes:
        version: Schema version of this configuration
        language_tables: Recognized language name -> ordered candidate table names
        english_columns: Ordered column labels for the English term
        translation_columns: Ordered column label templates for the translation
    """
    version: int = CONFIG_VERSION
    language_tables: Dict[str, Tuple[str, ...]] = field(
        default_factory=lambda: dict(DEFAULT_LANGUAGE_TABLES)
    )
    english_columns: Tuple[str, ...] = DEFAULT_ENGLISH_COLUMNS
    translation_columns: Tuple[str, ...] = DEFAULT_TRANSLATION_COLUMNS

    @property
    def languages(self) -> List[str]:
        return list(self.language_tables.keys())

    def canonical_language(self, target_language: str) -> Optional[str]:
        """Return the recognized language name matching target_language, ignoring case."""
        wanted = target_language.strip()
        if wanted in self.language_tables:
            return wanted
        lowered = wanted.lower()
        for name in self.language_tables:
            if name.lower() == lowered:
                return name
        return None

    def table_candidates(self, target_language: str) -> List[str]:
        """
        Ordered table names to try for a language.

        Unrecognized languages get a single candidate: the name as given.
        """
        canonical = self.canonical_language(target_language)
        if canonical is None:
            return [target_language]
        return list(self.language_tables[canonical])

    def translation_column_labels(self, target_language: str) -> List[str]:
        """
        Expand the translation column templates for a language.

        Recognized languages use their configured spelling, so "german" and
        " German " read the same columns as "German".
        """
        language = self.canonical_language(target_language) or target_language.strip()
        labels = []
        for template in self.translation_columns:
            label = template.format(
                language=language,
                language_lower=language.lower(),
            )
            if label not in labels:
                labels.append(label)
        return labels


DEFAULT_GLOSSARY_CONFIG = GlossaryConfig()
