"""
Localization module.

Maps language ids to validated label packs for the UI.
"""
from .labels import LABEL_KEYS, LABEL_PACKS, validate_label_packs
from .languages import (
    DEFAULT_LANGUAGE_ID,
    LANGUAGES,
    Language,
    default_language,
    get_language,
    validate_languages,
)

__all__ = [
    "DEFAULT_LANGUAGE_ID",
    "LABEL_KEYS",
    "LABEL_PACKS",
    "LANGUAGES",
    "Language",
    "default_language",
    "get_language",
    "validate_label_packs",
    "validate_languages",
]
