"""
Language records and label lookup.

Languages are addressed by a stable id (``"en"``, ``"zh_cn"``, ...).
The display name is only ever shown, never parsed.
"""
from dataclasses import dataclass
from typing import Dict, Sequence, Union

from game.difficulty import Difficulty

from .labels import DEFAULT_PACK, LABEL_PACKS, difficulty_label_key


# ============================================================================
# Language Record
# ============================================================================

@dataclass(frozen=True)
class Language:
    """
    A selectable UI language.

    Attributes:
        id: Stable language id.
        name: Name of the language in that language.
        flag: Flag glyph shown next to the name.
        pack: Id of the label pack providing its strings.
    """

    id: str
    name: str
    flag: str
    pack: str = DEFAULT_PACK

    def label(self, key: str) -> str:
        """
        Localized text for a UI label.

        Raises:
            KeyError: If ``key`` is not a label key.
        """
        labels = LABEL_PACKS[self.pack]
        if key not in labels:
            raise KeyError(f"Unknown label key: {key!r}")
        return labels[key]

    def difficulty_name(self, difficulty: Union[str, Difficulty]) -> str:
        """Localized name of a difficulty."""
        return self.label(difficulty_label_key(Difficulty.from_key(difficulty)))

    @property
    def title(self) -> str:
        return self.label("title")


# ============================================================================
# Language Table
# ============================================================================

LANGUAGES: Sequence[Language] = (
    Language("en", "English", "🇺🇸"),
    Language("zh_cn", "中文（简体）", "🇨🇳", pack="zh"),
    Language("zh_tw", "中文（台湾）", "🇹🇼", pack="zh"),
    Language("zh_hk", "中文（香港）", "🇭🇰", pack="zh"),
    Language("es", "Español", "🇪🇸"),
    Language("hi", "हिन्दी", "🇮🇳"),
    Language("ar", "العربية", "🇸🇦"),
    Language("fr", "Français", "🇫🇷"),
    Language("bn", "বাংলা", "🇧🇩"),
    Language("ru", "Русский", "🇷🇺"),
    Language("pt", "Português", "🇵🇹"),
    Language("ur", "اردو", "🇵🇰"),
    Language("id", "Indonesia", "🇮🇩"),
    Language("de", "Deutsch", "🇩🇪"),
    Language("ja", "日本語", "🇯🇵", pack="ja"),
    Language("sw", "Kiswahili", "🇰🇪"),
    Language("mr", "मराठी", "🇮🇳"),
    Language("te", "తెలుగు", "🇮🇳"),
    Language("tr", "Türkçe", "🇹🇷"),
    Language("ta", "தமிழ்", "🇮🇳"),
    Language("vi", "Tiếng Việt", "🇻🇳"),
    Language("ko", "한국어", "🇰🇷"),
    Language("it", "Italiano", "🇮🇹"),
    Language("th", "ไทย", "🇹🇭"),
    Language("gu", "ગુજરાતી", "🇮🇳"),
    Language("fa", "فارسی", "🇮🇷"),
    Language("kn", "ಕನ್ನಡ", "🇮🇳"),
    Language("pa", "ਪੰਜਾਬੀ", "🇮🇳"),
    Language("ml", "മലയാളം", "🇮🇳"),
    Language("or", "ଓଡ଼ିଆ", "🇮🇳"),
    Language("my", "မြန်မာ", "🇲🇲"),
    Language("pl", "Polski", "🇵🇱"),
    Language("uk", "Українська", "🇺🇦"),
    Language("nl", "Nederlands", "🇳🇱"),
    Language("ro", "Română", "🇷🇴"),
    Language("el", "Ελληνικά", "🇬🇷"),
    Language("cs", "Čeština", "🇨🇿"),
    Language("hu", "Magyar", "🇭🇺"),
    Language("sv", "Svenska", "🇸🇪"),
    Language("fi", "Suomi", "🇫🇮"),
    Language("da", "Dansk", "🇩🇰"),
    Language("no", "Norsk", "🇳🇴"),
    Language("sk", "Slovenčina", "🇸🇰"),
    Language("bg", "Български", "🇧🇬"),
    Language("sr", "Српски", "🇷🇸"),
    Language("hr", "Hrvatski", "🇭🇷"),
    Language("bs", "Bosanski", "🇧🇦"),
    Language("sl", "Slovenščina", "🇸🇮"),
    Language("lt", "Lietuvių", "🇱🇹"),
    Language("lv", "Latviešu", "🇱🇻"),
    Language("et", "Eesti", "🇪🇪"),
    Language("is", "Íslenska", "🇮🇸"),
    Language("ga", "Gaeilge", "🇮🇪"),
    Language("cy", "Cymraeg", "🏴󠁧󠁢󠁷󠁬󠁳󠁿"),
    Language("gd", "Gàidhlig", "🏴󠁧󠁢󠁳󠁣󠁴󠁿"),
    Language("sq", "Shqip", "🇦🇱"),
    Language("mk", "Македонски", "🇲🇰"),
    Language("hy", "Հայերեն", "🇦🇲"),
    Language("ka", "ქართული", "🇬🇪"),
    Language("he", "עברית", "🇮🇱"),
    Language("yo", "Yorùbá", "🇳🇬"),
    Language("ha", "Hausa", "🇳🇬"),
    Language("ig", "Igbo", "🇳🇬"),
    Language("zu", "isiZulu", "🇿🇦"),
    Language("xh", "isiXhosa", "🇿🇦"),
    Language("af", "Afrikaans", "🇿🇦"),
    Language("am", "አማርኛ", "🇪🇹"),
    Language("so", "Soomaali", "🇸🇴"),
    Language("ne", "नेपाली", "🇳🇵"),
    Language("si", "සිංහල", "🇱🇰"),
    Language("lo", "ລາວ", "🇱🇦"),
    Language("km", "ខ្មែរ", "🇰🇭"),
    Language("mn", "Монгол", "🇲🇳"),
    Language("kk", "Қазақ", "🇰🇿"),
    Language("uz", "Oʻzbek", "🇺🇿"),
    Language("tk", "Türkmen", "🇹🇲"),
    Language("ky", "Кыргызча", "🇰🇬"),
    Language("tg", "Тоҷиκӣ", "🇹🇯"),
    Language("az", "Azərbaycanca", "🇦🇿"),
    Language("eu", "Euskara", "🇪🇸"),
    Language("ca", "Català", "🇪🇸"),
    Language("gl", "Galego", "🇪🇸"),
    Language("la", "Latina", "🇻🇦"),
    Language("eo", "Esperanto", "🌍"),
)

DEFAULT_LANGUAGE_ID = "zh_cn"


def validate_languages(languages: Sequence[Language]) -> None:
    """
    Check language ids are unique and every pack reference resolves.

    Raises:
        ValueError: On a duplicate id or an unknown pack.
    """
    seen = set()
    for language in languages:
        if language.id in seen:
            raise ValueError(f"Duplicate language id: {language.id!r}")
        seen.add(language.id)
        if language.pack not in LABEL_PACKS:
            raise ValueError(
                f"Language {language.id!r} uses unknown label pack {language.pack!r}"
            )


validate_languages(LANGUAGES)

_BY_ID: Dict[str, Language] = {language.id: language for language in LANGUAGES}


def get_language(language_id: str) -> Language:
    """
    Look up a language by id.

    Raises:
        ValueError: If no language has this id.
    """
    try:
        return _BY_ID[language_id]
    except KeyError:
        raise ValueError(f"Unknown language id: {language_id!r}") from None


def default_language() -> Language:
    return _BY_ID[DEFAULT_LANGUAGE_ID]
