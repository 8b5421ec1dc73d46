"""
Label packs: the localized strings shown by the UI.

Each pack is a flat mapping from label key to text. Several languages
can share one pack. Packs are checked for complete key coverage when
this module is imported, so a missing translation fails at startup
rather than rendering an empty button.
"""
from typing import Dict, Mapping

from game.difficulty import Difficulty


# ============================================================================
# Keys
# ============================================================================

UI_LABEL_KEYS = (
    "title",
    "select_diff",
    "back",
    "win",
    "lose",
    "retry",
    "menu",
)

# Difficulty names live in the same pack under "diff_<key>"
DIFFICULTY_LABEL_KEYS = tuple(f"diff_{d.value}" for d in Difficulty)

LABEL_KEYS = UI_LABEL_KEYS + DIFFICULTY_LABEL_KEYS


def difficulty_label_key(difficulty: Difficulty) -> str:
    return f"diff_{difficulty.value}"


# ============================================================================
# Packs
# ============================================================================

_ENGLISH = {
    "title": "Minesweeper",
    "select_diff": "Select Difficulty",
    "back": "Back",
    "win": "MISSION CLEAR",
    "lose": "GAME OVER",
    "retry": "RETRY",
    "menu": "MAIN MENU",
    "diff_easy": "Easy",
    "diff_medium": "Medium",
    "diff_hard": "Hard",
    "diff_insane": "Insane",
}

_CHINESE = {
    "title": "扫雷",
    "select_diff": "选择难度",
    "back": "返回",
    "win": "挑战成功",
    "lose": "触发地雷",
    "retry": "再试一次",
    "menu": "返回菜单",
    "diff_easy": "简单",
    "diff_medium": "中等",
    "diff_hard": "困难",
    "diff_insane": "特别困难",
}

# Japanese has its own title; the remaining labels are English
_JAPANESE = dict(_ENGLISH, title="マインスイーパ")

LABEL_PACKS: Dict[str, Mapping[str, str]] = {
    "en": _ENGLISH,
    "zh": _CHINESE,
    "ja": _JAPANESE,
}

DEFAULT_PACK = "en"


# ============================================================================
# Validation
# ============================================================================

def validate_label_packs(packs: Mapping[str, Mapping[str, str]]) -> None:
    """
    Check that every pack defines every label key with non-empty text.

    Raises:
        ValueError: Naming the first incomplete pack and its missing keys.
    """
    if DEFAULT_PACK not in packs:
        raise ValueError(f"Default label pack {DEFAULT_PACK!r} is missing")
    for pack_id, labels in packs.items():
        missing = [key for key in LABEL_KEYS if not labels.get(key)]
        if missing:
            raise ValueError(
                f"Label pack {pack_id!r} is missing: {', '.join(missing)}"
            )
        unknown = sorted(set(labels) - set(LABEL_KEYS))
        if unknown:
            raise ValueError(
                f"Label pack {pack_id!r} has unknown keys: {', '.join(unknown)}"
            )


validate_label_packs(LABEL_PACKS)
