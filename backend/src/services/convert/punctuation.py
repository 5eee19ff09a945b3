# convert/punctuation.py
import re
from typing import List, Tuple, Pattern

# Applied in order to hiragana output
_SUBSTITUTIONS: List[Tuple[Pattern, str]] = [
    (re.compile(r"[ 　,，、]"), "、"),
    (re.compile(r"[.．。]"), "。"),
    (re.compile(r"[?!？！]"), "！"),
    (re.compile(r"[()（）]"), "（"),
    (re.compile(r"、+"), "、"),
    (re.compile(r"。+"), "。"),
]


def normalize_punctuation(text: str) -> str:
    """
    Normalize punctuation in hiragana output to Japanese full-width forms.

    Spaces and commas become 、, periods become 。 and runs of either are
    collapsed. Note that ? and ! both become ！ and both parentheses become
    （, so the question/exclamation distinction and closing brackets are
    lost. This matches the behavior clients already rely on; it looks
    unintentional and should be revisited before anyone depends on it
    further.
    """
    for pattern, replacement in _SUBSTITUTIONS:
        text = pattern.sub(replacement, text)
    return text
