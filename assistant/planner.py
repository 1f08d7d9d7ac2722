"""Turn a markdown plan returned by the model into task titles.

Grammar, one item per line:

    item     := indent marker ws [checkbox ws] title
    marker   := "-" | "*" | "+" | digits "." | digits ")"
    checkbox := "[ ]" | "[x]" | "[X]"

Bold markup is unwrapped in titles: ``**`` always, ``__text__`` only around
multi-word text so dunder names such as ``__init__`` survive.
Lines that do not match, such as headings, prose, blank lines and
horizontal rules like ``* * *``, are skipped.
"""

from __future__ import annotations

import re
from typing import List


_ITEM = re.compile(r"^\s*(?:[-*+]|\d+[.)])\s+(?:\[[ xX]\]\s+)?(?P<title>.*)$")
_BOLD_STARS = re.compile(r"\*\*")
_BOLD_UNDERSCORES = re.compile(r"(?<!\w)__(\S[^_]*\s[^_]*\S)__(?!\w)")
_MARKERS_ONLY = re.compile(r"^[-*+_\s]*$")


def parse_line(line: str) -> str:
    match = _ITEM.match(line)
    if not match:
        return ""
    title = match.group("title")
    if _MARKERS_ONLY.match(title):
        return ""
    title = _BOLD_UNDERSCORES.sub(r"\1", title)
    return _BOLD_STARS.sub("", title).strip()


def parse_plan(text: str) -> List[str]:
    titles: List[str] = []
    for line in (text or "").splitlines():
        title = parse_line(line)
        if title:
            titles.append(title)
    return titles
