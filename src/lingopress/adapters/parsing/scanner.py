from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence, Tuple, Union

from lingopress.domain.schema import ALL_LOCALES
from lingopress.utils.locales import split_compound_key


# -------------------------
# Tree
# -------------------------

@dataclass(frozen=True, slots=True)
class Leaf:
    """Literal text, shown according to rule (always "*" for scanned text)."""
    text: str
    rule: str = ALL_LOCALES


@dataclass(frozen=True, slots=True)
class Node:
    """A closed section: its scanned children, shown according to rule."""
    children: list["Segment"] = field(default_factory=list)
    rule: str = ALL_LOCALES


Segment = Union[Leaf, Node]


@dataclass(frozen=True, slots=True)
class LocaleRule:
    valid: tuple[str, ...]
    invalid: tuple[str, ...]

    @classmethod
    def parse(cls, rule: str | None) -> "LocaleRule":
        """
        "it, es, !en" -> valid (it, es), invalid (en). "!*" is ignored.
        """
        valid: list[str] = []
        invalid: list[str] = []
        for token in split_compound_key(rule or ""):
            if not token.startswith("!"):
                valid.append(token)
            elif token != "!*":
                invalid.append(token[1:])
        return cls(valid=tuple(valid), invalid=tuple(invalid))

    def allows(self, locales: Sequence[str]) -> bool:
        if ALL_LOCALES in locales or ALL_LOCALES in self.valid:
            return True

        excluded = any(l in self.invalid for l in locales)
        included = not self.valid or any(l in self.valid for l in locales)
        return included and not excluded


# -------------------------
# Scanner
# -------------------------

class SectionScanner:
    """
    Splits a body into literal text and locale sections delimited by a start
    tag (whose "args" group is the locale rule) and an end tag.

    Sections nest; a start tag with no matching end tag is kept as literal
    text. Both scan and flatten walk the tree with an explicit stack.
    """

    def __init__(self, start_tag: re.Pattern, end_tag: re.Pattern) -> None:
        self.start_tag = start_tag
        self.end_tag = end_tag

    def scan(self, text: str) -> list[Segment]:
        root: list[Segment] = []
        pending: list[Tuple[str, list[Segment]]] = [(text, root)]

        while pending:
            body, out = pending.pop()
            for segment, section_body in self._scan_level(body):
                out.append(segment)
                if isinstance(segment, Node):
                    pending.append((section_body, segment.children))

        return root

    def _scan_level(self, text: str) -> Iterator[Tuple[Segment, str]]:
        pos = 0
        while pos < len(text):
            start = self.start_tag.search(text, pos)
            if start is None:
                yield Leaf(text[pos:]), ""
                return

            yield Leaf(text[pos:start.start()]), ""

            body, pos = self._consume_section(text, start.end())
            if body.strip():
                yield Node(rule=start.groupdict().get("args") or ""), body
            else:
                yield Leaf(start.group(0)), ""

    def _consume_section(self, text: str, pos: int) -> Tuple[str, int]:
        """
        Consume up to the end tag balancing the section opened right before pos.

        Returns the section body and the new cursor. When the tags never
        balance, the body runs to the last end tag found.
        """
        balance = 1
        parts: list[str] = []
        end = self.end_tag.search(text, pos)

        while balance > 0 and end is not None:
            run = text[pos:end.end()]
            balance += sum(1 for _ in self.start_tag.finditer(run)) - 1

            following = self.end_tag.search(text, end.end())
            if balance == 0 or following is None:
                run = text[pos:end.start()]

            parts.append(run)
            pos = end.end()
            end = following

        return "".join(parts), pos


def flatten(segments: Iterable[Segment], locales: Sequence[str]) -> str:
    """
    Concatenate, depth first, the segments whose rule allows the locales.
    """
    out: list[str] = []
    stack: list[Iterator[Segment]] = [iter(segments)]

    while stack:
        segment = next(stack[-1], None)
        if segment is None:
            stack.pop()
            continue

        if not LocaleRule.parse(segment.rule).allows(locales):
            continue

        if isinstance(segment, Node):
            stack.append(iter(segment.children))
        else:
            out.append(segment.text)

    return "".join(out)
