"""Tags — context, project, and special key:value tags inside a description.

Invariants:
    - Tags are whitespace-separated words; offsets are UTF-8 byte offsets into
      the description, matching the todotxt-to-json output
    - "@word" is a context, "+word" a project, any other word containing ":" is special
    - tag.value(description) is always the full tag word
    - Tags are produced lazily, in the order they appear
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

_WORD = re.compile(r"\S+")
# surrogatepass keeps lone surrogates from a JSON body countable
_ENCODING, _ERRORS = "utf-8", "surrogatepass"


def _utf8(text: str) -> bytes:
    return text.encode(_ENCODING, _ERRORS)


class TagKind(str, Enum):
    """Tag variants — values match the JSON "type" field."""
    CONTEXT = "CONTEXT"
    PROJECT = "PROJECT"
    SPECIAL = "SPECIAL"


@dataclass(frozen=True)
class Tag:
    """A tag located by [start, end) byte offsets in its task description."""
    kind: TagKind
    start: int
    end: int

    def value(self, description: str) -> str:
        return _utf8(description)[self.start:self.end].decode(_ENCODING, _ERRORS)

    def to_dict(self) -> dict:
        return {
            "type": self.kind.value,
            "location": {"start": self.start, "end": self.end},
        }


def classify_word(word: str) -> TagKind | None:
    """Return the tag kind of a single word, or None for plain text."""
    if word.startswith("@"):
        return TagKind.CONTEXT
    if word.startswith("+"):
        return TagKind.PROJECT
    if ":" in word:
        return TagKind.SPECIAL
    return None


def iter_tags(description: str) -> Iterator[Tag]:
    """Lazily scan a description for tags, locating them by UTF-8 byte offset."""
    scanned = 0
    byte_pos = 0
    for match in _WORD.finditer(description):
        byte_pos += len(_utf8(description[scanned:match.start()]))
        scanned = match.start()
        word = match.group()
        kind = classify_word(word)
        if kind is not None:
            yield Tag(kind, byte_pos, byte_pos + len(_utf8(word)))
