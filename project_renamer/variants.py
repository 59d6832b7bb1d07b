"""
Project name variants.

A project name shows up in a tree in many spellings: ``my-project`` in
package metadata, ``my_project`` as a Python package, ``My Project`` in
documentation, ``MyProject`` as a class name, ``MY_PROJECT`` as a constant
and ``my/project`` or ``my.project`` in import and module paths. This module
detects the words of a name, renders them in every supported style and pairs
up the old and new renderings into a ``VariantMap``.
"""

import os
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from project_renamer.errors import InvalidArgument

SEPARATORS = (" ", "_", "-", ".", "/")

# Splits "TestProject" and "HTTPServer", used when a name has no separator
CAMEL_PARTS_RE = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z0-9]+")


class CaseType(Enum):
    CAPITALISE = "capitalise"  # My Project
    UPPER = "upper"  # MY PROJECT
    LOWER = "lower"  # my project


@dataclass(frozen=True)
class NormalizedName:
    """The lower-cased words of a project name."""

    parts: Tuple[str, ...]


@dataclass(frozen=True)
class NameStyle:
    separator: Optional[str]
    case: CaseType

    @classmethod
    def all_styles(cls, preferred_separator: Optional[str] = None) -> List["NameStyle"]:
        """
        Every combination of case and separator.

        Cases are ordered capitalise, upper, lower. Within each case the
        preferred separator comes first, then no separator, then the rest.
        """
        separators = [preferred_separator, None] + list(SEPARATORS)
        separators = list(dict.fromkeys(separators))

        styles = []
        for case in CaseType:
            for separator in separators:
                styles.append(cls(separator, case))
        return styles

    def render(self, name: NormalizedName) -> str:
        if self.case is CaseType.UPPER:
            parts = [part.upper() for part in name.parts]
        elif self.case is CaseType.LOWER:
            parts = [part.lower() for part in name.parts]
        else:
            parts = [part[:1].upper() + part[1:] for part in name.parts]
        return (self.separator or "").join(parts)


def split_name(name: str) -> Tuple[Optional[str], List[str]]:
    for separator in SEPARATORS:
        if separator in name:
            return separator, [part for part in name.split(separator) if part]

    parts = CAMEL_PARTS_RE.findall(name)
    if "".join(parts) != name:
        parts = [name]
    return None, parts


def detect(name: str) -> Tuple[NameStyle, NormalizedName]:
    """Detect the style a name is written in, and its normalized words."""
    separator, parts = split_name(name)

    if parts and all(part.isupper() for part in parts):
        case = CaseType.UPPER
    elif parts and all(part.islower() for part in parts):
        case = CaseType.LOWER
    else:
        case = CaseType.CAPITALISE

    normalized = NormalizedName(tuple(part.lower() for part in parts))
    return NameStyle(separator, case), normalized


def validate_name(name: str, label: str = "name") -> str:
    if name is None or not name.strip():
        raise InvalidArgument(f"The {label} must not be empty")

    if name in (".", ".."):
        raise InvalidArgument(f"The {label} is not a valid project name: {name!r}")

    illegal = {"/", "\\", "\0", os.sep}
    if os.altsep:
        illegal.add(os.altsep)
    found = sorted(ch for ch in illegal if ch in name)
    if found:
        raise InvalidArgument(
            f"The {label} must not contain path separators ({', '.join(map(repr, found))}):"
            f" {name!r}"
        )

    _, parts = split_name(name)
    if not parts:
        raise InvalidArgument(f"The {label} has no words in it: {name!r}")

    return name


class VariantMap:
    """
    Ordered (old variant, new variant) replacement pairs.

    Pairs are kept longest old variant first. ``apply`` replaces every
    variant in a single pass over the text, so a replacement is never
    scanned again by a later pair.
    """

    def __init__(self, pairs: Iterable[Tuple[str, str]]):
        unique = {}
        for old, new in pairs:
            if not old:
                raise InvalidArgument("Name variants must not be empty")
            unique.setdefault(old, new)

        self._pairs = tuple(sorted(unique.items(), key=lambda pair: len(pair[0]), reverse=True))
        self._lookup = dict(self._pairs)
        self._pattern = re.compile("|".join(re.escape(old) for old, _ in self._pairs))

    @property
    def pairs(self) -> Tuple[Tuple[str, str], ...]:
        return self._pairs

    def __iter__(self):
        return iter(self._pairs)

    def __len__(self):
        return len(self._pairs)

    def __repr__(self):
        return f"VariantMap({list(self._pairs)!r})"

    def apply(self, text: str) -> str:
        if not self._pairs:
            return text
        return self._pattern.sub(lambda match: self._lookup[match.group(0)], text)

    def count(self, text: str) -> int:
        """Number of variant occurrences ``apply`` would replace."""
        if not self._pairs:
            return 0
        return sum(1 for _ in self._pattern.finditer(text))


def build_variant_map(old_name: str, new_name: str) -> VariantMap:
    """
    Derive the replacement pairs for renaming ``old_name`` to ``new_name``.

    The exact old name comes first, followed by every style rendering of the
    two names. When the old name is itself a style rendering (``TestProject``
    is Pascal case) the new name is rendered in that style too, so code
    identifiers stay identifiers. Only an old name no style reproduces maps to
    the new name exactly as given. When several styles render the old name
    identically (a one-word name looks the same with any separator) the first
    pair wins, and the new name's own separator is tried first.
    """
    validate_name(old_name, "old name")
    validate_name(new_name, "new name")

    old_style, old_normalized = detect(old_name)
    new_style, new_normalized = detect(new_name)

    # a one-word name has no separator of its own to keep
    separator = old_style.separator if len(old_normalized.parts) > 1 else new_style.separator
    exact_style = NameStyle(separator, old_style.case)
    if exact_style.render(old_normalized) == old_name:
        pairs = [(old_name, exact_style.render(new_normalized))]
    else:
        pairs = [(old_name, new_name)]
    for style in NameStyle.all_styles(new_style.separator):
        pairs.append((style.render(old_normalized), style.render(new_normalized)))

    return VariantMap(pairs)
