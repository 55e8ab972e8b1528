# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Culture value object — a locale tag and its parent."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Culture:
    """A culture tag such as ``en-US`` with its optional parent (``en``).

    Build instances with :meth:`from_tag`, which normalizes the tag and
    derives the parent chain by dropping the trailing subtag. Neutral
    cultures such as ``en`` have the invariant culture (name ``""``) as
    parent; the invariant culture has none.
    """

    name: str
    parent: Culture | None = None

    INVARIANT: ClassVar[Culture]

    @classmethod
    def from_tag(cls, tag: str | Culture | None) -> Culture:
        if isinstance(tag, Culture):
            return tag
        normalized = normalize_tag(tag or "")
        if not normalized:
            return cls.INVARIANT
        subtags = normalized.split("-")
        parent = cls.from_tag("-".join(subtags[:-1])) if len(subtags) > 1 else cls.INVARIANT
        return cls(normalized, parent)

    def __str__(self) -> str:
        return self.name


Culture.INVARIANT = Culture("")


def normalize_tag(tag: str) -> str:
    """Normalize a BCP 47-ish tag: ``en_us`` -> ``en-US``, ``zh-hant`` -> ``zh-Hant``."""
    parts = [p for p in tag.strip().replace("_", "-").split("-") if p]
    if not parts:
        return ""

    result = [parts[0].lower()]
    for part in parts[1:]:
        if len(part) == 4 and part.isalpha():
            result.append(part.title())
        elif len(part) == 2 and part.isalpha():
            result.append(part.upper())
        else:
            result.append(part.lower() if part.isalpha() else part.upper())
    return "-".join(result)
