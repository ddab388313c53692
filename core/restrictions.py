"""
core/restrictions.py
────────────────────────────────────────────────────────────────────────
Dietary restriction classes and the tag vocabulary that maps the tags users
send (English or localized) onto them.

Each class excludes a fixed list of ingredients.  Exclusion lists are
matched by case-insensitive *equality* with a catalog ingredient, so they
must use the catalog's own ingredient names.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, Mapping

_LOG = logging.getLogger(__name__)


class RestrictionClass(str, Enum):
    vegetarian = "vegetarian"
    vegan = "vegan"
    gluten_free = "gluten_free"


_MEAT_EGG_FISH = frozenset({
    "chicken breast",
    "salmon",
    "egg",
    # localized catalog names
    "鸡胸肉",
    "三文鱼",
    "鸡蛋",
})

_DAIRY_HONEY = frozenset({
    "milk",
    "greek yogurt",
    "yogurt",
    "honey",
    "牛奶",
    "酸奶",
    "希腊酸奶",
    "蜂蜜",
})

_GLUTEN = frozenset({
    "whole wheat bread",
    "whole wheat noodles",
    "soy sauce",
    "全麦面包",
    "全麦面条",
    "生抽",
})

EXCLUDED_INGREDIENTS: dict[RestrictionClass, frozenset[str]] = {
    RestrictionClass.vegetarian: _MEAT_EGG_FISH,
    RestrictionClass.vegan: _MEAT_EGG_FISH | _DAIRY_HONEY,
    RestrictionClass.gluten_free: _GLUTEN,
}

DEFAULT_ALIASES: dict[str, RestrictionClass] = {
    "vegetarian": RestrictionClass.vegetarian,
    "vegan": RestrictionClass.vegan,
    "gluten_free": RestrictionClass.gluten_free,
    "gluten-free": RestrictionClass.gluten_free,
    "素食": RestrictionClass.vegetarian,
    "纯素": RestrictionClass.vegan,
    "无麸质": RestrictionClass.gluten_free,
}


class RestrictionVocabulary:
    """Resolves restriction tags to `RestrictionClass` by exact tag identity.

    Tags are compared after stripping whitespace and case-folding; there is
    no substring matching, so "vegetarian-ish" resolves to nothing.
    """

    def __init__(self, aliases: Mapping[str, RestrictionClass | str] | None = None) -> None:
        merged: dict[str, RestrictionClass | str] = dict(DEFAULT_ALIASES)
        merged.update(aliases or {})
        self._aliases = {
            _norm(tag): RestrictionClass(cls) for tag, cls in merged.items()
        }

    def resolve(self, tags: Iterable[str]) -> set[RestrictionClass]:
        classes: set[RestrictionClass] = set()
        for tag in tags:
            cls = self._aliases.get(_norm(tag))
            if cls is None:
                _LOG.debug("ignoring unknown restriction tag %r", tag)
                continue
            classes.add(cls)
        # vegan implies vegetarian
        if RestrictionClass.vegan in classes:
            classes.add(RestrictionClass.vegetarian)
        return classes

    def excluded_ingredients(self, tags: Iterable[str]) -> frozenset[str]:
        out: frozenset[str] = frozenset()
        for cls in self.resolve(tags):
            out |= EXCLUDED_INGREDIENTS[cls]
        return frozenset(_norm(i) for i in out)

    def tags(self) -> list[str]:
        return sorted(self._aliases)


def _norm(s: str) -> str:
    return str(s).strip().casefold()
