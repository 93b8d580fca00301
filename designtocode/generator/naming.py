"""Identifier helpers shared by config derivation and template filters.

Design-tool names are free text (``"city cell"``); generated code needs
class names (``CityCell``), variables (``cities``) and plural types
(``Cities``).
"""

from __future__ import annotations

import re

# ---------------------------------------------------------------------------
# Casing
# ---------------------------------------------------------------------------


def upper_camel(name: str, delimiter: str | None = " ") -> str:
    """Upper-case the first letter of every *delimiter*-separated token.

    The rest of each token keeps its case, so already camel-cased names
    survive: ``"travelCities list"`` -> ``"TravelCitiesList"``.  With
    ``delimiter=None`` only the first letter of *name* changes.
    """
    tokens = [name] if delimiter is None else name.split(delimiter)
    return "".join(token[:1].upper() + token[1:] for token in tokens if token)


def lower_camel(name: str, delimiter: str | None = " ") -> str:
    """Like :func:`upper_camel` but with a lower-case first letter.

    ``"city cell"`` -> ``"cityCell"``, ``"Cities"`` -> ``"cities"``.
    """
    joined = upper_camel(name, delimiter)
    return joined[:1].lower() + joined[1:]


def strip_suffix(name: str, suffix: str) -> str:
    """Remove a trailing literal *suffix*; no-op when absent."""
    if suffix and name.endswith(suffix):
        return name[: -len(suffix)]
    return name


def snake_case(value: str) -> str:
    """Convert ``SomeThing`` or ``some-thing`` to ``some_thing``."""
    s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1_\2", value)
    s2 = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s1)
    return re.sub(r"[-\s]+", "_", s2).lower()


# ---------------------------------------------------------------------------
# Pluralization
# ---------------------------------------------------------------------------

_IRREGULAR: dict[str, str] = {
    "person": "people",
    "child": "children",
    "man": "men",
    "woman": "women",
    "mouse": "mice",
    "goose": "geese",
    "tooth": "teeth",
    "foot": "feet",
    "ox": "oxen",
    "leaf": "leaves",
    "life": "lives",
    "knife": "knives",
    "wife": "wives",
    "half": "halves",
    "wolf": "wolves",
    "shelf": "shelves",
    "calf": "calves",
    "thief": "thieves",
    "cactus": "cacti",
    "radius": "radii",
    "criterion": "criteria",
    "phenomenon": "phenomena",
    "quiz": "quizzes",
    "hero": "heroes",
    "potato": "potatoes",
    "tomato": "tomatoes",
    "echo": "echoes",
}

_UNCOUNTABLE: frozenset[str] = frozenset({
    "sheep",
    "fish",
    "deer",
    "moose",
    "series",
    "species",
    "news",
    "information",
    "equipment",
    "rice",
    "money",
    "data",
    "media",
    "aircraft",
})

_IRREGULAR_PLURALS: frozenset[str] = frozenset(_IRREGULAR.values())

_LAST_WORD = re.compile(r"^(.*?)([A-Z]?[a-z0-9]*)$", re.DOTALL)


def _is_plural(word: str) -> bool:
    """True when lower-case *word* already reads as a plural (``hotels``)."""
    if word in _IRREGULAR_PLURALS:
        return True
    if word in _IRREGULAR:
        return False
    if re.search(r"[^aeiou]ies$", word) or re.search(r"(s|sh|ch|x|z)es$", word):
        return True
    # "bus", "class", "axis" are singular
    return re.search(r"[^siu]s$", word) is not None


def pluralize(word: str) -> str:
    """English plural of the last word in *word*.

    Camel-cased compounds pluralize their final segment
    (``"TravelCity"`` -> ``"TravelCities"``) and the first letter of that
    segment keeps its case.  Returns ``""`` for empty input.

    Examples::

        pluralize("City")   -> "Cities"
        pluralize("box")    -> "boxes"
        pluralize("Person") -> "People"
        pluralize("Sheep")  -> "Sheep"
        pluralize("hotels") -> "hotels"
    """
    if not word:
        return ""
    match = _LAST_WORD.match(word)
    head, tail = match.group(1), match.group(2)
    if not tail:
        return word + "s"

    lower = tail.lower()
    if lower in _UNCOUNTABLE or _is_plural(lower):
        plural = lower
    elif lower in _IRREGULAR:
        plural = _IRREGULAR[lower]
    elif re.search(r"[^aeiou]y$", lower):
        plural = lower[:-1] + "ies"
    elif re.search(r"(s|sh|ch|x|z)$", lower):
        plural = lower + "es"
    else:
        plural = lower + "s"

    if tail[:1].isupper():
        plural = plural[:1].upper() + plural[1:]
    return head + plural
