"""Singularize PascalCase entity names.

Only the last word of the identifier is inflected, the rest is kept as is.

Examples:
  Instances      -> Instance
  DBInstances    -> DBInstance
  Policies       -> Policy
  Addresses      -> Address
  CacheClusters  -> CacheCluster
  People         -> Person
  Status         -> Status
"""

from __future__ import annotations

import re

# Irregular plural -> singular
_IRREGULARS: dict[str, str] = {
    "people": "person",
    "men": "man",
    "women": "woman",
    "children": "child",
    "mice": "mouse",
    "geese": "goose",
    "feet": "foot",
    "teeth": "tooth",
    "oxen": "ox",
    "axes": "axis",
    "indices": "index",
    "vertices": "vertex",
    "matrices": "matrix",
    "criteria": "criterion",
    "phenomena": "phenomenon",
    "knives": "knife",
    "wives": "wife",
    "lives": "life",
    "leaves": "leaf",
    "halves": "half",
    "wolves": "wolf",
    "shelves": "shelf",
    "selves": "self",
    "thieves": "thief",
    "movies": "movie",
    "cookies": "cookie",
    "zombies": "zombie",
    "pies": "pie",
    "ties": "tie",
    "lies": "lie",
    "biases": "bias",
    "lenses": "lens",
    "gases": "gas",
    "canvases": "canvas",
    "atlases": "atlas",
}

_IRREGULAR_SINGULARS = set(_IRREGULARS.values())

# Same form in singular and plural, plus singulars the rules would break
_UNCOUNTABLE = {
    "equipment",
    "information",
    "rice",
    "money",
    "species",
    "series",
    "fish",
    "sheep",
    "jeans",
    "police",
    "news",
    "data",
    "metadata",
    "gas",
    "canvas",
    "atlas",
    "bias",
    "lens",
    "chaos",
    "ethos",
    "pathos",
    "cosmos",
    "kudos",
    "analytics",
    "physics",
    "mathematics",
    "economics",
    "logistics",
    "ethics",
    "diabetes",
    "mumps",
}

# First match wins
_SINGULAR_RULES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(p, re.IGNORECASE), r)
    for p, r in (
        (r"(quiz)zes$", r"\1"),
        (r"^(alias|status|bus|campus|virus|corpus)(es)?$", r"\1"),
        (r"^(analy|ba|diagno|parenthe|progno|synop|the|cri)(sis|ses)$", r"\1sis"),
        (r"(us|is|ss)$", r"\1"),
        (r"(cache|niche)s$", r"\1"),
        (r"(shoe|toe)s$", r"\1"),
        (r"(o)es$", r"\1"),
        (r"(x|ch|ss|sh)es$", r"\1"),
        (r"([^aeiouy]|qu)ies$", r"\1y"),
        (r"s$", ""),
    )
]

# Last word of a PascalCase identifier ("DBInstances" -> "Instances")
_LAST_WORD = re.compile(r"[A-Z]?[a-z0-9]*$")


def _match_case(template: str, word: str) -> str:
    """Return word with the first letter cased like template."""
    if template[:1].isupper():
        return word[:1].upper() + word[1:]
    return word


def singularize(word: str) -> str:
    """Return the singular form of a (PascalCase) plural noun.

    Singular input comes back unchanged.
    """
    match = _LAST_WORD.search(word)
    head, last = word[: match.start()], match.group()
    if not last:
        return word

    lower = last.lower()
    if lower in _UNCOUNTABLE or lower in _IRREGULAR_SINGULARS:
        return word
    if lower in _IRREGULARS:
        return head + _match_case(last, _IRREGULARS[lower])

    for pattern, replacement in _SINGULAR_RULES:
        if pattern.search(last):
            return head + pattern.sub(replacement, last, count=1)
    return word
