"""Fixed abbreviation tables for ingredient text, applied in order.

Each table is an ordered tuple of (phrase, replacement). Matching is
case-insensitive and limited to whole words/phrases.
"""
from __future__ import annotations

import re
from typing import Pattern, Tuple

__all__ = ["BASIC_ABBREVIATIONS", "AGGRESSIVE_ABBREVIATIONS", "EMERGENCY_CONTRACTIONS", "apply_table"]

BASIC_ABBREVIATIONS: Tuple[Tuple[str, str], ...] = (
    ("Natural flavourings", "Natural flavours"),
    ("Emulsifier", "Emuls."),
    ("Stabiliser", "Stab."),
    ("Preservative", "Pres."),
    ("Antioxidant", "Antiox."),
    ("Acidity regulator", "Acid. reg."),
    ("Colour", "Col."),
    ("Flavour enhancer", "Flav. enh."),
)

AGGRESSIVE_ABBREVIATIONS: Tuple[Tuple[str, str], ...] = (
    ("Modified", "Mod."),
    ("Concentrate", "Conc."),
    ("Extract", "Ext."),
    ("Powder", "Pwd."),
    ("Vitamin", "Vit."),
    ("Mineral", "Min."),
    ("Protein", "Prot."),
    ("Calcium", "Ca"),
    ("Sodium", "Na"),
    ("Potassium", "K"),
    ("Phosphorus", "P"),
)

EMERGENCY_CONTRACTIONS: Tuple[Tuple[str, str], ...] = (
    ("and", "&"),
    ("contains", "cont."),
    ("including", "incl."),
    ("derived from", "from"),
    ("may contain", "may cont."),
    ("produced in", "prod. in"),
)


def _compile(table: Tuple[Tuple[str, str], ...]) -> Tuple[Tuple[Pattern[str], str], ...]:
    return tuple(
        (re.compile(r"\b" + re.escape(phrase) + r"\b", re.IGNORECASE), replacement)
        for phrase, replacement in table
    )


_COMPILED = {
    BASIC_ABBREVIATIONS: _compile(BASIC_ABBREVIATIONS),
    AGGRESSIVE_ABBREVIATIONS: _compile(AGGRESSIVE_ABBREVIATIONS),
    EMERGENCY_CONTRACTIONS: _compile(EMERGENCY_CONTRACTIONS),
}


def apply_table(text: str, table: Tuple[Tuple[str, str], ...]) -> str:
    """Apply every replacement of ``table`` to ``text``, each on the previous output."""
    patterns = _COMPILED.get(table) or _compile(table)
    for pattern, replacement in patterns:
        text = pattern.sub(replacement, text)
    return text
