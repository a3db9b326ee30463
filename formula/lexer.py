# formula/lexer.py
# This file is part of Tabula - A Propositional Truth Table Generator
#
# Keyword normalization of raw formula lines using SLY

"""Keyword normalization for raw formula lines.

Users type formulas with word operators (``A and not B``). Before parsing,
every keyword is rewritten to its reserved glyph (``A ∧ ¬ B``) so the parser
only ever sees single-character operators. The rewrite is driven by a SLY
lexer that splits the line into:

- Quoted names: spans between two backticks, passed through untouched
- Whitespace runs: kept as is
- Word runs: replaced by a glyph when the whole word is a keyword
- Any other single character: kept as is

Keywords are matched case-insensitively and only as whole words, so a
variable such as ``Android`` or ``origin`` keeps its spelling.
"""

from sly import Lexer

from .glyphs import KEYWORD_GLYPHS
from utils.logger import get_logger


class KeywordLexer(Lexer):
    """SLY-based lexer that maps keyword words onto reserved glyphs.

    Concatenating the values of all produced tokens yields the normalized
    line; no character of the input is dropped.

    Attributes:
        tokens: Set of token types
        WORD: Word pattern, retyped to KEYWORD for reserved words
    """

    tokens = {
        "QUOTED",
        "SPACE",
        "WORD",
        "KEYWORD",
        "SYMBOL",
    }

    QUOTED = r"`[^`]*`"
    SPACE = r"\s+"

    @_(r"\w+")
    def WORD(self, t):
        glyph = KEYWORD_GLYPHS.get(t.value.lower())
        if glyph is not None:
            t.type = "KEYWORD"
            t.value = glyph
        return t

    SYMBOL = r"."


def normalize(text: str) -> str:
    """Rewrite keyword operators and constants of ``text`` into glyphs.

    Args:
        text: Raw formula line, e.g. ``"A imply (B or false)"``

    Returns:
        Normalized formula text, e.g. ``"A → (B ∨ ⊥)"``
    """
    logger = get_logger()

    parts = []
    keywords = 0
    for token in KeywordLexer().tokenize(text):
        if token.type == "KEYWORD":
            keywords += 1
        parts.append(token.value)

    normalized = "".join(parts)
    logger.debug(f"Normalized {keywords} keyword(s): '{text}' -> '{normalized}'")
    return normalized
