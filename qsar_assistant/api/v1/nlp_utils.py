import re
import unicodedata
from typing import List

from loguru import logger

from qsar_assistant.models.qsar.catalog import QSARCatalog
from qsar_assistant.schemas.qsar import QSARQuery, QueryValidation

# -----------------------------
# Substance patterns (first pattern with an acceptable capture wins)
# -----------------------------
QUOTED_PATTERNS = [
    re.compile(r'"([^"]+)"'),
    re.compile(r"'([^']+)'"),
    re.compile(r"“([^”]+)”"),
    re.compile(r"«([^»]+)»"),
]

PHRASE_PATTERNS = [
    re.compile(r"\b(?:sustancia|compuesto|químico|producto)\s+([\w\-]+)"),
    re.compile(r"\b(?:del|al)\s+([\w\-]+)"),
    re.compile(r"\b(?:para|de)\s+(?:(?:el|la)\s+)?([\w\-]+)"),
]

OECD_PATTERN = re.compile(r"oecd\s+(?:tg\s+)?(\d+)")

TOKEN_PUNCTUATION = re.compile(r"[¿?¡!.,;:\"'“”«»()]")

SUBSTANCE_HINTS = (
    "Por favor, especifica claramente el nombre de la sustancia química",
    'Ejemplo: "¿El benceno es irritante dérmico?"',
    "Puedes usar comillas: \"¿La sustancia 'acetona' es tóxica?\"",
)

ENDPOINT_HINTS = (
    "Por favor, especifica qué tipo de análisis toxicológico necesitas",
    "Opciones: toxicidad aguda, irritación, sensibilización, ambiental",
    'Ejemplo: "Toxicidad aguda oral del tolueno"',
)


def strip_accents(s: str) -> str:
    """Lowercase and drop combining marks so 'Irritacion' matches 'irritación'."""
    s = unicodedata.normalize("NFD", s.lower())
    return "".join(c for c in s if unicodedata.category(c) != "Mn")


# -----------------------------
# Parser
# -----------------------------
class SpanishQSARParser:
    """
    Rule-based interpreter for Spanish toxicology questions.

    Extracts a substance name and endpoint codes with regex and keyword
    matching. Fully deterministic: the same text always yields the same query.
    """

    def __init__(self, catalog: QSARCatalog):
        self.catalog = catalog
        self._keywords = [
            (strip_accents(keyword), codes) for keyword, codes in catalog.endpoint_keywords.items()
        ]
        self._known_substances = set(catalog.substance_names)

    def parse_query(self, user_input: str) -> QSARQuery:
        clean_input = user_input.lower().strip()

        substance = self.extract_substance(clean_input)
        endpoints = self.extract_endpoints(clean_input)
        if not endpoints:
            endpoints = [self.catalog.default_endpoint]

        query = QSARQuery(substance=substance, endpoints=tuple(endpoints))
        logger.debug(f"Parsed query: substance={query.substance!r} endpoints={list(query.endpoints)}")
        return query

    def extract_substance(self, text: str) -> str:
        text = text.lower().strip()

        # Only the first match of each pattern counts
        for pattern in QUOTED_PATTERNS + PHRASE_PATTERNS:
            match = pattern.search(text)
            if match and len(match.group(1).strip()) > 2:
                return match.group(1).strip()

        # No phrase matched: fall back to scanning tokens
        words = [TOKEN_PUNCTUATION.sub("", w) for w in text.split()]

        for word in words:
            if word in self._known_substances:
                return word

        for word in words:
            if len(word) > 3 and not self._is_filler(word):
                return word

        return self.catalog.unknown_substance

    def extract_endpoints(self, text: str) -> List[str]:
        normalized = strip_accents(text)
        found = set()

        for keyword, codes in self._keywords:
            if keyword in normalized:
                found.update(codes)

        for match in OECD_PATTERN.finditer(normalized):
            found.update(self.endpoints_for_guideline(match.group(1)))

        # Keep catalog order so results come back in a stable sequence
        return [code for code in self.catalog.endpoint_codes if code in found]

    def endpoints_for_guideline(self, guideline: str) -> List[str]:
        return list(self.catalog.oecd_guidelines.get(guideline, ()))

    def is_endpoint_keyword(self, word: str) -> bool:
        word = strip_accents(word)
        return any(word in keyword for keyword, _ in self._keywords)

    def _is_filler(self, word: str) -> bool:
        return word in self.catalog.stopwords or self.is_endpoint_keyword(word)

    def validate_query(self, user_input: str) -> QueryValidation:
        parsed = self.parse_query(user_input)

        if parsed.substance == self.catalog.unknown_substance:
            return QueryValidation(valid=False, suggestions=SUBSTANCE_HINTS)

        if not parsed.endpoints:
            return QueryValidation(valid=False, suggestions=ENDPOINT_HINTS)

        return QueryValidation(valid=True)

    def get_example_queries(self) -> List[str]:
        return list(self.catalog.example_queries)
