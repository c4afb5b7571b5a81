"""
Tests for the rule-based Spanish query interpreter.
"""

import pytest

from qsar_assistant.api.v1.nlp_utils import SUBSTANCE_HINTS, strip_accents


class TestSubstanceExtraction:
    """Substance name extraction."""

    def test_example_queries(self, parser):
        """The first phrase match is taken as is, even when it is a generic word."""
        test_cases = [
            ("¿El benceno es irritante dérmico según QSAR?", "benceno"),
            ("Dame predicciones de toxicidad aguda oral para el tolueno", "toxicidad"),
            ("Genera un reporte completo de endpoints toxicológicos para formaldehído", "endpoints"),
            ("¿La sustancia acetona es sensibilizante dérmico?", "acetona"),
            ("Consulta bioacumulación y biodegradación para cloroformo", "cloroformo"),
            ("Toxicidad aguda por inhalación del metanol según OECD 403", "metanol"),
            ("Análisis completo de seguridad química para etanol", "seguridad"),
            ("Irritación ocular y dérmica del fenol", "fenol"),
        ]

        for text, expected in test_cases:
            result = parser.parse_query(text).substance
            assert result == expected, f"'{text}' → '{result}', expected '{expected}'"

    def test_first_match_wins(self, parser):
        """Only the first match of a pattern is considered."""
        test_cases = [
            ("dame predicciones de toxicidad aguda oral para el tolueno", "toxicidad"),
            ("informe de la acetona para el tolueno", "acetona"),
            ("toxicidad del fenol y del benceno", "fenol"),
            # "de ab" is too short; the later "para el xyz123" is never tried
            ("muestra datos de ab para el xyz123", "datos"),
        ]

        for text, expected in test_cases:
            result = parser.extract_substance(text)
            assert result == expected, f"'{text}' → '{result}', expected '{expected}'"

    def test_quoted_text_wins(self, parser):
        """Quoted text takes precedence over every other pattern."""
        test_cases = [
            ('Consulta la toxicidad de "Ácido Sulfúrico"', "ácido sulfúrico"),
            ("¿La sustancia 'acetona' es tóxica?", "acetona"),
            ('Irritación del benceno y "cloruro de vinilo"', "cloruro de vinilo"),
            ("Bioacumulación de «dicloroetano»", "dicloroetano"),
        ]

        for text, expected in test_cases:
            result = parser.parse_query(text).substance
            assert result == expected, f"'{text}' → '{result}', expected '{expected}'"

    def test_short_quote_is_ignored(self, parser):
        assert parser.parse_query('toxicidad del tolueno "ab"').substance == "tolueno"

    def test_unknown_substance_after_preposition(self, parser):
        query = parser.parse_query("reporte para xyz123")
        assert query.substance == "xyz123"
        assert query.substance not in parser.catalog.stopwords

    def test_token_fallback_skips_stopwords_and_keywords(self, parser):
        """First token longer than 3 chars that is neither stopword nor keyword."""
        assert parser.extract_substance("¿es irritante ocular la glicerina?") == "glicerina"

    def test_token_fallback_picks_first_candidate(self, parser):
        # adjectives are picked up before the real name
        assert parser.extract_substance("¿es peligrosa la glicerina?") == "peligrosa"

    def test_stopwords_only(self, parser):
        """Inputs with nothing but stopwords yield the sentinel."""
        for text in ["¿Qué es la toxicidad?", "dame el informe", "", "   "]:
            result = parser.parse_query(text).substance
            assert result == "sustancia_desconocida", f"'{text}' → '{result}'"


class TestEndpointExtraction:
    """Endpoint keyword and OECD guideline mapping."""

    def test_keywords(self, parser):
        test_cases = [
            ("¿El benceno es irritante dérmico según QSAR?", ("skin_irritation", "eye_irritation")),
            ("Sensibilización del fenol", ("skin_sensitization",)),
            ("Consulta bioacumulación y biodegradación para cloroformo", ("bioaccumulation", "biodegradation")),
            ("LC50 del metanol", ("acute_inhalation",)),
            ("Evaluación ambiental del tolueno", ("bioaccumulation", "biodegradation")),
            (
                "Reporte completo para acetona",
                ("acute_oral", "acute_dermal", "acute_inhalation",
                 "skin_irritation", "eye_irritation", "skin_sensitization"),
            ),
        ]

        for text, expected in test_cases:
            result = parser.parse_query(text).endpoints
            assert result == expected, f"'{text}' → {result}, expected {expected}"

    def test_eye_irritation(self, parser):
        """'irritación ocular' selects eye irritation and nothing environmental."""
        for text in ["Irritación ocular del benceno", "irritación ocular para 'xyz'", "IRRITACIÓN OCULAR del fenol"]:
            endpoints = parser.parse_query(text).endpoints
            assert "eye_irritation" in endpoints, text
            assert "bioaccumulation" not in endpoints, text
            assert "biodegradation" not in endpoints, text

    def test_accents_are_optional(self, parser):
        assert parser.parse_query("irritacion ocular del fenol").endpoints == \
            parser.parse_query("irritación ocular del fenol").endpoints

    def test_oecd_guideline_union(self, parser):
        query = parser.parse_query("Toxicidad aguda oral del tolueno según OECD 401")
        assert query.substance == "tolueno"
        assert query.endpoints == ("acute_oral", "acute_dermal", "acute_inhalation")

    def test_oecd_guideline_only(self, parser):
        test_cases = [
            ("resultados del tolueno según OECD 405", ("eye_irritation",)),
            ("resultados del tolueno según OECD TG 429", ("skin_sensitization",)),
            ("resultados del tolueno según oecd 305 y oecd 301", ("bioaccumulation", "biodegradation")),
        ]

        for text, expected in test_cases:
            result = parser.parse_query(text).endpoints
            assert result == expected, f"'{text}' → {result}, expected {expected}"

    def test_default_endpoint(self, parser):
        for text in ["reporte para xyz123", "resultados del tolueno según OECD 999"]:
            assert parser.parse_query(text).endpoints == ("acute_oral",), text

    def test_no_duplicates(self, parser):
        endpoints = parser.parse_query("irritación irritante corrosivo del fenol").endpoints
        assert len(endpoints) == len(set(endpoints))

    def test_is_endpoint_keyword(self, parser):
        assert parser.is_endpoint_keyword("oral")
        assert parser.is_endpoint_keyword("ocular")
        assert not parser.is_endpoint_keyword("benceno")


class TestParseQuery:

    def test_query_shape(self, parser):
        query = parser.parse_query("  ¿El benceno es irritante dérmico según QSAR?  ")
        assert query.language == "es"
        assert query.query_type == "natural"
        assert isinstance(query.endpoints, tuple)

    def test_query_is_immutable(self, parser):
        query = parser.parse_query("Toxicidad aguda oral del tolueno")
        with pytest.raises(Exception):
            query.substance = "benceno"

    def test_deterministic(self, parser):
        text = "Genera un reporte completo de endpoints toxicológicos para formaldehído"
        assert parser.parse_query(text) == parser.parse_query(text)

    def test_case_insensitive(self, parser):
        assert parser.parse_query("TOXICIDAD AGUDA ORAL DEL TOLUENO") == \
            parser.parse_query("toxicidad aguda oral del tolueno")


class TestValidation:

    def test_valid_query(self, parser):
        validation = parser.validate_query("Toxicidad aguda oral del tolueno según OECD 401")
        assert validation.valid
        assert validation.suggestions == ()

    def test_unknown_substance(self, parser):
        validation = parser.validate_query("¿Qué es la toxicidad?")
        assert not validation.valid
        assert validation.suggestions == SUBSTANCE_HINTS

    def test_example_queries(self, parser):
        examples = parser.get_example_queries()
        assert len(examples) == 8
        for example in examples:
            assert parser.validate_query(example).valid, example


def test_strip_accents():
    assert strip_accents("Irritación Ocular") == "irritacion ocular"
