"""
Tests for explanation, regulatory and summary text generation.
"""

from datetime import datetime

from qsar_assistant.api.v1.response_formatter import (
    content_preview,
    format_report_content,
    format_spanish_response,
    risk_icon,
)
from qsar_assistant.models.qsar.explanations import get_explanation, get_regulatory_relevance
from qsar_assistant.schemas.qsar import Prediction, QSARQuery


def _prediction(value, unit="", confidence=0.8, category="low"):
    return Prediction(value=value, unit=unit, confidence=confidence, category=category)


class TestRegulatoryRelevance:

    def test_thresholds(self, catalog):
        test_cases = [
            ("acute_oral", 100, "ALTA TOXICIDAD"),
            ("acute_oral", 636, "TOXICIDAD MODERADA"),
            ("acute_oral", 5800, "BAJA TOXICIDAD"),
            ("bioaccumulation", 2500, "REACH Anexo XIII"),
            ("bioaccumulation", 242, "BIOACUMULACIÓN MODERADA"),
            ("bioaccumulation", 7.8, "BAJO POTENCIAL"),
            ("skin_irritation", "Corrosivo", "CORROSIVO"),
            ("skin_irritation", "Irritante", "⚠️ IRRITANTE"),
            ("skin_irritation", "No irritante", "NO IRRITANTE"),
            ("skin_sensitization", "Sensibilizante fuerte", "⚠️ SENSIBILIZANTE"),
            ("skin_sensitization", "No sensibilizante", "NO SENSIBILIZANTE"),
        ]

        for code, value, expected in test_cases:
            text = get_regulatory_relevance(catalog.get_endpoint(code), _prediction(value))
            assert expected in text, f"{code}={value!r} → '{text}'"

    def test_generic_sentence_cites_guideline(self, catalog):
        text = get_regulatory_relevance(catalog.get_endpoint("eye_irritation"), _prediction("Irritante severo"))
        assert text == "Relevante para evaluación regulatoria según OECD TG 405"


class TestExplanations:

    def test_templates(self):
        test_cases = [
            ("acute_oral", _prediction(930, "mg/kg", 0.85), "Predicción de LD50 oral: 930 mg/kg. Confianza: 85%."),
            ("skin_irritation", _prediction("Irritante", "", 0.82), "Predicción de irritación dérmica: Irritante. Confianza: 82%."),
            ("bioaccumulation", _prediction(242, "BCF", 0.76), "Predicción de factor de bioconcentración: 242 BCF. Confianza: 76%."),
        ]

        for code, prediction, expected_prefix in test_cases:
            text = get_explanation(code, prediction)
            assert text.startswith(expected_prefix), f"{code} → '{text}'"


class TestSpanishResponse:

    def test_empty(self):
        query = QSARQuery(substance="xyz", endpoints=("acute_oral",))
        assert format_spanish_response(query, []) == 'No se encontraron predicciones para la sustancia "xyz".'

    def test_single_result(self, simulator):
        query = QSARQuery(substance="benceno", endpoints=("skin_irritation",))
        results = simulator.predict_toxicity(query.substance, query.endpoints)

        message = format_spanish_response(query, results)
        assert message.startswith("Análisis QSAR completado para **benceno**")
        assert "🔶 **Irritación/Corrosión Dérmica**" in message
        assert "Predicción: Irritante\n" in message
        assert "Confianza: 82%" in message
        assert "Análisis completo" not in message

    def test_multiple_results(self, simulator):
        query = QSARQuery(substance="tolueno", endpoints=("acute_oral", "eye_irritation"))
        results = simulator.predict_toxicity(query.substance, query.endpoints)

        message = format_spanish_response(query, results)
        assert "Predicción: 636 mg/kg" in message
        assert "Se evaluaron 2 endpoints toxicológicos" in message

    def test_risk_icons(self):
        assert risk_icon("very_high") == "🚨"
        assert risk_icon("high") == "⚠️"
        assert risk_icon("moderate") == "🔶"
        assert risk_icon("low") == "✅"
        assert risk_icon("unknown") == "🔍"


class TestReport:

    def test_report_content(self, simulator):
        results = simulator.predict_toxicity("fenol", ["acute_oral", "skin_irritation"])
        content = format_report_content(
            substance="fenol",
            user_query="Irritación ocular y dérmica del fenol",
            results=results,
            generated_at=datetime(2026, 3, 4, 5, 6, 7),
        )

        assert "Sustancia analizada: fenol" in content
        assert 'Consulta original: "Irritación ocular y dérmica del fenol"' in content
        assert "Fecha de generación: 04/03/2026, 05:06:07" in content
        assert "- Toxicidad Aguda Oral\n  Valor: 317 mg/kg" in content
        assert "- Irritación/Corrosión Dérmica\n  Valor: Corrosivo" in content

    def test_preview(self):
        content = "x" * 800
        preview = content_preview(content)
        assert preview == "x" * 500 + "..."
