from datetime import datetime
from typing import List

from qsar_assistant.models.qsar.explanations import confidence_percent
from qsar_assistant.schemas.qsar import QSARQuery, QSARResult

CONTENT_PREVIEW_CHARS = 500

RISK_ICONS = {
    "very_high": "🚨",
    "high": "⚠️",
    "moderate": "🔶",
    "low": "✅",
}


def risk_icon(category: str) -> str:
    return RISK_ICONS.get(category, "🔍")


def format_value(result: QSARResult) -> str:
    return f"{result.prediction.value} {result.prediction.unit}".strip()


def format_spanish_response(query: QSARQuery, results: List[QSARResult]) -> str:
    if not results:
        return f'No se encontraron predicciones para la sustancia "{query.substance}".'

    message = f"Análisis QSAR completado para **{query.substance}**:\n\n"

    for result in results:
        message += (
            f"{risk_icon(result.prediction.category)} **{result.endpoint}**\n"
            f"   Predicción: {format_value(result)}\n"
            f"   Confianza: {confidence_percent(result.prediction.confidence)}%\n"
            f"   {result.regulatory_relevance_es}\n\n"
        )

    if len(results) > 1:
        message += (
            f"✅ **Análisis completo**: Se evaluaron {len(results)} endpoints toxicológicos.\n"
            '📊 **Reporte PDF disponible** - Solicita "genera reporte PDF" para obtener documentación completa.'
        )

    return message


def format_report_date(generated_at: datetime) -> str:
    # es-ES locale style: 18/10/2026, 14:05:09
    return generated_at.strftime("%d/%m/%Y, %H:%M:%S")


def format_report_content(
    substance: str,
    user_query: str,
    results: List[QSARResult],
    generated_at: datetime,
) -> str:
    """
    Plain-text QSAR report. Stands in for a PDF; no binary is produced.
    """
    sections = []
    for result in results:
        sections.append(
            f"- {result.endpoint}\n"
            f"  Valor: {format_value(result)}\n"
            f"  Confianza: {confidence_percent(result.prediction.confidence)}%\n"
            f"  Relevancia regulatoria: {result.regulatory_relevance_es}\n"
            f"  Explicación: {result.explanation_es}\n"
        )

    return (
        "REPORTE DE ANÁLISIS QSAR\n"
        "========================\n\n"
        f"Sustancia analizada: {substance}\n"
        f'Consulta original: "{user_query}"\n'
        f"Fecha de generación: {format_report_date(generated_at)}\n\n"
        "RESULTADOS TOXICOLÓGICOS:\n"
        + "\n".join(sections)
        + "\nCONCLUSIONES:\n"
        "Este reporte ha sido generado mediante modelos QSAR (Quantitative Structure-Activity Relationship)\n"
        "para evaluación de riesgo químico según directrices OECD.\n\n"
        "---\n"
        "Generado por: Regulator.IA - QSAR Toolbox Integrator\n"
        "Sistema de evaluación toxicológica automatizada\n"
    )


def content_preview(content: str) -> str:
    return content[:CONTENT_PREVIEW_CHARS] + "..."
