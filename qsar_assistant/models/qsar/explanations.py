from qsar_assistant.schemas.qsar import EndpointDefinition, Prediction

EXPLANATION_TEMPLATES = {
    "acute_oral": "Predicción de LD50 oral: {value} {unit}. Confianza: {confidence}%. Basado en modelos QSAR de toxicidad aguda oral.",
    "acute_dermal": "Predicción de LD50 dérmica: {value} {unit}. Confianza: {confidence}%. Basado en modelos de penetración dérmica y toxicidad sistémica.",
    "acute_inhalation": "Predicción de LC50 inhalatoria: {value} {unit}. Confianza: {confidence}%. Basado en modelos de toxicocinética pulmonar.",
    "skin_irritation": "Predicción de irritación dérmica: {value}. Confianza: {confidence}%. Basado en descriptores fisicoquímicos y modelos de irritación local.",
    "eye_irritation": "Predicción de irritación ocular: {value}. Confianza: {confidence}%. Basado en modelos de irritación mucosa y penetración ocular.",
    "skin_sensitization": "Predicción de sensibilización dérmica: {value}. Confianza: {confidence}%. Basado en modelos de activación del sistema inmune.",
    "bioaccumulation": "Predicción de factor de bioconcentración: {value} {unit}. Confianza: {confidence}%. Basado en lipofilicidad y peso molecular.",
    "biodegradation": "Predicción de biodegradación: {value}. Confianza: {confidence}%. Basado en modelos de biodisponibilidad y metabolismo microbiano.",
}

DEFAULT_EXPLANATION = "Predicción: {value}. Confianza: {confidence}%."

SIMULATED_EXPLANATION = (
    "Predicción basada en modelos QSAR para sustancia no incluida en la base de datos "
    "de entrenamiento: {substance}"
)


def confidence_percent(confidence: float) -> str:
    return f"{confidence * 100:.0f}"


def get_explanation(endpoint_code: str, prediction: Prediction) -> str:
    template = EXPLANATION_TEMPLATES.get(endpoint_code, DEFAULT_EXPLANATION)
    return template.format(
        value=prediction.value,
        unit=prediction.unit,
        confidence=confidence_percent(prediction.confidence),
    )


def get_simulated_explanation(substance: str) -> str:
    return SIMULATED_EXPLANATION.format(substance=substance)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def get_regulatory_relevance(endpoint: EndpointDefinition, prediction: Prediction) -> str:
    """
    Regulatory classification sentence for one prediction.

    Numeric thresholds apply to acute oral LD50 (mg/kg) and bioaccumulation
    (BCF); irritation and sensitization look for the classification word in
    the categorical value. Matching is case-sensitive, so "No sensibilizante"
    is not read as a sensitizer.
    """
    guideline = endpoint.oecd_guideline or "OECD"
    value = prediction.value

    if endpoint.code == "acute_oral" and _is_number(value):
        if value < 300:
            return f"⚠️ ALTA TOXICIDAD - Requiere clasificación GHS Categoría 1-2. Relevante para {guideline}"
        if value < 2000:
            return f"⚠️ TOXICIDAD MODERADA - Posible clasificación GHS Categoría 3. Relevante para {guideline}"
        return f"✅ BAJA TOXICIDAD - No requiere clasificación especial. Conforme a {guideline}"

    if endpoint.code == "skin_irritation" and isinstance(value, str):
        if "Corrosivo" in value:
            return f"🚨 CORROSIVO - Clasificación GHS Categoría 1A/1B/1C obligatoria. Crítico para {guideline}"
        if "Irritante" in value:
            return f"⚠️ IRRITANTE - Clasificación GHS Categoría 2 requerida. Relevante para {guideline}"
        return f"✅ NO IRRITANTE - Sin clasificación requerida. Conforme a {guideline}"

    if endpoint.code == "skin_sensitization" and isinstance(value, str):
        if "Sensibilizante" in value:
            return f"⚠️ SENSIBILIZANTE - Clasificación GHS Categoría 1 requerida. Crítico para {guideline}"
        return f"✅ NO SENSIBILIZANTE - Sin clasificación requerida. Conforme a {guideline}"

    if endpoint.code == "bioaccumulation" and _is_number(value):
        if value > 2000:
            return f"🚨 ALTO POTENCIAL DE BIOACUMULACIÓN - Relevante para REACH Anexo XIII. Crítico para {guideline}"
        if value > 100:
            return f"⚠️ POTENCIAL BIOACUMULACIÓN MODERADA - Considerar estudios adicionales. Relevante para {guideline}"
        return f"✅ BAJO POTENCIAL DE BIOACUMULACIÓN - Conforme a {guideline}"

    return f"Relevante para evaluación regulatoria según {guideline}"
