"""
Read-only reference data shared by the query parser and the QSAR simulator.

Everything here is built once at startup by `build_default_catalog()` and
handed to the components that need it; nothing mutates it afterwards.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

from qsar_assistant.schemas.qsar import EndpointDefinition, Prediction

UNKNOWN_SUBSTANCE = "sustancia_desconocida"
DEFAULT_ENDPOINT = "acute_oral"

# -----------------------------
# Endpoint definitions
# -----------------------------
TOXICOLOGY_ENDPOINTS: Tuple[EndpointDefinition, ...] = (
    EndpointDefinition(
        code="acute_oral",
        name_es="Toxicidad Aguda Oral",
        name_en="Acute Oral Toxicity",
        description_es="Evaluación de toxicidad tras administración oral única",
        oecd_guideline="OECD TG 401/423/425",
        category="acute",
    ),
    EndpointDefinition(
        code="acute_dermal",
        name_es="Toxicidad Aguda Dérmica",
        name_en="Acute Dermal Toxicity",
        description_es="Evaluación de toxicidad tras aplicación dérmica única",
        oecd_guideline="OECD TG 402",
        category="acute",
    ),
    EndpointDefinition(
        code="acute_inhalation",
        name_es="Toxicidad Aguda por Inhalación",
        name_en="Acute Inhalation Toxicity",
        description_es="Evaluación de toxicidad tras exposición inhalatoria",
        oecd_guideline="OECD TG 403/436",
        category="acute",
    ),
    EndpointDefinition(
        code="skin_irritation",
        name_es="Irritación/Corrosión Dérmica",
        name_en="Skin Irritation/Corrosion",
        description_es="Potencial irritante o corrosivo para la piel",
        oecd_guideline="OECD TG 404",
        category="irritation",
    ),
    EndpointDefinition(
        code="eye_irritation",
        name_es="Irritación Ocular",
        name_en="Eye Irritation",
        description_es="Potencial irritante para los ojos",
        oecd_guideline="OECD TG 405",
        category="irritation",
    ),
    EndpointDefinition(
        code="skin_sensitization",
        name_es="Sensibilización Dérmica",
        name_en="Skin Sensitization",
        description_es="Potencial sensibilizante para la piel",
        oecd_guideline="OECD TG 406/429/442A/442B",
        category="sensitization",
    ),
    EndpointDefinition(
        code="bioaccumulation",
        name_es="Bioacumulación",
        name_en="Bioaccumulation",
        description_es="Factor de bioacumulación en organismos acuáticos",
        oecd_guideline="OECD TG 305",
        category="environmental",
    ),
    EndpointDefinition(
        code="biodegradation",
        name_es="Biodegradación",
        name_en="Biodegradation",
        description_es="Capacidad de degradación biológica en el ambiente",
        oecd_guideline="OECD TG 301",
        category="environmental",
    ),
)

# -----------------------------
# Endpoint keywords (Spanish)
# -----------------------------
_HUMAN_HEALTH = (
    "acute_oral", "acute_dermal", "acute_inhalation",
    "skin_irritation", "eye_irritation", "skin_sensitization",
)

ENDPOINT_KEYWORDS = {
    # Toxicidad aguda
    "toxicidad aguda": ("acute_oral", "acute_dermal", "acute_inhalation"),
    "toxicidad oral": ("acute_oral",),
    "toxicidad dérmica": ("acute_dermal",),
    "toxicidad inhalación": ("acute_inhalation",),
    "ld50": ("acute_oral", "acute_dermal"),
    "lc50": ("acute_inhalation",),
    # Irritación
    "irritación": ("skin_irritation", "eye_irritation"),
    "irritante": ("skin_irritation", "eye_irritation"),
    "corrosión": ("skin_irritation",),
    "corrosivo": ("skin_irritation",),
    "irritación piel": ("skin_irritation",),
    "irritación dérmica": ("skin_irritation",),
    "irritación ocular": ("eye_irritation",),
    "irritación ojos": ("eye_irritation",),
    # Sensibilización
    "sensibilización": ("skin_sensitization",),
    "sensibilizante": ("skin_sensitization",),
    "alergia": ("skin_sensitization",),
    "alérgico": ("skin_sensitization",),
    # Ambiental
    "bioacumulación": ("bioaccumulation",),
    "bioconcentración": ("bioaccumulation",),
    "biodegradación": ("biodegradation",),
    "persistencia": ("biodegradation",),
    "ambiental": ("bioaccumulation", "biodegradation"),
    # General
    "todas": _HUMAN_HEALTH,
    "completo": _HUMAN_HEALTH,
    "endpoints": _HUMAN_HEALTH,
}

OECD_GUIDELINES = {
    "401": ("acute_oral",),
    "423": ("acute_oral",),
    "425": ("acute_oral",),
    "402": ("acute_dermal",),
    "403": ("acute_inhalation",),
    "436": ("acute_inhalation",),
    "404": ("skin_irritation",),
    "405": ("eye_irritation",),
    "406": ("skin_sensitization",),
    "429": ("skin_sensitization",),
    "442": ("skin_sensitization",),
    "305": ("bioaccumulation",),
    "301": ("biodegradation",),
}

STOPWORDS = frozenset({
    "es", "la", "el", "las", "los", "una", "un", "de", "para", "con", "por", "en", "que", "qué",
    "del", "al", "y", "o", "se", "su", "sus", "sobre", "cuál", "cual", "como", "cómo",
    "dame", "genera", "muestra", "busca", "encuentra", "consulta", "predicción", "predicciones",
    "toxicidad", "irritación", "sensibilización", "reporte", "informe", "pdf", "análisis",
    "seguridad", "química", "químico", "toxicológico", "toxicológicos", "toxicológica",
    "según", "qsar", "toolbox", "oecd", "sustancia", "compuesto", "producto",
})

EXAMPLE_QUERIES = (
    "¿El benceno es irritante dérmico según QSAR?",
    "Dame predicciones de toxicidad aguda oral para el tolueno",
    "Genera un reporte completo de endpoints toxicológicos para formaldehído",
    "¿La sustancia acetona es sensibilizante dérmico?",
    "Consulta bioacumulación y biodegradación para cloroformo",
    "Toxicidad aguda por inhalación del metanol según OECD 403",
    "Análisis completo de seguridad química para etanol",
    "Irritación ocular y dérmica del fenol",
)


# -----------------------------
# Substance table
# -----------------------------
def _p(value, unit, confidence, category) -> Prediction:
    return Prediction(value=value, unit=unit, confidence=confidence, category=category)


SUBSTANCE_DATABASE = {
    "benceno": {
        "acute_oral": _p(930, "mg/kg", 0.85, "moderate"),
        "acute_dermal": _p(9400, "mg/kg", 0.78, "low"),
        "skin_irritation": _p("Irritante", "", 0.82, "moderate"),
        "eye_irritation": _p("Irritante severo", "", 0.88, "high"),
        "skin_sensitization": _p("No sensibilizante", "", 0.75, "low"),
        "bioaccumulation": _p(7.8, "log BCF", 0.72, "low"),
        "biodegradation": _p("Biodegradable", "", 0.80, "low"),
    },
    "tolueno": {
        "acute_oral": _p(636, "mg/kg", 0.89, "moderate"),
        "acute_dermal": _p(14100, "mg/kg", 0.83, "low"),
        "acute_inhalation": _p(49000, "mg/m³", 0.81, "low"),
        "skin_irritation": _p("Ligeramente irritante", "", 0.77, "low"),
        "eye_irritation": _p("Irritante moderado", "", 0.85, "moderate"),
        "skin_sensitization": _p("No sensibilizante", "", 0.82, "low"),
        "bioaccumulation": _p(242, "BCF", 0.76, "moderate"),
        "biodegradation": _p("Fácilmente biodegradable", "", 0.87, "low"),
    },
    "formaldehído": {
        "acute_oral": _p(100, "mg/kg", 0.92, "high"),
        "acute_dermal": _p(270, "mg/kg", 0.88, "high"),
        "acute_inhalation": _p(203, "mg/m³", 0.91, "very_high"),
        "skin_irritation": _p("Corrosivo", "", 0.95, "very_high"),
        "eye_irritation": _p("Corrosivo severo", "", 0.96, "very_high"),
        "skin_sensitization": _p("Sensibilizante fuerte", "", 0.93, "very_high"),
        "bioaccumulation": _p(0.35, "log BCF", 0.85, "low"),
        "biodegradation": _p("Fácilmente biodegradable", "", 0.90, "low"),
    },
    "acetona": {
        "acute_oral": _p(5800, "mg/kg", 0.87, "low"),
        "acute_dermal": _p(20000, "mg/kg", 0.79, "low"),
        "acute_inhalation": _p(50100, "mg/m³", 0.83, "low"),
        "skin_irritation": _p("No irritante", "", 0.84, "low"),
        "eye_irritation": _p("Ligeramente irritante", "", 0.81, "low"),
        "skin_sensitization": _p("No sensibilizante", "", 0.89, "low"),
        "bioaccumulation": _p(3.2, "BCF", 0.78, "low"),
        "biodegradation": _p("Fácilmente biodegradable", "", 0.92, "low"),
    },
    "cloroformo": {
        "acute_oral": _p(695, "mg/kg", 0.90, "moderate"),
        "acute_dermal": _p(20000, "mg/kg", 0.74, "low"),
        "acute_inhalation": _p(47702, "mg/m³", 0.86, "low"),
        "skin_irritation": _p("Ligeramente irritante", "", 0.80, "low"),
        "eye_irritation": _p("Irritante moderado", "", 0.82, "moderate"),
        "skin_sensitization": _p("No sensibilizante", "", 0.77, "low"),
        "bioaccumulation": _p(28, "BCF", 0.81, "low"),
        "biodegradation": _p("No biodegradable", "", 0.88, "high"),
    },
    "metanol": {
        "acute_oral": _p(5628, "mg/kg", 0.85, "low"),
        "acute_dermal": _p(15800, "mg/kg", 0.77, "low"),
        "acute_inhalation": _p(64000, "mg/m³", 0.80, "low"),
        "skin_irritation": _p("No irritante", "", 0.83, "low"),
        "eye_irritation": _p("Irritante leve", "", 0.79, "low"),
        "skin_sensitization": _p("No sensibilizante", "", 0.86, "low"),
        "bioaccumulation": _p(3.2, "BCF", 0.75, "low"),
        "biodegradation": _p("Fácilmente biodegradable", "", 0.89, "low"),
    },
    "etanol": {
        "acute_oral": _p(7060, "mg/kg", 0.92, "low"),
        "acute_dermal": _p(20000, "mg/kg", 0.81, "low"),
        "skin_irritation": _p("No irritante", "", 0.87, "low"),
        "eye_irritation": _p("Irritante moderado", "", 0.84, "moderate"),
        "skin_sensitization": _p("No sensibilizante", "", 0.90, "low"),
        "bioaccumulation": _p(3.2, "BCF", 0.78, "low"),
        "biodegradation": _p("Fácilmente biodegradable", "", 0.94, "low"),
    },
    "fenol": {
        "acute_oral": _p(317, "mg/kg", 0.89, "moderate"),
        "acute_dermal": _p(669, "mg/kg", 0.85, "moderate"),
        "skin_irritation": _p("Corrosivo", "", 0.91, "very_high"),
        "eye_irritation": _p("Corrosivo severo", "", 0.93, "very_high"),
        "skin_sensitization": _p("Sensibilizante débil", "", 0.78, "moderate"),
        "bioaccumulation": _p(29, "BCF", 0.83, "low"),
        "biodegradation": _p("Fácilmente biodegradable", "", 0.87, "low"),
    },
}


@dataclass(frozen=True)
class QSARCatalog:
    endpoints: Tuple[EndpointDefinition, ...]
    substances: Mapping[str, Mapping[str, Prediction]]
    endpoint_keywords: Mapping[str, Tuple[str, ...]]
    oecd_guidelines: Mapping[str, Tuple[str, ...]]
    stopwords: frozenset
    example_queries: Tuple[str, ...]
    unknown_substance: str = UNKNOWN_SUBSTANCE
    default_endpoint: str = DEFAULT_ENDPOINT
    version: str = "1.0.0-MVP"

    def get_endpoint(self, code: str) -> EndpointDefinition | None:
        for endpoint in self.endpoints:
            if endpoint.code == code:
                return endpoint
        return None

    @property
    def endpoint_codes(self) -> Tuple[str, ...]:
        return tuple(ep.code for ep in self.endpoints)

    @property
    def substance_names(self) -> Tuple[str, ...]:
        return tuple(self.substances)


def build_default_catalog(version: str = "1.0.0-MVP") -> QSARCatalog:
    """
    Assemble the built-in catalog. All mappings are wrapped read-only.
    """
    return QSARCatalog(
        endpoints=TOXICOLOGY_ENDPOINTS,
        substances=MappingProxyType({
            name: MappingProxyType(dict(table)) for name, table in SUBSTANCE_DATABASE.items()
        }),
        endpoint_keywords=MappingProxyType(dict(ENDPOINT_KEYWORDS)),
        oecd_guidelines=MappingProxyType(dict(OECD_GUIDELINES)),
        stopwords=STOPWORDS,
        example_queries=EXAMPLE_QUERIES,
        version=version,
    )
