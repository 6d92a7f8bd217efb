"""User-facing text catalogues (English and Spanish)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .utils.logging import get_logger

_LOGGER = get_logger(__name__)

DEFAULT_LANGUAGE = "en"


class AgeError(str, Enum):
    """Reasons a single age field can fail validation, in precedence order."""

    MISSING_VALUE = "missing_value"
    NOT_A_NUMBER = "not_a_number"
    OUT_OF_RANGE = "out_of_range"


@dataclass(frozen=True)
class Messages:
    app_title: str
    app_intro: str
    input_header: str
    person_label: str
    age_placeholder: str
    calculate: str
    reset: str
    results_header: str
    minors: str
    minors_caption: str
    adults: str
    adults_caption: str
    seniors: str
    seniors_caption: str
    minimum: str
    maximum: str
    mean: str
    years: str
    entered_ages: str
    table_expander: str
    table_person: str
    table_age: str
    table_bracket: str
    missing_value: str
    not_a_number: str
    out_of_range: str
    submit_blocked: str


ENGLISH = Messages(
    app_title="Age Analysis",
    app_intro="Enter the age of 10 people to get a statistical summary.",
    input_header="Ages (1-120 years)",
    person_label="Person {number}",
    age_placeholder="Age",
    calculate="Calculate statistics",
    reset="Reset",
    results_header="Statistical analysis",
    minors="Minors",
    minors_caption="under 18 years",
    adults="Adults",
    adults_caption="18-59 years",
    seniors="Seniors",
    seniors_caption="60+ years",
    minimum="Minimum age",
    maximum="Maximum age",
    mean="Mean age",
    years="years",
    entered_ages="Entered ages",
    table_expander="Per-person breakdown",
    table_person="Person",
    table_age="Age",
    table_bracket="Bracket",
    missing_value="Please enter an age",
    not_a_number="Please enter a valid number",
    out_of_range="Age must be between 1 and 120 years",
    submit_blocked="Fix the highlighted fields before calculating.",
)

SPANISH = Messages(
    app_title="Programa de Análisis de Edades",
    app_intro="Ingrese la edad de 10 personas para obtener un análisis estadístico.",
    input_header="Ingreso de Edades (1-120 años)",
    person_label="Persona {number}",
    age_placeholder="Edad",
    calculate="Calcular Estadísticas",
    reset="Reiniciar",
    results_header="Análisis Estadístico",
    minors="Menores de Edad",
    minors_caption="menores de 18 años",
    adults="Adultos",
    adults_caption="18-59 años",
    seniors="Adultos Mayores",
    seniors_caption="60+ años",
    minimum="Edad Mínima",
    maximum="Edad Máxima",
    mean="Edad Promedio",
    years="años",
    entered_ages="Edades Ingresadas",
    table_expander="Detalle por persona",
    table_person="Persona",
    table_age="Edad",
    table_bracket="Grupo",
    missing_value="Por favor ingrese una edad",
    not_a_number="Por favor ingrese un número válido",
    out_of_range="La edad debe estar entre 1 y 120 años",
    submit_blocked="Corrija los campos marcados antes de calcular.",
)

CATALOGUES: dict[str, Messages] = {
    "en": ENGLISH,
    "es": SPANISH,
}


def get_messages(language: str | None = None) -> Messages:
    """Return the catalogue for ``language``, falling back to English."""

    key = (language or DEFAULT_LANGUAGE).strip().lower()
    messages = CATALOGUES.get(key)
    if messages is None:
        _LOGGER.warning("Unsupported language %r, falling back to %r", language, DEFAULT_LANGUAGE)
        return CATALOGUES[DEFAULT_LANGUAGE]
    return messages


def error_message(error: AgeError | None, messages: Messages = ENGLISH) -> str:
    """Map a validation error to its display text ("" for no error)."""

    if error is None:
        return ""
    return {
        AgeError.MISSING_VALUE: messages.missing_value,
        AgeError.NOT_A_NUMBER: messages.not_a_number,
        AgeError.OUT_OF_RANGE: messages.out_of_range,
    }[error]
