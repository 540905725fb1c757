"""Gemini-backed provider for conceptual ("theory") questions.

The provider asks Gemini for a single multiple-choice question as JSON and
validates the reply before turning it into a ``Question``. Any failure
(missing API key, quota, network, blocked or malformed response) is logged
and reported as ``None`` so the quiz controller can fall back to a local
question.
"""

from __future__ import annotations

import logging
from uuid import uuid4

import google.generativeai as genai
from google.api_core.exceptions import GoogleAPIError, ResourceExhausted
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from mathmaster.constants.quiz_constants import OPTION_COUNT
from mathmaster.core.models import DiagnosticCategory, Question

logger = logging.getLogger(__name__)

DEFAULT_THEORY_MODEL = "gemini-1.5-flash"

THEORY_PROMPT = """
Genera una pregunta de selección múltiple para estudiantes de séptimo grado (12-13 años) de matemáticas.
El tema debe ser TEÓRICO y CONCEPTUAL sobre: Uso de signos (ley de signos), propiedades de la igualdad, o normas operativas básicas (jerarquía de operaciones).
La pregunta debe evaluar la comprensión del concepto, no solo calcular.
Devuelve exactamente 4 opciones y el índice (0-3) de la respuesta correcta.
El idioma debe ser Español.
""".strip()

THEORY_RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "text": {
            "type": "STRING",
            "description": "El enunciado de la pregunta matemática.",
        },
        "options": {
            "type": "ARRAY",
            "items": {"type": "STRING"},
            "description": "4 opciones de respuesta posibles.",
        },
        "correctIndex": {
            "type": "INTEGER",
            "description": "El índice (0-3) de la respuesta correcta.",
        },
    },
    "required": ["text", "options", "correctIndex"],
}


class TheoryQuestionPayload(BaseModel):
    """Shape Gemini is asked to return."""

    model_config = ConfigDict(populate_by_name=True)

    text: str = Field(min_length=1)
    options: list[str] = Field(min_length=OPTION_COUNT, max_length=OPTION_COUNT)
    correct_index: int = Field(alias="correctIndex", ge=0, le=OPTION_COUNT - 1)


class TheoryQuestionProvider:
    """Fetches one theory question per call from Gemini."""

    def __init__(
        self,
        api_key: str,
        model_name: str = DEFAULT_THEORY_MODEL,
        timeout_seconds: float = 20.0,
    ) -> None:
        self.api_key = api_key
        self.model_name = model_name
        self.timeout_seconds = timeout_seconds
        self._model = None
        if api_key:
            genai.configure(api_key=api_key)

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def fetch_question(self) -> Question | None:
        """Return a fresh theory question, or None when Gemini is unavailable."""
        if not self.is_configured:
            logger.warning("No Gemini API key configured; theory question unavailable.")
            return None

        try:
            response = self._get_model().generate_content(
                THEORY_PROMPT,
                request_options={"timeout": self.timeout_seconds},
            )
            raw_text = response.text
        except ResourceExhausted:
            logger.warning("Gemini quota exhausted for model %s.", self.model_name)
            return None
        except GoogleAPIError as exc:
            logger.warning("Gemini request failed: %s", exc)
            return None
        except ValueError as exc:
            # response.text raises ValueError when the candidate was blocked or empty.
            logger.warning("Gemini returned no usable text: %s", exc)
            return None
        except Exception:
            logger.exception("Unexpected error while requesting a theory question.")
            return None

        return parse_theory_response(raw_text)

    def _get_model(self) -> genai.GenerativeModel:
        if self._model is None:
            self._model = genai.GenerativeModel(
                self.model_name,
                generation_config=genai.GenerationConfig(
                    response_mime_type="application/json",
                    response_schema=THEORY_RESPONSE_SCHEMA,
                ),
            )
        return self._model


def parse_theory_response(raw_text: str | None) -> Question | None:
    """Validate Gemini's JSON reply and build a ``Question`` from it."""
    if not raw_text or not raw_text.strip():
        logger.warning("Gemini returned an empty theory question.")
        return None

    try:
        payload = TheoryQuestionPayload.model_validate_json(raw_text)
    except ValidationError as exc:
        logger.warning("Discarding malformed theory question: %s", exc.errors())
        return None

    return Question(
        id=str(uuid4()),
        text=payload.text.strip(),
        options=[option.strip() for option in payload.options],
        correct_index=payload.correct_index,
        category=DiagnosticCategory.THEORY,
        is_remote_generated=True,
    )
