"""Google Generative AI client shared by the flows. One request per call, no retries."""

import logging
from typing import TypeVar

from google import genai
from google.genai import errors, types
from pydantic import BaseModel, ValidationError

from chefai.config import settings

_log = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

CONFIGURATION_ERROR = (
    "AI configuration error: the API key is not valid or the Generative Language "
    "API is not enabled for this project."
)
BILLING_ERROR = (
    "AI billing error: the free quota has been exceeded. Enable billing for the "
    "Google Cloud project to continue."
)
GENERIC_ERROR = "The AI assistant could not respond. Check the server logs for details."
EMPTY_RESPONSE_ERROR = "The AI returned an empty response. Please try again."

SAFETY_SETTINGS = [
    types.SafetySetting(
        category=types.HarmCategory.HARM_CATEGORY_HATE_SPEECH,
        threshold=types.HarmBlockThreshold.BLOCK_ONLY_HIGH,
    ),
    types.SafetySetting(
        category=types.HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT,
        threshold=types.HarmBlockThreshold.BLOCK_NONE,
    ),
    types.SafetySetting(
        category=types.HarmCategory.HARM_CATEGORY_HARASSMENT,
        threshold=types.HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE,
    ),
    types.SafetySetting(
        category=types.HarmCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT,
        threshold=types.HarmBlockThreshold.BLOCK_LOW_AND_ABOVE,
    ),
]


class FlowError(RuntimeError):
    """Raised when a generative flow cannot produce a result."""


def describe_error(exc: Exception) -> str:
    """Map a provider error to the message shown to the user."""
    message = str(exc)
    lowered = message.lower()
    if (
        "api key not valid" in lowered
        or "permission denied" in lowered
        or "permission_denied" in lowered
    ):
        return CONFIGURATION_ERROR
    if "billing" in lowered:
        return BILLING_ERROR
    return GENERIC_ERROR


class GenerativeClient:
    def __init__(self, api_key: str = "", model: str = ""):
        self.api_key = api_key or settings.google_api_key
        self.model = model or settings.genai_model
        self._client: genai.Client | None = None

    def _get_client(self) -> genai.Client:
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def _request(
        self, flow: str, prompt: str, config: types.GenerateContentConfig
    ) -> types.GenerateContentResponse:
        try:
            return await self._get_client().aio.models.generate_content(
                model=self.model, contents=prompt, config=config
            )
        except errors.APIError as exc:
            _log.exception("[%s] generation request failed", flow)
            raise FlowError(describe_error(exc)) from exc

    async def generate_structured(
        self,
        flow: str,
        prompt: str,
        schema: type[M],
        temperature: float | None = None,
        safety: bool = True,
    ) -> M:
        config = types.GenerateContentConfig(
            temperature=temperature,
            response_mime_type="application/json",
            response_schema=schema,
            safety_settings=SAFETY_SETTINGS if safety else None,
        )
        response = await self._request(flow, prompt, config)

        parsed = response.parsed
        if isinstance(parsed, schema):
            return parsed
        if not response.text:
            _log.warning("[%s] empty response", flow)
            raise FlowError(EMPTY_RESPONSE_ERROR)
        try:
            return schema.model_validate_json(response.text)
        except ValidationError as exc:
            _log.warning("[%s] response did not match %s: %s", flow, schema.__name__, exc)
            raise FlowError(GENERIC_ERROR) from exc

    async def generate_text(
        self,
        flow: str,
        prompt: str,
        temperature: float | None = None,
        safety: bool = True,
    ) -> str:
        config = types.GenerateContentConfig(
            temperature=temperature,
            safety_settings=SAFETY_SETTINGS if safety else None,
        )
        response = await self._request(flow, prompt, config)
        text = (response.text or "").strip()
        if not text:
            _log.warning("[%s] empty response", flow)
            raise FlowError(EMPTY_RESPONSE_ERROR)
        return text
