"""
Gemini client wrapper.

All model traffic goes through ``GeminiClient``. It has two calls:

    generate_json(contents, schema)  -> parsed JSON (dict or list)
    chat(message, history, system_instruction) -> reply text

Any failure (missing key, transport error, blocked or empty reply,
invalid JSON) surfaces as ``AIServiceError`` so feature services can
apply their single fallback.
"""

import json
import logging

import google.generativeai as genai
from django.conf import settings

from .exceptions import AIServiceError, AIConfigurationError

logger = logging.getLogger(__name__)


class GeminiClient:
    """Thin wrapper around google.generativeai for JSON and chat calls."""

    def __init__(self, api_key: str, model_name: str):
        if not api_key:
            raise AIConfigurationError("GEMINI_API_KEY is not configured")
        genai.configure(api_key=api_key)
        self.api_key = api_key
        self.model_name = model_name

    def generate_json(self, contents, schema: dict | None = None):
        """
        Request a JSON reply, optionally constrained by a response schema.

        Args:
            contents: Prompt text, or a list of parts (text and inline data)
            schema: Gemini response schema (OpenAPI subset)

        Returns:
            The decoded JSON value.
        """
        config = {'response_mime_type': 'application/json'}
        if schema is not None:
            config['response_schema'] = schema

        model = genai.GenerativeModel(self.model_name)
        try:
            response = model.generate_content(
                contents,
                generation_config=genai.GenerationConfig(**config),
            )
            text = response.text
        except Exception as e:
            raise AIServiceError(f"Gemini request failed: {e}") from e

        if not text:
            raise AIServiceError("No data returned from Gemini")

        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise AIServiceError(f"Gemini returned invalid JSON: {e}") from e

    def chat(self, message: str, history: list[dict], system_instruction: str) -> str:
        """
        Send one chat turn.

        Args:
            message: The user's new message
            history: Prior turns as ``{'role': 'user'|'model', 'content': str}``
            system_instruction: Persona and context for the model

        Returns:
            The model's reply text.
        """
        model = genai.GenerativeModel(self.model_name, system_instruction=system_instruction)
        try:
            session = model.start_chat(history=[
                {'role': turn['role'], 'parts': [turn['content']]}
                for turn in history
            ])
            response = session.send_message(message)
            text = response.text
        except Exception as e:
            raise AIServiceError(f"Gemini chat failed: {e}") from e

        if not text:
            raise AIServiceError("Empty reply from Gemini")
        return text


_shared_client = None


def get_client() -> GeminiClient:
    """
    Return the shared client for the configured key and model.

    ``genai.configure`` sets the key process-wide, so there is one client;
    it is rebuilt when the configured key or model changes.
    """
    global _shared_client
    api_key, model_name = settings.GEMINI_API_KEY, settings.GEMINI_MODEL
    client = _shared_client
    if client is None or (client.api_key, client.model_name) != (api_key, model_name):
        logger.info("Initialising Gemini client for model %s", model_name)
        client = _shared_client = GeminiClient(api_key, model_name)
    return client
