# abquiz/llm_helper.py
# Thin wrapper around the text-generation service. The core only depends on
# the TextGenerator protocol, so tests can pass a fake that returns canned text.

import logging
from typing import Optional, Protocol

import httpx

from .config import AzureOpenAISettings
from .errors import ServiceError
from .models import GenerationParams

logger = logging.getLogger(__name__)


class TextGenerator(Protocol):
    async def generate(self, system_prompt: str, user_prompt: str, params: GenerationParams) -> str:
        ...


class AzureOpenAIGenerator:
    """Calls an Azure OpenAI chat-completions deployment once per request."""

    def __init__(
        self,
        settings: Optional[AzureOpenAISettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.settings = settings or AzureOpenAISettings.from_env()
        self._transport = transport

    def build_body(self, system_prompt: str, user_prompt: str, params: GenerationParams) -> dict:
        body = {
            'messages': [
                {'role': 'system', 'content': system_prompt},
                {'role': 'user', 'content': user_prompt},
            ],
            'max_tokens': params.max_tokens,
            'temperature': params.temperature,
        }
        if params.json_mode:
            body['response_format'] = {'type': 'json_object'}
        return body

    async def generate(self, system_prompt: str, user_prompt: str, params: GenerationParams) -> str:
        url = self.settings.completions_url()
        headers = {
            'Content-Type': 'application/json',
            'api-key': self.settings.api_key,
        }
        body = self.build_body(system_prompt, user_prompt, params)

        try:
            async with httpx.AsyncClient(timeout=self.settings.timeout, transport=self._transport) as client:
                resp = await client.post(url, headers=headers, json=body)
        except httpx.HTTPError as e:
            logger.error(f"Model request failed: {type(e).__name__}: {e}")
            raise ServiceError('analysis failed') from e

        if not resp.is_success:
            logger.error(f"Model service returned status {resp.status_code}")
            raise ServiceError('analysis failed')

        try:
            data = resp.json()
            content = data['choices'][0]['message']['content']
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.error(f"Unexpected model response shape: {type(e).__name__}: {e}")
            raise ServiceError('analysis failed: no generated text in response') from e

        if not isinstance(content, str):
            raise ServiceError('analysis failed: no generated text in response')
        return content
