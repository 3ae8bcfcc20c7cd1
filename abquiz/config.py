# abquiz/config.py
import logging
import os
from typing import Optional
from pydantic import BaseModel

from .errors import ServiceError

DEFAULT_DEPLOYMENT = 'gpt-35-turbo'


class AzureOpenAISettings(BaseModel):
    api_key: str = ''
    base_url: Optional[str] = None
    api_version: Optional[str] = None
    deployment: str = DEFAULT_DEPLOYMENT
    timeout: Optional[float] = None

    @classmethod
    def from_env(cls) -> 'AzureOpenAISettings':
        timeout = os.environ.get('AZURE_OPENAI_TIMEOUT')
        return cls(
            api_key=os.environ.get('AZURE_OPENAI_API_KEY', ''),
            base_url=os.environ.get('AZURE_OPENAI_API_BASE_URL'),
            api_version=os.environ.get('AZURE_OPENAI_API_VERSION'),
            deployment=os.environ.get('AZURE_OPENAI_DEPLOYMENT') or DEFAULT_DEPLOYMENT,
            timeout=float(timeout) if timeout else None,
        )

    def completions_url(self) -> str:
        if not self.base_url or not self.api_version:
            raise ServiceError('analysis failed: model endpoint is not configured')
        base = self.base_url.rstrip('/')
        return (
            f"{base}/openai/deployments/{self.deployment}/chat/completions"
            f"?api-version={self.api_version}"
        )


def log_level() -> str:
    return os.environ.get('LOG_LEVEL', 'INFO').upper()


def configure_logging():
    logging.basicConfig(
        level=log_level(),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )
