"""
LLM Provider Factory
Unified chat-completion interface over the supported LLM providers (OpenAI, Mistral).
The provider is chosen via the LLM_PROVIDER environment variable.
"""

import os
import logging
from typing import Dict, List, Optional, Any
from abc import ABC, abstractmethod
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Load environment variables
load_dotenv()

DEFAULT_TIMEOUT = 30.0


class LLMProvider(ABC):
    """Abstract base class for LLM providers"""

    @abstractmethod
    def create_chat_completion(
        self,
        messages: List[Dict[str, str]],
        model: str,
        temperature: float = 0.3,
        max_tokens: int = 4000,
        timeout: float = DEFAULT_TIMEOUT,
        **kwargs
    ) -> Dict[str, Any]:
        """
        Create a chat completion using the provider's API.

        Returns a normalized response dictionary with:
        - content: str (the response text, may be empty)
        - model: str (model used)
        - usage: dict (prompt_tokens, completion_tokens, total_tokens)
        """
        pass

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return provider name ('openai', 'mistral')"""
        pass

    @staticmethod
    def _normalize(response) -> Dict[str, Any]:
        """Both SDKs return OpenAI-shaped responses"""
        usage = response.usage
        return {
            "content": response.choices[0].message.content or "",
            "model": response.model,
            "usage": {
                "prompt_tokens": usage.prompt_tokens if usage else 0,
                "completion_tokens": usage.completion_tokens if usage else 0,
                "total_tokens": usage.total_tokens if usage else 0,
            },
        }


class OpenAIProvider(LLMProvider):
    """OpenAI API provider implementation"""

    def __init__(self, api_key: Optional[str] = None):
        from openai import OpenAI

        self.api_key = api_key or os.getenv("OPENAI_API_KEY")
        if not self.api_key:
            raise ValueError("OPENAI_API_KEY not found in environment variables")

        self.client = OpenAI(api_key=self.api_key)
        logger.info("Initialized OpenAI provider")

    def create_chat_completion(
        self,
        messages: List[Dict[str, str]],
        model: str,
        temperature: float = 0.3,
        max_tokens: int = 4000,
        timeout: float = DEFAULT_TIMEOUT,
        **kwargs
    ) -> Dict[str, Any]:
        response = self.client.chat.completions.create(
            model=model,
            messages=messages,
            temperature=temperature,
            max_tokens=max_tokens,
            timeout=timeout,
            **kwargs
        )
        return self._normalize(response)

    def get_provider_name(self) -> str:
        return "openai"


class MistralProvider(LLMProvider):
    """Mistral AI provider implementation"""

    def __init__(self, api_key: Optional[str] = None):
        from mistralai import Mistral

        self.api_key = api_key or os.getenv("MISTRAL_API_KEY")
        if not self.api_key:
            raise ValueError("MISTRAL_API_KEY not found in environment variables")

        self.client = Mistral(api_key=self.api_key)
        logger.info("Initialized Mistral provider")

    def create_chat_completion(
        self,
        messages: List[Dict[str, str]],
        model: str,
        temperature: float = 0.3,
        max_tokens: int = 4000,
        timeout: float = DEFAULT_TIMEOUT,
        **kwargs
    ) -> Dict[str, Any]:
        # Mistral SDK takes the timeout in milliseconds
        response = self.client.chat.complete(
            model=model,
            messages=messages,
            temperature=temperature,
            max_tokens=max_tokens,
            timeout_ms=int(timeout * 1000),
            **kwargs
        )
        return self._normalize(response)

    def get_provider_name(self) -> str:
        return "mistral"


class LLMProviderFactory:
    """Factory class for creating LLM provider instances"""

    PROVIDERS = {
        "openai": OpenAIProvider,
        "mistral": MistralProvider,
    }

    # Default models per provider
    DEFAULT_MODELS = {
        "openai": "gpt-4o-mini",
        "mistral": "mistral-small-latest",
    }

    @staticmethod
    def _resolve_name(provider_name: Optional[str]) -> str:
        if provider_name is None:
            provider_name = os.getenv("LLM_PROVIDER", "mistral")
        return provider_name.lower()

    @staticmethod
    def create_provider(provider_name: Optional[str] = None) -> LLMProvider:
        """
        Create an LLM provider instance based on configuration.

        Args:
            provider_name: Provider to use ("openai", "mistral").
                         If None, reads from LLM_PROVIDER env var (default: "mistral")

        Raises:
            ValueError: If provider is not supported or API key is missing
        """
        provider_name = LLMProviderFactory._resolve_name(provider_name)
        logger.info(f"Creating LLM provider: {provider_name}")

        provider_class = LLMProviderFactory.PROVIDERS.get(provider_name)
        if provider_class is None:
            raise ValueError(
                f"Unsupported LLM provider: {provider_name}. "
                f"Supported providers: {', '.join(LLMProviderFactory.PROVIDERS)}"
            )
        return provider_class()

    @staticmethod
    def get_default_model(provider_name: Optional[str] = None) -> str:
        provider_name = LLMProviderFactory._resolve_name(provider_name)
        return LLMProviderFactory.DEFAULT_MODELS.get(provider_name, "mistral-small-latest")


def get_llm_client(provider_name: Optional[str] = None) -> LLMProvider:
    """Shorthand for LLMProviderFactory.create_provider()"""
    return LLMProviderFactory.create_provider(provider_name)
