"""
ElevenLabs Python Client - LLM Usage Resource
"""

from __future__ import annotations

from typing import Any, Dict

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource


class LLMUsageResource(BaseResource):
    """Resource for estimating the LLM cost of an agent configuration."""

    def calculate(
        self,
        prompt_length: int,
        number_of_pages: int,
        rag_enabled: bool,
    ) -> Dict[str, Any]:
        """
        Estimate LLM usage per minute for each available model.

        Args:
            prompt_length: Length of the system prompt in characters
            number_of_pages: Pages of knowledge base content
            rag_enabled: Whether RAG is enabled

        Returns:
            Dict with ``llm_prices``

        Raises:
            ValueError: If any argument is None (False and 0 are accepted)
        """
        for name, value in (
            ("prompt_length", prompt_length),
            ("number_of_pages", number_of_pages),
            ("rag_enabled", rag_enabled),
        ):
            if value is None:
                raise ValueError(f"{name} is required")

        data = {
            "prompt_length": prompt_length,
            "number_of_pages": number_of_pages,
            "rag_enabled": rag_enabled,
        }
        return self._post(Endpoints.LLM_USAGE_CALCULATE, json=data)
