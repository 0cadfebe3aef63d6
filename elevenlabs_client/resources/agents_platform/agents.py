"""
ElevenLabs Python Client - Agents Resource

This module provides methods for managing conversational agents.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource, ChunkHandler


class AgentsResource(BaseResource):
    """
    Resource for managing conversational agents.

    Agent configuration is passed through as keyword arguments, mirroring
    the shape of the API's request body.

    Example:
        >>> agent = client.agents.create(
        ...     name="Support Agent",
        ...     conversation_config={
        ...         "agent": {
        ...             "prompt": {"prompt": "You are a helpful support agent."},
        ...             "first_message": "Hi! How can I help?",
        ...         },
        ...         "tts": {"voice_id": "21m00Tcm4TlvDq8ikWAM"},
        ...     },
        ... )
        >>> print(agent["agent_id"])
    """

    def create(self, **config: Any) -> Dict[str, Any]:
        """
        Create a new agent.

        Args:
            **config: Agent configuration (conversation_config, name, tags, ...)

        Returns:
            Dict with the new ``agent_id``
        """
        return self._post(Endpoints.AGENT_CREATE, json=config)

    def get(self, agent_id: str) -> Dict[str, Any]:
        """
        Get an agent by ID.

        Args:
            agent_id: The agent's unique identifier

        Returns:
            The agent's full configuration
        """
        return self._get(Endpoints.AGENT.format(agent_id=agent_id))

    def list(self, **params: Any) -> Dict[str, Any]:
        """
        List agents.

        Args:
            **params: Query filters (cursor, page_size, search, ...)

        Returns:
            Dict with ``agents``, ``next_cursor`` and ``has_more``
        """
        return self._get(Endpoints.AGENTS, params=params)

    def update(self, agent_id: str, **config: Any) -> Dict[str, Any]:
        """
        Update an agent.

        Args:
            agent_id: The agent's unique identifier
            **config: Fields to change; None values are dropped
        """
        return self._patch(Endpoints.AGENT.format(agent_id=agent_id), json=self._compact(config))

    def delete(self, agent_id: str) -> Dict[str, Any]:
        """Delete an agent."""
        return self._delete(Endpoints.AGENT.format(agent_id=agent_id))

    def duplicate(self, agent_id: str, **options: Any) -> Dict[str, Any]:
        """
        Duplicate an agent.

        Args:
            agent_id: The agent to copy
            **options: Overrides such as ``name``

        Returns:
            Dict with the copy's ``agent_id``
        """
        path = Endpoints.AGENT_DUPLICATE.format(agent_id=agent_id)
        return self._post(path, json=self._compact(options))

    def link(self, agent_id: str) -> Dict[str, Any]:
        """Get the shareable link of an agent."""
        return self._get(Endpoints.AGENT_LINK.format(agent_id=agent_id))

    def simulate_conversation(self, agent_id: str, **options: Any) -> Dict[str, Any]:
        """
        Run a simulated conversation against an agent.

        Args:
            agent_id: The agent under test
            **options: simulation_specification, extra_evaluation_criteria, ...

        Returns:
            Dict with ``simulated_conversation`` and ``analysis``
        """
        path = Endpoints.AGENT_SIMULATE.format(agent_id=agent_id)
        return self._post(path, json=options)

    def simulate_conversation_stream(
        self,
        agent_id: str,
        on_chunk: Optional[ChunkHandler] = None,
        **options: Any,
    ) -> Optional[bytes]:
        """
        Run a simulated conversation and stream the turns as they happen.

        Returns:
            None when ``on_chunk`` is given, otherwise the full response body
        """
        path = Endpoints.AGENT_SIMULATE_STREAM.format(agent_id=agent_id)
        return self._stream("POST", path, on_chunk, json=options)

    def calculate_llm_usage(self, agent_id: str, **options: Any) -> Dict[str, Any]:
        """
        Estimate the LLM cost of an agent.

        Args:
            agent_id: The agent
            **options: prompt_length, number_of_pages, rag_enabled
        """
        path = Endpoints.AGENT_LLM_USAGE.format(agent_id=agent_id)
        return self._post(path, json=self._compact(options))
