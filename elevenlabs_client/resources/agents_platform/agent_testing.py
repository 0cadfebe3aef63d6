"""
ElevenLabs Python Client - Agent Testing Resources

This module provides methods for defining agent tests, running them
against agents and following up on their invocations.
"""

from __future__ import annotations

from typing import Any, Dict, List

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource


class AgentTestsResource(BaseResource):
    """
    Resource for agent tests.

    A test replays a chat history against an agent and judges the reply
    against a success condition.

    Example:
        >>> test = client.agent_tests.create(
        ...     name="Greets politely",
        ...     chat_history=[{"role": "user", "time_in_call_secs": 0, "message": "Hi"}],
        ...     success_condition="The agent greets the user",
        ...     success_examples=[{"response": "Hello! How can I help?", "type": "success"}],
        ...     failure_examples=[{"response": "What?", "type": "failure"}],
        ... )
        >>> run = client.agent_tests.run_on_agent("agent_123", [{"test_id": test["id"]}])
    """

    def list(self, **params: Any) -> Dict[str, Any]:
        """List tests."""
        return self._get(Endpoints.AGENT_TESTS, params=params)

    def get(self, test_id: str) -> Dict[str, Any]:
        """Get a test."""
        return self._get(Endpoints.AGENT_TEST.format(test_id=test_id))

    def create(
        self,
        name: str,
        chat_history: List[Dict[str, Any]],
        success_condition: str,
        success_examples: List[Dict[str, Any]],
        failure_examples: List[Dict[str, Any]],
        **options: Any,
    ) -> Dict[str, Any]:
        """
        Create a test.

        Args:
            name: Test name
            chat_history: Conversation replayed to the agent
            success_condition: Criterion the reply is judged by
            success_examples: Replies that pass
            failure_examples: Replies that fail
            **options: Extra fields such as ``tool_call_parameters`` or ``dynamic_variables``

        Returns:
            Dict with the new test ``id``
        """
        data = self._test_body(
            name, chat_history, success_condition, success_examples, failure_examples, options
        )
        return self._post(Endpoints.AGENT_TEST_CREATE, json=data)

    def update(
        self,
        test_id: str,
        name: str,
        chat_history: List[Dict[str, Any]],
        success_condition: str,
        success_examples: List[Dict[str, Any]],
        failure_examples: List[Dict[str, Any]],
        **options: Any,
    ) -> Dict[str, Any]:
        """Replace the definition of a test."""
        data = self._test_body(
            name, chat_history, success_condition, success_examples, failure_examples, options
        )
        return self._patch(Endpoints.AGENT_TEST.format(test_id=test_id), json=data)

    def delete(self, test_id: str) -> Dict[str, Any]:
        """Delete a test."""
        return self._delete(Endpoints.AGENT_TEST.format(test_id=test_id))

    def get_summaries(self, test_ids: List[str]) -> Dict[str, Any]:
        """Get summaries of several tests."""
        return self._post(Endpoints.AGENT_TEST_SUMMARIES, json={"test_ids": test_ids})

    def run_on_agent(self, agent_id: str, tests: List[Dict[str, Any]], **options: Any) -> Dict[str, Any]:
        """
        Run tests against an agent.

        Args:
            agent_id: The agent under test
            tests: List of ``{"test_id": ...}`` dicts
            **options: Extra fields such as ``agent_config_override``

        Returns:
            The test invocation, with one run per test
        """
        data: Dict[str, Any] = {"tests": tests}
        data.update(options)
        return self._post(Endpoints.AGENT_RUN_TESTS.format(agent_id=agent_id), json=data)

    @staticmethod
    def _test_body(
        name: str,
        chat_history: List[Dict[str, Any]],
        success_condition: str,
        success_examples: List[Dict[str, Any]],
        failure_examples: List[Dict[str, Any]],
        options: Dict[str, Any],
    ) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "name": name,
            "chat_history": chat_history,
            "success_condition": success_condition,
            "success_examples": success_examples,
            "failure_examples": failure_examples,
        }
        data.update(options)
        return data


class AgentTestInvocationsResource(BaseResource):
    """Resource for the invocations created when tests are run."""

    def get(self, test_invocation_id: str) -> Dict[str, Any]:
        """Get a test invocation with the results of each run."""
        return self._get(Endpoints.TEST_INVOCATION.format(test_invocation_id=test_invocation_id))

    def resubmit(
        self,
        test_invocation_id: str,
        test_run_ids: List[str],
        agent_id: str,
        **options: Any,
    ) -> Dict[str, Any]:
        """
        Re-run selected runs of an invocation.

        Args:
            test_invocation_id: The invocation
            test_run_ids: Runs to repeat
            agent_id: Agent to run them against
            **options: Extra fields such as ``agent_config_override``
        """
        data: Dict[str, Any] = {"test_run_ids": test_run_ids, "agent_id": agent_id}
        data.update(options)
        path = Endpoints.TEST_INVOCATION_RESUBMIT.format(test_invocation_id=test_invocation_id)
        return self._post(path, json=data)
