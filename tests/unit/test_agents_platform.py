"""
Unit Tests for Agents Platform Resources

Tests for agents, conversations, calling, knowledge base, MCP servers,
phone numbers, secrets, agent tests, tools, widgets and workspace settings.
"""

import io

import httpx
import pytest

from conftest import has_field, json_body, last_request, multipart_body
from elevenlabs_client import McpApprovalPolicy, SecretType


# =============================================================================
# Agent Tests
# =============================================================================


class TestAgents:
    """Tests for AgentsResource."""

    def test_create(self, client, api_mock):
        """Test creating an agent."""
        route = api_mock.post("/v1/convai/agents/create").mock(
            return_value=httpx.Response(200, json={"agent_id": "a1"})
        )
        config = {"agent": {"first_message": "Hi!", "prompt": {"prompt": "Be helpful."}}}

        result = client.agents.create(conversation_config=config, name="Support")

        assert result["agent_id"] == "a1"
        assert json_body(last_request(route)) == {"conversation_config": config, "name": "Support"}

    def test_get_list_delete(self, client, api_mock):
        """Test the agent lookup endpoints."""
        api_mock.get("/v1/convai/agents/a1").mock(return_value=httpx.Response(200, json={"agent_id": "a1"}))
        listing = api_mock.get("/v1/convai/agents").mock(return_value=httpx.Response(200, json={"agents": []}))
        delete = api_mock.delete("/v1/convai/agents/a1").mock(return_value=httpx.Response(204))

        assert client.agents.get("a1") == {"agent_id": "a1"}
        client.agents.list(page_size=20, search="support")
        assert client.agents.delete("a1") == {}

        params = last_request(listing).url.params
        assert params["page_size"] == "20"
        assert params["search"] == "support"
        assert delete.called

    def test_update_drops_none(self, client, api_mock):
        """Test that unset fields are not sent on update."""
        route = api_mock.patch("/v1/convai/agents/a1").mock(return_value=httpx.Response(200, json={}))

        client.agents.update("a1", name="Renamed", tags=None)

        assert json_body(last_request(route)) == {"name": "Renamed"}

    def test_duplicate_and_link(self, client, api_mock):
        """Test duplicating an agent and reading its link."""
        duplicate = api_mock.post("/v1/convai/agents/a1/duplicate").mock(
            return_value=httpx.Response(200, json={"agent_id": "a2"})
        )
        api_mock.get("/v1/convai/agents/a1/link").mock(
            return_value=httpx.Response(200, json={"agent_id": "a1", "token": None})
        )

        assert client.agents.duplicate("a1", name="Copy")["agent_id"] == "a2"
        assert client.agents.link("a1")["agent_id"] == "a1"
        assert json_body(last_request(duplicate)) == {"name": "Copy"}

    def test_simulate_conversation(self, client, api_mock):
        """Test simulating a conversation."""
        route = api_mock.post("/v1/convai/agents/a1/simulate-conversation").mock(
            return_value=httpx.Response(200, json={"simulated_conversation": []})
        )
        spec = {"simulated_user_config": {"first_message": "Hello"}}

        client.agents.simulate_conversation("a1", simulation_specification=spec)

        assert json_body(last_request(route)) == {"simulation_specification": spec}

    def test_simulate_conversation_stream(self, client, api_mock):
        """Test streaming a simulated conversation."""
        route = api_mock.post("/v1/convai/agents/a1/simulate-conversation/stream").mock(
            return_value=httpx.Response(200, content=b'{"role": "agent"}\n')
        )
        chunks = []

        client.agents.simulate_conversation_stream("a1", on_chunk=chunks.append, new_turns_limit=3)

        assert b"".join(chunks) == b'{"role": "agent"}\n'
        assert json_body(last_request(route)) == {"new_turns_limit": 3}

    def test_calculate_llm_usage(self, client, api_mock):
        """Test the per-agent LLM usage estimate."""
        route = api_mock.post("/v1/convai/agent/a1/llm-usage/calculate").mock(
            return_value=httpx.Response(200, json={"llm_prices": []})
        )

        client.agents.calculate_llm_usage("a1", prompt_length=500, rag_enabled=None)

        assert json_body(last_request(route)) == {"prompt_length": 500}


# =============================================================================
# Conversation and Calling Tests
# =============================================================================


class TestConversations:
    """Tests for ConversationsResource."""

    def test_list_and_get(self, client, api_mock):
        """Test listing and getting conversations."""
        listing = api_mock.get("/v1/convai/conversations").mock(
            return_value=httpx.Response(200, json={"conversations": []})
        )
        api_mock.get("/v1/convai/conversations/c1").mock(
            return_value=httpx.Response(200, json={"conversation_id": "c1"})
        )

        client.conversations.list(agent_id="a1", call_successful="success")
        assert client.conversations.get("c1")["conversation_id"] == "c1"

        params = last_request(listing).url.params
        assert params["agent_id"] == "a1"
        assert params["call_successful"] == "success"

    def test_delete_and_audio(self, client, api_mock, audio_bytes):
        """Test deleting a conversation and downloading its audio."""
        delete = api_mock.delete("/v1/convai/conversations/c1").mock(return_value=httpx.Response(200, json={}))
        api_mock.get("/v1/convai/conversations/c1/audio").mock(
            return_value=httpx.Response(200, content=audio_bytes, headers={"content-type": "audio/mpeg"})
        )

        client.conversations.delete("c1")

        assert delete.called
        assert client.conversations.get_audio("c1") == audio_bytes

    def test_signed_url_and_token(self, client, api_mock):
        """Test requesting conversation credentials."""
        signed = api_mock.get("/v1/convai/conversation/get-signed-url").mock(
            return_value=httpx.Response(200, json={"signed_url": "wss://example"})
        )
        token = api_mock.get("/v1/convai/conversation/token").mock(
            return_value=httpx.Response(200, json={"token": "t1"})
        )

        assert client.conversations.get_signed_url("a1", include_conversation_id=True)["signed_url"] == "wss://example"
        assert client.conversations.get_token("a1")["token"] == "t1"

        assert last_request(signed).url.params["agent_id"] == "a1"
        assert last_request(signed).url.params["include_conversation_id"] == "true"
        assert last_request(token).url.params["agent_id"] == "a1"

    def test_send_feedback(self, client, api_mock):
        """Test rating a conversation."""
        route = api_mock.post("/v1/convai/conversations/c1/feedback").mock(
            return_value=httpx.Response(200, json={})
        )

        client.conversations.send_feedback("c1", "like")

        assert json_body(last_request(route)) == {"feedback": "like"}


class TestBatchCalling:
    """Tests for BatchCallingResource."""

    def test_submit(self, client, api_mock):
        """Test submitting a batch."""
        route = api_mock.post("/v1/convai/batch-calling/submit").mock(
            return_value=httpx.Response(200, json={"id": "b1"})
        )
        recipients = [{"phone_number": "+15555550100"}]

        client.batch_calling.submit("Campaign", "a1", "pn1", 1767225600, recipients)

        assert json_body(last_request(route)) == {
            "call_name": "Campaign",
            "agent_id": "a1",
            "agent_phone_number_id": "pn1",
            "scheduled_time_unix": 1767225600,
            "recipients": recipients,
        }

    def test_lifecycle(self, client, api_mock):
        """Test listing, getting, cancelling and retrying batches."""
        api_mock.get("/v1/convai/batch-calling/workspace").mock(
            return_value=httpx.Response(200, json={"batch_calls": []})
        )
        api_mock.get("/v1/convai/batch-calling/b1").mock(return_value=httpx.Response(200, json={"id": "b1"}))
        cancel = api_mock.post("/v1/convai/batch-calling/b1/cancel").mock(
            return_value=httpx.Response(200, json={"status": "cancelled"})
        )
        retry = api_mock.post("/v1/convai/batch-calling/b1/retry").mock(
            return_value=httpx.Response(200, json={"status": "pending"})
        )

        assert client.batch_calling.list(limit=10) == {"batch_calls": []}
        assert client.batch_calling.get("b1") == {"id": "b1"}
        assert client.batch_calling.cancel("b1")["status"] == "cancelled"
        assert client.batch_calling.retry("b1")["status"] == "pending"

        assert json_body(last_request(cancel)) == {}
        assert json_body(last_request(retry)) == {}


class TestOutboundCalling:
    """Tests for OutboundCallingResource."""

    @pytest.mark.parametrize(
        "method,path",
        [
            ("sip_trunk_call", "/v1/convai/sip-trunk/outbound-call"),
            ("twilio_call", "/v1/convai/twilio/outbound-call"),
        ],
    )
    def test_call(self, client, api_mock, method, path):
        """Test placing an outbound call."""
        route = api_mock.post(path).mock(return_value=httpx.Response(200, json={"success": True}))

        getattr(client.outbound_calling, method)(
            "a1", "pn1", "+15555550100", conversation_initiation_client_data={"dynamic_variables": {}}
        )

        assert json_body(last_request(route)) == {
            "agent_id": "a1",
            "agent_phone_number_id": "pn1",
            "to_number": "+15555550100",
            "conversation_initiation_client_data": {"dynamic_variables": {}},
        }


# =============================================================================
# Knowledge Base Tests
# =============================================================================


class TestKnowledgeBase:
    """Tests for KnowledgeBaseResource."""

    def test_list_repeats_list_values(self, client, api_mock):
        """Test that list filters repeat the query key."""
        route = api_mock.get("/v1/convai/knowledge-base").mock(
            return_value=httpx.Response(200, json={"documents": []})
        )

        client.knowledge_base.list(types=["file", "url"], page_size=5)

        params = last_request(route).url.params
        assert params.get_list("types") == ["file", "url"]
        assert params["page_size"] == "5"

    def test_get_update_delete(self, client, api_mock):
        """Test document lookup and edits."""
        get = api_mock.get("/v1/convai/knowledge-base/doc1").mock(
            return_value=httpx.Response(200, json={"id": "doc1"})
        )
        update = api_mock.patch("/v1/convai/knowledge-base/doc1").mock(return_value=httpx.Response(200, json={}))
        delete = api_mock.delete("/v1/convai/knowledge-base/doc1").mock(return_value=httpx.Response(200, json={}))

        client.knowledge_base.get("doc1", agent_id="a1")
        client.knowledge_base.update("doc1", "Renamed")
        client.knowledge_base.delete("doc1", force=True)

        assert last_request(get).url.params["agent_id"] == "a1"
        assert json_body(last_request(update)) == {"name": "Renamed"}
        assert last_request(delete).url.params["force"] == "true"

    def test_get_without_agent(self, client, api_mock):
        """Test that the agent filter is optional."""
        route = api_mock.get("/v1/convai/knowledge-base/doc1").mock(
            return_value=httpx.Response(200, json={"id": "doc1"})
        )

        client.knowledge_base.get("doc1")

        assert "agent_id" not in last_request(route).url.params

    def test_create_from_url_and_text(self, client, api_mock):
        """Test creating documents from a URL and from text."""
        url_route = api_mock.post("/v1/convai/knowledge-base/url").mock(
            return_value=httpx.Response(200, json={"id": "doc1"})
        )
        text_route = api_mock.post("/v1/convai/knowledge-base/text").mock(
            return_value=httpx.Response(200, json={"id": "doc2"})
        )

        client.knowledge_base.create_from_url("https://example.com/faq", name="FAQ")
        client.knowledge_base.create_from_text("Opening hours are 9 to 5.")

        assert json_body(last_request(url_route)) == {"url": "https://example.com/faq", "name": "FAQ"}
        assert json_body(last_request(text_route)) == {"text": "Opening hours are 9 to 5."}

    def test_create_from_file(self, client, api_mock):
        """Test uploading a document."""
        route = api_mock.post("/v1/convai/knowledge-base/file").mock(
            return_value=httpx.Response(200, json={"id": "doc3"})
        )

        client.knowledge_base.create_from_file(io.BytesIO(b"%PDF-1.7"), "manual.pdf", name="Manual")

        body = multipart_body(last_request(route))
        assert has_field(body, "name", "Manual")
        assert b'name="file"; filename="manual.pdf"' in body

    def test_rag_index(self, client, api_mock):
        """Test RAG index operations."""
        compute = api_mock.post("/v1/convai/knowledge-base/doc1/rag-index").mock(
            return_value=httpx.Response(200, json={"status": "created"})
        )
        api_mock.get("/v1/convai/knowledge-base/doc1/rag-index").mock(
            return_value=httpx.Response(200, json={"indexes": []})
        )
        delete = api_mock.delete("/v1/convai/knowledge-base/doc1/rag-index/idx1").mock(
            return_value=httpx.Response(200, json={})
        )
        api_mock.get("/v1/convai/knowledge-base/rag-index").mock(
            return_value=httpx.Response(200, json={"total_used_bytes": 0})
        )

        client.knowledge_base.compute_rag_index("doc1", "e5_mistral_7b_instruct")
        assert client.knowledge_base.get_rag_index("doc1") == {"indexes": []}
        client.knowledge_base.delete_rag_index("doc1", "idx1")
        assert client.knowledge_base.get_rag_index_overview() == {"total_used_bytes": 0}

        assert json_body(last_request(compute)) == {"model": "e5_mistral_7b_instruct"}
        assert delete.called

    def test_document_details(self, client, api_mock):
        """Test dependent agents, content and chunks."""
        dependents = api_mock.get("/v1/convai/knowledge-base/doc1/dependent-agents").mock(
            return_value=httpx.Response(200, json={"agents": []})
        )
        api_mock.get("/v1/convai/knowledge-base/doc1/content").mock(
            return_value=httpx.Response(200, text="<html>FAQ</html>", headers={"content-type": "text/html"})
        )
        api_mock.get("/v1/convai/knowledge-base/doc1/chunk/ch1").mock(
            return_value=httpx.Response(200, json={"id": "ch1"})
        )
        api_mock.get("/v1/convai/agent/a1/knowledge-base/size").mock(
            return_value=httpx.Response(200, json={"number_of_pages": 3})
        )

        client.knowledge_base.get_dependent_agents("doc1", page_size=2)
        assert client.knowledge_base.get_content("doc1") == "<html>FAQ</html>"
        assert client.knowledge_base.get_chunk("doc1", "ch1") == {"id": "ch1"}
        assert client.knowledge_base.get_agent_knowledge_base_size("a1") == {"number_of_pages": 3}

        assert last_request(dependents).url.params["page_size"] == "2"


class TestLLMUsage:
    """Tests for LLMUsageResource."""

    def test_calculate_accepts_falsy_values(self, client, api_mock):
        """Test that zero and False are valid inputs."""
        route = api_mock.post("/v1/convai/llm-usage/calculate").mock(
            return_value=httpx.Response(200, json={"llm_prices": []})
        )

        client.llm_usage.calculate(0, 0, False)

        assert json_body(last_request(route)) == {
            "prompt_length": 0,
            "number_of_pages": 0,
            "rag_enabled": False,
        }

    def test_calculate_rejects_none(self, client):
        """Test that missing values are rejected."""
        with pytest.raises(ValueError, match="rag_enabled is required"):
            client.llm_usage.calculate(100, 2, None)


# =============================================================================
# MCP Server Tests
# =============================================================================


class TestMCPServers:
    """Tests for MCPServersResource."""

    def test_create(self, client, api_mock):
        """Test registering an MCP server."""
        route = api_mock.post("/v1/convai/mcp-servers").mock(return_value=httpx.Response(200, json={"id": "m1"}))
        config = {"url": "https://mcp.example.com", "name": "Docs"}

        client.mcp_servers.create(config)

        assert json_body(last_request(route)) == {"config": config}

    def test_create_requires_config(self, client):
        """Test that an empty config is rejected."""
        with pytest.raises(ValueError, match="config is required"):
            client.mcp_servers.create({})

    def test_list_and_get(self, client, api_mock):
        """Test listing and getting MCP servers."""
        api_mock.get("/v1/convai/mcp-servers").mock(return_value=httpx.Response(200, json={"mcp_servers": []}))
        api_mock.get("/v1/convai/mcp-servers/m1").mock(return_value=httpx.Response(200, json={"id": "m1"}))

        assert client.mcp_servers.list() == {"mcp_servers": []}
        assert client.mcp_servers.get("m1") == {"id": "m1"}

    @pytest.mark.parametrize(
        "policy",
        [McpApprovalPolicy.REQUIRE_APPROVAL_PER_TOOL, "require_approval_per_tool"],
    )
    def test_update_approval_policy(self, client, api_mock, policy):
        """Test changing the approval policy with an enum or a string."""
        route = api_mock.patch("/v1/convai/mcp-servers/m1/approval-policy").mock(
            return_value=httpx.Response(200, json={})
        )

        client.mcp_servers.update_approval_policy("m1", policy)

        assert json_body(last_request(route)) == {"approval_policy": "require_approval_per_tool"}

    def test_update_approval_policy_rejects_unknown(self, client):
        """Test that unknown policies are rejected."""
        with pytest.raises(ValueError, match="approval_policy must be one of"):
            client.mcp_servers.update_approval_policy("m1", "approve_some")

    def test_tool_approvals(self, client, api_mock):
        """Test adding and removing a tool approval."""
        create = api_mock.post("/v1/convai/mcp-servers/m1/tool-approvals").mock(
            return_value=httpx.Response(200, json={})
        )
        delete = api_mock.delete("/v1/convai/mcp-servers/m1/tool-approvals/search_docs").mock(
            return_value=httpx.Response(200, json={})
        )

        client.mcp_servers.create_tool_approval("m1", "search_docs", "Search the docs", approval_policy="auto_approved")
        client.mcp_servers.delete_tool_approval("m1", "search_docs")

        assert json_body(last_request(create)) == {
            "tool_name": "search_docs",
            "tool_description": "Search the docs",
            "approval_policy": "auto_approved",
        }
        assert delete.called


# =============================================================================
# Phone Number, Secret, Tool and Widget Tests
# =============================================================================


class TestPhoneNumbers:
    """Tests for PhoneNumbersResource."""

    def test_import_number(self, client, api_mock):
        """Test importing a Twilio number."""
        route = api_mock.post("/v1/convai/phone-numbers").mock(
            return_value=httpx.Response(200, json={"phone_number_id": "pn1"})
        )

        client.phone_numbers.import_number("+15555550100", "Support line", provider="twilio", sid="AC1", token="t")

        assert json_body(last_request(route)) == {
            "phone_number": "+15555550100",
            "label": "Support line",
            "provider": "twilio",
            "sid": "AC1",
            "token": "t",
        }

    def test_crud(self, client, api_mock):
        """Test listing, getting, updating and deleting numbers."""
        api_mock.get("/v1/convai/phone-numbers").mock(return_value=httpx.Response(200, json=[]))
        api_mock.get("/v1/convai/phone-numbers/pn1").mock(return_value=httpx.Response(200, json={"label": "x"}))
        update = api_mock.patch("/v1/convai/phone-numbers/pn1").mock(return_value=httpx.Response(200, json={}))
        delete = api_mock.delete("/v1/convai/phone-numbers/pn1").mock(return_value=httpx.Response(200, json={}))

        assert client.phone_numbers.list() == []
        assert client.phone_numbers.get("pn1") == {"label": "x"}
        client.phone_numbers.update("pn1", agent_id="a1")
        client.phone_numbers.delete("pn1")

        assert json_body(last_request(update)) == {"agent_id": "a1"}
        assert delete.called


class TestSecrets:
    """Tests for SecretsResource."""

    def test_secrets(self, client, api_mock):
        """Test listing, creating and deleting secrets."""
        api_mock.get("/v1/convai/secrets").mock(return_value=httpx.Response(200, json={"secrets": []}))
        create = api_mock.post("/v1/convai/secrets").mock(return_value=httpx.Response(200, json={"secret_id": "s1"}))
        delete = api_mock.delete("/v1/convai/secrets/s1").mock(return_value=httpx.Response(200, json={}))

        assert client.secrets.list() == {"secrets": []}
        client.secrets.create("CRM_TOKEN", "abc123")
        client.secrets.delete("s1")

        assert json_body(last_request(create)) == {"type": "new", "name": "CRM_TOKEN", "value": "abc123"}
        assert delete.called

    def test_secret_type_values(self):
        """Test the secret type enum."""
        assert SecretType.NEW == "new"
        assert SecretType.UPDATE == "update"


class TestAgentTests:
    """Tests for agent tests and their invocations."""

    TEST_FIELDS = {
        "chat_history": [{"role": "user", "message": "What are your hours?"}],
        "success_condition": "The agent states the opening hours",
        "success_examples": [{"response": "We are open 9 to 5.", "type": "success"}],
        "failure_examples": [{"response": "I don't know.", "type": "failure"}],
    }

    def test_create(self, client, api_mock):
        """Test creating a test."""
        route = api_mock.post("/v1/convai/agent-testing/create").mock(
            return_value=httpx.Response(200, json={"id": "t1"})
        )

        client.agent_tests.create("Opening hours", dynamic_variables={"store": "Main"}, **self.TEST_FIELDS)

        body = json_body(last_request(route))
        assert body["name"] == "Opening hours"
        assert body["dynamic_variables"] == {"store": "Main"}
        assert body["success_condition"] == self.TEST_FIELDS["success_condition"]

    def test_update(self, client, api_mock):
        """Test updating a test."""
        route = api_mock.patch("/v1/convai/agent-testing/t1").mock(return_value=httpx.Response(200, json={}))

        client.agent_tests.update("t1", "Opening hours v2", **self.TEST_FIELDS)

        assert json_body(last_request(route))["name"] == "Opening hours v2"

    def test_lookup_and_delete(self, client, api_mock):
        """Test listing, getting and deleting tests."""
        listing = api_mock.get("/v1/convai/agent-testing").mock(return_value=httpx.Response(200, json={"tests": []}))
        api_mock.get("/v1/convai/agent-testing/t1").mock(return_value=httpx.Response(200, json={"id": "t1"}))
        delete = api_mock.delete("/v1/convai/agent-testing/t1").mock(return_value=httpx.Response(200, json={}))

        client.agent_tests.list(search="hours")
        assert client.agent_tests.get("t1") == {"id": "t1"}
        client.agent_tests.delete("t1")

        assert last_request(listing).url.params["search"] == "hours"
        assert delete.called

    def test_summaries_and_run(self, client, api_mock):
        """Test fetching summaries and running tests on an agent."""
        summaries = api_mock.post("/v1/convai/agent-testing/summaries").mock(
            return_value=httpx.Response(200, json={"tests": {}})
        )
        run = api_mock.post("/v1/convai/agents/a1/run-tests").mock(
            return_value=httpx.Response(200, json={"id": "inv1"})
        )

        client.agent_tests.get_summaries(["t1", "t2"])
        client.agent_tests.run_on_agent("a1", [{"test_id": "t1"}], agent_config_override={"name": "x"})

        assert json_body(last_request(summaries)) == {"test_ids": ["t1", "t2"]}
        assert json_body(last_request(run)) == {
            "tests": [{"test_id": "t1"}],
            "agent_config_override": {"name": "x"},
        }

    def test_invocations(self, client, api_mock):
        """Test reading and resubmitting an invocation."""
        api_mock.get("/v1/convai/test-invocations/inv1").mock(
            return_value=httpx.Response(200, json={"id": "inv1"})
        )
        resubmit = api_mock.post("/v1/convai/test-invocations/inv1/resubmit").mock(
            return_value=httpx.Response(200, json={})
        )

        assert client.test_invocations.get("inv1") == {"id": "inv1"}
        client.test_invocations.resubmit("inv1", ["run1"], "a1")

        assert json_body(last_request(resubmit)) == {"test_run_ids": ["run1"], "agent_id": "a1"}


class TestTools:
    """Tests for ToolsResource."""

    TOOL = {"type": "webhook", "name": "lookup_order", "description": "Look up an order"}

    def test_crud(self, client, api_mock):
        """Test the tool lifecycle."""
        api_mock.get("/v1/convai/tools").mock(return_value=httpx.Response(200, json={"tools": []}))
        api_mock.get("/v1/convai/tools/tl1").mock(return_value=httpx.Response(200, json={"id": "tl1"}))
        create = api_mock.post("/v1/convai/tools").mock(return_value=httpx.Response(200, json={"id": "tl1"}))
        update = api_mock.patch("/v1/convai/tools/tl1").mock(return_value=httpx.Response(200, json={}))
        delete = api_mock.delete("/v1/convai/tools/tl1").mock(return_value=httpx.Response(200, json={}))

        assert client.tools.list() == {"tools": []}
        assert client.tools.get("tl1") == {"id": "tl1"}
        client.tools.create(self.TOOL)
        client.tools.update("tl1", self.TOOL)
        client.tools.delete("tl1")

        assert json_body(last_request(create)) == {"tool_config": self.TOOL}
        assert json_body(last_request(update)) == {"tool_config": self.TOOL}
        assert delete.called

    def test_dependent_agents(self, client, api_mock):
        """Test listing agents that use a tool."""
        route = api_mock.get("/v1/convai/tools/tl1/dependent-agents").mock(
            return_value=httpx.Response(200, json={"agents": []})
        )

        client.tools.get_dependent_agents("tl1", cursor="c2")

        assert last_request(route).url.params["cursor"] == "c2"


class TestWidgets:
    """Tests for WidgetsResource."""

    def test_get(self, client, api_mock):
        """Test reading the widget configuration."""
        route = api_mock.get("/v1/convai/agents/a1/widget").mock(
            return_value=httpx.Response(200, json={"widget_config": {}})
        )

        client.widgets.get("a1", conversation_signature="sig")

        assert last_request(route).url.params["conversation_signature"] == "sig"

    def test_create_avatar(self, client, api_mock):
        """Test uploading an avatar image."""
        route = api_mock.post("/v1/convai/agents/a1/avatar").mock(
            return_value=httpx.Response(200, json={"avatar_url": "https://cdn.example.com/a.png"})
        )

        client.widgets.create_avatar("a1", io.BytesIO(b"\x89PNG"), "avatar.png")

        body = multipart_body(last_request(route))
        assert b'name="avatar_file"; filename="avatar.png"' in body


# =============================================================================
# Agents Platform Workspace Tests
# =============================================================================


class TestConvaiWorkspace:
    """Tests for ConvaiWorkspaceResource."""

    def test_settings(self, client, api_mock):
        """Test reading and updating settings."""
        api_mock.get("/v1/convai/settings").mock(return_value=httpx.Response(200, json={"webhooks": {}}))
        update = api_mock.patch("/v1/convai/settings").mock(return_value=httpx.Response(200, json={}))

        assert client.convai_workspace.get_settings() == {"webhooks": {}}
        client.convai_workspace.update_settings(can_use_mcp_servers=True, rag_retention_period_days=None)

        assert json_body(last_request(update)) == {"can_use_mcp_servers": True}

    def test_secrets(self, client, api_mock):
        """Test managing workspace secrets."""
        api_mock.get("/v1/convai/secrets").mock(return_value=httpx.Response(200, json={"secrets": []}))
        create = api_mock.post("/v1/convai/secrets").mock(return_value=httpx.Response(200, json={}))
        update = api_mock.patch("/v1/convai/secrets/s1").mock(return_value=httpx.Response(200, json={}))
        delete = api_mock.delete("/v1/convai/secrets/s1").mock(return_value=httpx.Response(200, json={}))

        assert client.convai_workspace.get_secrets() == {"secrets": []}
        client.convai_workspace.create_secret("API_TOKEN", "v1")
        client.convai_workspace.update_secret("s1", "API_TOKEN", "v2")
        client.convai_workspace.delete_secret("s1")

        assert json_body(last_request(create)) == {"type": "new", "name": "API_TOKEN", "value": "v1"}
        assert json_body(last_request(update)) == {"type": "update", "name": "API_TOKEN", "value": "v2"}
        assert delete.called

    def test_secret_validation(self, client):
        """Test that secret operations validate their arguments."""
        with pytest.raises(ValueError, match="value is required"):
            client.convai_workspace.create_secret("API_TOKEN", "")
        with pytest.raises(ValueError, match="secret_id is required"):
            client.convai_workspace.delete_secret("")

    def test_dashboard_settings(self, client, api_mock):
        """Test reading and updating dashboard charts."""
        api_mock.get("/v1/convai/settings/dashboard").mock(return_value=httpx.Response(200, json={"charts": []}))
        update = api_mock.patch("/v1/convai/settings/dashboard").mock(return_value=httpx.Response(200, json={}))

        assert client.convai_workspace.get_dashboard_settings() == {"charts": []}
        client.convai_workspace.update_dashboard_settings(charts=[{"name": "Calls", "type": "call_success"}])

        assert json_body(last_request(update)) == {"charts": [{"name": "Calls", "type": "call_success"}]}
