"""
ElevenLabs Python Client - Knowledge Base Resource

This module provides methods for managing the documents agents draw on,
and their RAG indexes.
"""

from __future__ import annotations

from typing import Any, BinaryIO, Dict, Optional

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource


class KnowledgeBaseResource(BaseResource):
    """
    Resource for managing knowledge base documents.

    Example:
        >>> doc = client.knowledge_base.create_from_url(
        ...     "https://docs.example.com/faq", name="FAQ"
        ... )
        >>> client.knowledge_base.compute_rag_index(doc["id"], "e5_mistral_7b_instruct")
    """

    def list(self, **params: Any) -> Dict[str, Any]:
        """
        List documents.

        Args:
            **params: Query filters (cursor, page_size, search, types, ...).
                List values repeat the query key.

        Returns:
            Dict with ``documents``, ``next_cursor`` and ``has_more``
        """
        return self._get(Endpoints.KNOWLEDGE_BASE, params=params)

    def get(self, document_id: str, agent_id: Optional[str] = None) -> Dict[str, Any]:
        """
        Get a document.

        Args:
            document_id: The document's unique identifier
            agent_id: Agent the document is viewed through
        """
        path = Endpoints.KNOWLEDGE_BASE_DOCUMENT.format(document_id=document_id)
        return self._get(path, params={"agent_id": agent_id})

    def update(self, document_id: str, name: str) -> Dict[str, Any]:
        """Rename a document."""
        path = Endpoints.KNOWLEDGE_BASE_DOCUMENT.format(document_id=document_id)
        return self._patch(path, json={"name": name})

    def delete(self, document_id: str, force: Optional[bool] = None) -> Dict[str, Any]:
        """
        Delete a document.

        Args:
            document_id: The document's unique identifier
            force: Delete even if agents still depend on the document
        """
        path = Endpoints.KNOWLEDGE_BASE_DOCUMENT.format(document_id=document_id)
        return self._delete(path, params={"force": force})

    # =========================================================================
    # Document creation
    # =========================================================================

    def create_from_url(self, url: str, name: Optional[str] = None) -> Dict[str, Any]:
        """Create a document by scraping a web page."""
        data: Dict[str, Any] = {"url": url}
        if name:
            data["name"] = name
        return self._post(Endpoints.KNOWLEDGE_BASE_URL, json=data)

    def create_from_text(self, text: str, name: Optional[str] = None) -> Dict[str, Any]:
        """Create a document from raw text."""
        data: Dict[str, Any] = {"text": text}
        if name:
            data["name"] = name
        return self._post(Endpoints.KNOWLEDGE_BASE_TEXT, json=data)

    def create_from_file(
        self,
        file: BinaryIO,
        filename: str,
        name: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Create a document from an uploaded file (PDF, DOCX, TXT, HTML, EPUB).

        Args:
            file: Document file object
            filename: Name of the uploaded file
            name: Document name
        """
        return self._post_multipart(
            Endpoints.KNOWLEDGE_BASE_FILE,
            data=self._form({"name": name}),
            files={"file": self._file(file, filename)},
        )

    # =========================================================================
    # RAG indexes
    # =========================================================================

    def compute_rag_index(self, document_id: str, model: str) -> Dict[str, Any]:
        """
        Start computing a RAG index for a document.

        Args:
            document_id: The document
            model: Embedding model, e.g. "e5_mistral_7b_instruct" or
                "multilingual_e5_large_instruct"

        Returns:
            The index with its ``status`` and ``progress_percentage``
        """
        path = Endpoints.KNOWLEDGE_BASE_RAG_INDEX.format(document_id=document_id)
        return self._post(path, json={"model": model})

    def get_rag_index(self, document_id: str) -> Dict[str, Any]:
        """List the RAG indexes of a document."""
        return self._get(Endpoints.KNOWLEDGE_BASE_RAG_INDEX.format(document_id=document_id))

    def delete_rag_index(self, document_id: str, rag_index_id: str) -> Dict[str, Any]:
        """Delete a RAG index."""
        path = Endpoints.KNOWLEDGE_BASE_RAG_INDEX_ITEM.format(
            document_id=document_id, rag_index_id=rag_index_id
        )
        return self._delete(path)

    def get_rag_index_overview(self) -> Dict[str, Any]:
        """Get the RAG index usage of the whole workspace."""
        return self._get(Endpoints.KNOWLEDGE_BASE_RAG_OVERVIEW)

    # =========================================================================
    # Content and dependencies
    # =========================================================================

    def get_dependent_agents(self, document_id: str, **params: Any) -> Dict[str, Any]:
        """List the agents that use a document."""
        path = Endpoints.KNOWLEDGE_BASE_DEPENDENT_AGENTS.format(document_id=document_id)
        return self._get(path, params=params)

    def get_content(self, document_id: str) -> Any:
        """Get the extracted content of a document."""
        return self._get(Endpoints.KNOWLEDGE_BASE_CONTENT.format(document_id=document_id))

    def get_chunk(self, document_id: str, chunk_id: str) -> Dict[str, Any]:
        """Get one chunk of a document's RAG index."""
        path = Endpoints.KNOWLEDGE_BASE_CHUNK.format(document_id=document_id, chunk_id=chunk_id)
        return self._get(path)

    def get_agent_knowledge_base_size(self, agent_id: str) -> Dict[str, Any]:
        """Get the number of knowledge base pages an agent uses."""
        return self._get(Endpoints.AGENT_KNOWLEDGE_BASE_SIZE.format(agent_id=agent_id))
