"""
ElevenLabs Python Client - Workspace Resources

This module provides methods for managing workspace groups, invites,
members and resource sharing.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource


class WorkspaceGroupsResource(BaseResource):
    """Resource for workspace groups."""

    def search(self, name: str) -> Any:
        """
        Search groups by name.

        Raises:
            ValueError: If name is missing
        """
        self._require("name", name)
        return self._get(Endpoints.WORKSPACE_GROUPS_SEARCH, params={"name": name})

    def add_member(self, group_id: str, email: str) -> Dict[str, Any]:
        """Add a workspace member to a group."""
        self._require("group_id", group_id)
        self._require("email", email)
        path = Endpoints.WORKSPACE_GROUP_MEMBERS.format(group_id=group_id)
        return self._post(path, json={"email": email})

    def remove_member(self, group_id: str, email: str) -> Dict[str, Any]:
        """Remove a member from a group."""
        self._require("group_id", group_id)
        self._require("email", email)
        path = Endpoints.WORKSPACE_GROUP_MEMBERS_REMOVE.format(group_id=group_id)
        return self._post(path, json={"email": email})


class WorkspaceInvitesResource(BaseResource):
    """
    Resource for workspace invitations.

    Example:
        >>> client.workspace_invites.invite("new.hire@example.com", workspace_permission="workspace_member")
        >>> client.workspace_invites.invite_bulk(["a@example.com", "b@example.com"])
    """

    def invite(
        self,
        email: str,
        group_ids: Optional[List[str]] = None,
        workspace_permission: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Invite a user to the workspace.

        Args:
            email: Address to invite
            group_ids: Groups to add the user to on signup
            workspace_permission: Permission granted to the user
        """
        self._require("email", email)
        data: Dict[str, Any] = {"email": email}
        if group_ids:
            data["group_ids"] = group_ids
        if workspace_permission:
            data["workspace_permission"] = workspace_permission
        return self._post(Endpoints.WORKSPACE_INVITES_ADD, json=data)

    def invite_bulk(self, emails: List[str], group_ids: Optional[List[str]] = None) -> Dict[str, Any]:
        """
        Invite several users at once.

        Raises:
            ValueError: If emails is not a non-empty list
        """
        if not isinstance(emails, list) or not emails:
            raise ValueError("emails must be a non-empty list")
        data: Dict[str, Any] = {"emails": emails}
        if group_ids:
            data["group_ids"] = group_ids
        return self._post(Endpoints.WORKSPACE_INVITES_ADD_BULK, json=data)

    def delete_invite(self, email: str) -> Dict[str, Any]:
        """Revoke a pending invitation."""
        self._require("email", email)
        return self._delete(Endpoints.WORKSPACE_INVITES, json={"email": email})


class WorkspaceMembersResource(BaseResource):
    """Resource for workspace members."""

    def update(
        self,
        email: str,
        is_locked: Optional[bool] = None,
        workspace_role: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Update a workspace member.

        Args:
            email: The member's address
            is_locked: Lock or unlock the member's account
            workspace_role: "workspace_admin" or "workspace_member"
        """
        self._require("email", email)
        data: Dict[str, Any] = {"email": email}
        data.update(self._compact({"is_locked": is_locked, "workspace_role": workspace_role}))
        return self._post(Endpoints.WORKSPACE_MEMBERS, json=data)


class WorkspaceResourcesResource(BaseResource):
    """
    Resource for sharing workspace resources (voices, dictionaries, agents, ...).

    Exactly one of ``user_email``, ``group_id`` or ``workspace_api_key_id``
    identifies the principal the resource is shared with.
    """

    def get(self, resource_id: str, resource_type: str) -> Dict[str, Any]:
        """Get a resource and its sharing state."""
        self._require("resource_id", resource_id)
        self._require("resource_type", resource_type)
        path = Endpoints.WORKSPACE_RESOURCE.format(resource_id=resource_id)
        return self._get(path, params={"resource_type": resource_type})

    def share(
        self,
        resource_id: str,
        role: str,
        resource_type: str,
        user_email: Optional[str] = None,
        group_id: Optional[str] = None,
        workspace_api_key_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Share a resource.

        Args:
            resource_id: The resource
            role: "admin", "editor" or "viewer"
            resource_type: Kind of resource, e.g. "voice"
            user_email: Share with this user
            group_id: Share with this group
            workspace_api_key_id: Share with this service-account key
        """
        self._require("resource_id", resource_id)
        self._require("resource_type", resource_type)
        self._require("role", role)
        data: Dict[str, Any] = {"role": role, "resource_type": resource_type}
        data.update(self._principal(user_email, group_id, workspace_api_key_id))
        path = Endpoints.WORKSPACE_RESOURCE_SHARE.format(resource_id=resource_id)
        return self._post(path, json=data)

    def unshare(
        self,
        resource_id: str,
        resource_type: str,
        user_email: Optional[str] = None,
        group_id: Optional[str] = None,
        workspace_api_key_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Stop sharing a resource with a principal."""
        self._require("resource_id", resource_id)
        self._require("resource_type", resource_type)
        data: Dict[str, Any] = {"resource_type": resource_type}
        data.update(self._principal(user_email, group_id, workspace_api_key_id))
        path = Endpoints.WORKSPACE_RESOURCE_UNSHARE.format(resource_id=resource_id)
        return self._post(path, json=data)

    def _principal(
        self,
        user_email: Optional[str],
        group_id: Optional[str],
        workspace_api_key_id: Optional[str],
    ) -> Dict[str, Any]:
        return self._compact({
            "user_email": user_email,
            "group_id": group_id,
            "workspace_api_key_id": workspace_api_key_id,
        })
