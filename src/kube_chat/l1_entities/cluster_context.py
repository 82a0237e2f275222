"""Cluster context entity: what the user is looking at when the chat opens."""

from __future__ import annotations

from pydantic import BaseModel


class ClusterContext(BaseModel):
    cluster_name: str = ''
    context_name: str = ''
    namespace: str = ''
    resource_type: str = ''
    selected_resource: str = ''
