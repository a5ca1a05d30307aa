"""Repository-related data models."""

import json
from dataclasses import dataclass
from typing import Any


@dataclass
class RepositorySummary:
    """Repository metadata as reported by the service."""

    kind: str  # wire key "type"
    created_at: str
    private: bool
    default_branch: str
    login: str  # wire key "your-login"
    name: str


@dataclass
class AddRepositoryRequest:
    """Body sent when registering a repository."""

    name: str
    organization: str
    config: str
    global_config: str

    def to_payload(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "organization": self.organization,
            "config": self.config,
            "global_config": self.global_config,
        }

    def to_json(self) -> str:
        """Serialize to compact JSON, keys in wire order."""
        return json.dumps(self.to_payload(), separators=(",", ":"))
