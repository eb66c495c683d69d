"""Data models for project board operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class OwnerType(str, Enum):
    """Who owns a project; the value is the GraphQL query root."""

    ORGANIZATION = "organization"
    USER = "user"


@dataclass(frozen=True)
class ProjectRef:
    """A project board identified by its URL."""

    owner_type: OwnerType
    owner_name: str
    number: int


@dataclass(frozen=True)
class FieldOption:
    """An option of a single-select field."""

    id: str
    name: str


@dataclass(frozen=True)
class StatusField:
    """The project's "Status" field and its options, in board order."""

    id: str
    options: tuple[FieldOption, ...] = field(default_factory=tuple)

    def option_id(self, name: str) -> str | None:
        """ID of the option named exactly `name`, or None."""
        for option in self.options:
            if option.name == name:
                return option.id
        return None
