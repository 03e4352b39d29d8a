"""
Data models for the supergroup directory.

This module defines the immutable records produced by the table assembler
and their JSON representation served to the frontend.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class LinkedItem:
    """
    A display label with an optional hyperlink.

    Attributes:
        name: Label shown to the user
        url: Link target, None when the cell had no link
    """
    name: str
    url: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """JSON representation; an absent url is omitted."""
        data: Dict[str, Any] = {'name': self.name}
        if self.url is not None:
            data['url'] = self.url
        return data


@dataclass(frozen=True)
class Supergroup:
    """
    One row of the supergroup table.

    Attributes:
        name: Supergroup name, used for sorting and the vision lookup
        url: Link attached to the name cell
        org: Owning organization
        org_url: Link attached to the org cell
        mission: Free-text mission statement
        goals: Goal statements joined with periods
        vision: Vision statement from the companion CSV ('' if absent)
        about_url: "About us" page
        groups: Groups in order of appearance
        subgroups: Subgroups in order of appearance
        teams: Teams in order of appearance
    """
    name: str
    org: str = ""
    mission: str = ""
    goals: str = ""
    vision: str = ""
    url: Optional[str] = None
    org_url: Optional[str] = None
    about_url: Optional[str] = None
    groups: Tuple[LinkedItem, ...] = ()
    subgroups: Tuple[LinkedItem, ...] = ()
    teams: Tuple[LinkedItem, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """JSON representation with camelCase keys; absent URLs are omitted."""
        data: Dict[str, Any] = {'name': self.name}
        if self.url is not None:
            data['url'] = self.url
        data['org'] = self.org
        if self.org_url is not None:
            data['orgUrl'] = self.org_url
        data['mission'] = self.mission
        data['goals'] = self.goals
        data['vision'] = self.vision
        if self.about_url is not None:
            data['aboutUrl'] = self.about_url
        data['groups'] = [item.to_dict() for item in self.groups]
        data['subgroups'] = [item.to_dict() for item in self.subgroups]
        data['teams'] = [item.to_dict() for item in self.teams]
        return data


@dataclass(frozen=True)
class GroupsData:
    """
    The complete, sorted set of supergroups.

    Attributes:
        supergroups: Supergroups sorted by name
    """
    supergroups: Tuple[Supergroup, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        """True when no supergroups were loaded."""
        return not self.supergroups

    def __len__(self) -> int:
        return len(self.supergroups)

    def to_dict(self) -> Dict[str, Any]:
        """JSON representation: ``{"supergroups": [...]}``."""
        return {'supergroups': [sg.to_dict() for sg in self.supergroups]}

    def __str__(self) -> str:
        """Human-readable summary."""
        lines = [f"Supergroups: {len(self.supergroups)}"]
        for sg in self.supergroups:
            lines.append(
                f"  {sg.name} ({sg.org or 'no org'}): "
                f"{len(sg.groups)} groups, {len(sg.subgroups)} subgroups, "
                f"{len(sg.teams)} teams"
            )
        return "\n".join(lines)
