"""Value types returned by the GitHub API client."""
from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class Event:
    """A public event performed by a user."""
    type: str
    repo_name: str


@dataclass(frozen=True)
class Repo:
    """A repository together with its language breakdown (name -> bytes)."""
    name: str
    languages: Dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class Gist:
    url: str
