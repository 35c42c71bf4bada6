"""Manager plugin descriptors.

Each manager knows how to parse one manifest format upstream. Here only its
static metadata is kept: language, supported datasources and default config.
The flattener uses it to fill ``datasource``/``versioning`` on update records.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Pattern, Tuple

from branchify.logging import get_logger

logger = get_logger(__name__)

DOCKER_DATASOURCE = "docker"
DOCKER_VERSIONING = "docker"


@dataclass(frozen=True)
class ManagerDefaultConfig:
    """Default configuration contributed by a manager.

    Attributes:
        file_match: Regular expressions selecting manifest paths.
        versioning: Versioning scheme id, when the manager pins one.
        commit_message_topic: Template used for commit message topics.
        pin_digests: Whether digests are pinned by default.
    """

    file_match: Tuple[str, ...] = ()
    versioning: Optional[str] = None
    commit_message_topic: Optional[str] = None
    pin_digests: Optional[bool] = None


@dataclass(frozen=True)
class ManagerDescriptor:
    """Static metadata table for one manager plugin."""

    name: str
    supported_datasources: Tuple[str, ...] = ()
    default_config: ManagerDefaultConfig = field(default_factory=ManagerDefaultConfig)
    language: Optional[str] = None

    @property
    def default_datasource(self) -> Optional[str]:
        """First supported datasource, or None."""
        return self.supported_datasources[0] if self.supported_datasources else None


class ManagerRegistry:
    """Lookup table of manager descriptors keyed by name."""

    def __init__(self, descriptors: Iterable[ManagerDescriptor] = ()) -> None:
        self._descriptors: Dict[str, ManagerDescriptor] = {}
        self._patterns: Dict[str, List[Pattern[str]]] = {}
        for d in descriptors:
            self.register(d)

    def register(self, descriptor: ManagerDescriptor) -> None:
        """Add a descriptor, replacing any existing one with the same name.

        Raises:
            ValueError: If a ``file_match`` entry is not a valid regex.
        """
        try:
            patterns = [re.compile(p) for p in descriptor.default_config.file_match]
        except re.error as exc:
            raise ValueError(
                f"Invalid fileMatch for manager '{descriptor.name}': {exc}"
            ) from exc
        if descriptor.name in self._descriptors:
            logger.debug(f"Replacing manager descriptor '{descriptor.name}'")
        self._descriptors[descriptor.name] = descriptor
        self._patterns[descriptor.name] = patterns

    def get(self, name: str) -> Optional[ManagerDescriptor]:
        return self._descriptors.get(name)

    def names(self) -> List[str]:
        return sorted(self._descriptors)

    def descriptors(self) -> List[ManagerDescriptor]:
        """Return descriptors sorted by name."""
        return [self._descriptors[name] for name in self.names()]

    def __contains__(self, name: object) -> bool:
        return name in self._descriptors

    def __len__(self) -> int:
        return len(self._descriptors)

    def match_file(self, path: str) -> List[str]:
        """Return names of managers whose file patterns match ``path``, sorted."""
        return [
            name
            for name in self.names()
            if any(p.search(path) for p in self._patterns[name])
        ]


PYENV = ManagerDescriptor(
    name="pyenv",
    language="python",
    supported_datasources=(DOCKER_DATASOURCE,),
    default_config=ManagerDefaultConfig(
        file_match=(r"(^|/).python-version$",),
        versioning=DOCKER_VERSIONING,
    ),
)

HELM_VALUES = ManagerDescriptor(
    name="helm-values",
    supported_datasources=(DOCKER_DATASOURCE,),
    default_config=ManagerDefaultConfig(
        file_match=(r"(^|/)values.yaml$",),
        commit_message_topic="helm values {{depName}}",
        pin_digests=False,
    ),
)

BUILTIN_MANAGERS: Tuple[ManagerDescriptor, ...] = (PYENV, HELM_VALUES)


def default_registry() -> ManagerRegistry:
    """Return a fresh registry holding the built-in descriptors."""
    return ManagerRegistry(BUILTIN_MANAGERS)
