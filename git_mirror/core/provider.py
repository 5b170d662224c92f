"""
Mirror records and the provider interface.

A provider knows how to ask a hosting service which repositories should be
mirrored where. Providers are interchangeable: anything with a
``get_mirror_repos`` method satisfies :class:`Provider`.
"""

from dataclasses import dataclass
from typing import List, Protocol, runtime_checkable


@dataclass(frozen=True)
class Mirror:
    """A single mirror directive: copy ``origin`` into ``destination``."""

    origin: str
    destination: str

    def __str__(self) -> str:
        return f"{self.origin} -> {self.destination}"


@runtime_checkable
class Provider(Protocol):
    """Source of mirror directives."""

    def get_mirror_repos(self) -> List[Mirror]:
        """
        Return every mirror the provider knows about.

        Raises:
            MirrorError: If the complete list cannot be determined
        """
        ...
