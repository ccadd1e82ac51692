"""Load State — the three-valued status of capability acquisition.

Invariants:
    - READY carries a capability and no error; FAILED carries an error and no capability
    - LOADING carries neither
    - A LoadState value is immutable; transitions produce a new value

Design Decisions:
    - One frozen dataclass plus LoadStatus enum instead of three classes:
      callers switch on .status, serializers read the same shape
"""

from dataclasses import dataclass

from playground.core.capability import ParsingCapability
from playground.core.domain_types import LoadStatus
from playground.core.errors import CapabilityLoadError


@dataclass(frozen=True)
class LoadState:
    """Snapshot of where capability acquisition stands."""
    status: LoadStatus
    capability: ParsingCapability | None = None
    error: CapabilityLoadError | None = None

    def __post_init__(self):
        if self.status == LoadStatus.READY and self.capability is None:
            raise ValueError("READY load state requires a capability")
        if self.status == LoadStatus.FAILED and self.error is None:
            raise ValueError("FAILED load state requires an error")
        if self.status == LoadStatus.LOADING and (
            self.capability is not None or self.error is not None
        ):
            raise ValueError("LOADING load state carries no payload")

    @classmethod
    def loading(cls) -> "LoadState":
        return cls(LoadStatus.LOADING)

    @classmethod
    def ready(cls, capability: ParsingCapability) -> "LoadState":
        return cls(LoadStatus.READY, capability=capability)

    @classmethod
    def failed(cls, error: CapabilityLoadError) -> "LoadState":
        return cls(LoadStatus.FAILED, error=error)

    @property
    def is_loading(self) -> bool:
        return self.status == LoadStatus.LOADING

    @property
    def is_ready(self) -> bool:
        return self.status == LoadStatus.READY

    @property
    def is_failed(self) -> bool:
        return self.status == LoadStatus.FAILED
