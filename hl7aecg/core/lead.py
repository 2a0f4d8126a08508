# core/lead.py

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .exceptions import InvalidLead
from .metadata import LeadMeta


@dataclass(slots=True, frozen=True)
class Lead:
    """One decoded ECG lead: raw digit column + its header entry (if decoded)."""

    label: str
    samples: np.ndarray
    meta: LeadMeta | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.label, str) or not self.label.strip():
            raise InvalidLead("Lead.label must be a non-empty string.")

        s = np.asarray(self.samples)
        if s.ndim != 1:
            raise InvalidLead(f"`samples` must be 1D, got shape {s.shape}")
        object.__setattr__(self, "samples", s)

        if self.meta is not None and not isinstance(self.meta, LeadMeta):
            raise InvalidLead("Lead.meta must be a LeadMeta instance.")

    # Convenience accessors
    @property
    def n(self) -> int:
        return int(self.samples.size)

    @property
    def unit(self) -> str | None:
        return None if self.meta is None else self.meta.unit

    @property
    def gain(self) -> float | None:
        return None if self.meta is None else self.meta.gain

    @property
    def adc_zero(self) -> float | None:
        return None if self.meta is None else self.meta.adc_zero

    def to_numpy(self, *, copy: bool = False) -> np.ndarray:
        if copy:
            return self.samples.copy()
        return self.samples
