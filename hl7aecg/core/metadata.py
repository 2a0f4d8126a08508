# hl7aecg/core/metadata.py
from __future__ import annotations

from dataclasses import dataclass

from ..config import DEFAULT_DATE, DEFAULT_TIME
from .exceptions import InvalidHeader


@dataclass(frozen=True, slots=True)
class SeriesMeta:
    """
    Metadata of the decoded series (one recording).

    - recname: recording name, the stem of the source file
    - date / time: recording start as "YYYY/MM/DD" and "HH:MM:SS"
    - low / high: raw effectiveTime bounds as found in the document
    """
    recname: str
    date: str = DEFAULT_DATE
    time: str = DEFAULT_TIME
    low: str | None = None
    high: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.recname, str):
            raise InvalidHeader("SeriesMeta.recname must be a string.")


@dataclass(frozen=True, slots=True)
class LeadMeta:
    """
    Per-lead header entry.

    adc_zero is in volts (origin value scaled by its unit). gain is
    1 / scale value; `unit` is the scale unit as written in the document
    and is NOT folded into gain.
    """
    label: str
    description: str | None = None
    code: str | None = None
    adc_zero: float = 0.0
    gain: float = 1.0
    unit: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.label, str) or not self.label.strip():
            raise InvalidHeader("LeadMeta.label must be a non-empty string.")


@dataclass(frozen=True, slots=True)
class Header:
    """
    Header of a decoded aECG record.

    Invariant: `leads` follows the order in which leads appear in the
    document, one entry per sample-matrix column.
    """
    series: SeriesMeta
    leads: tuple[LeadMeta, ...] = ()
    sampling_frequency: float | None = None
    n_samples: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.series, SeriesMeta):
            raise InvalidHeader("Header.series must be a SeriesMeta instance.")

        leads = tuple(self.leads)
        for lead in leads:
            if not isinstance(lead, LeadMeta):
                raise InvalidHeader("Header.leads values must be LeadMeta instances.")
        object.__setattr__(self, "leads", leads)

        if self.n_samples < 0:
            raise InvalidHeader(f"Header.n_samples must be >= 0, got {self.n_samples}")
        if self.sampling_frequency is not None and self.sampling_frequency <= 0:
            raise InvalidHeader(
                f"Header.sampling_frequency must be positive, got {self.sampling_frequency}"
            )

    # ---- derived per-lead views ----
    @property
    def recname(self) -> str:
        return self.series.recname

    @property
    def n_leads(self) -> int:
        return len(self.leads)

    @property
    def labels(self) -> list[str]:
        return [lead.label for lead in self.leads]

    @property
    def units(self) -> list[str | None]:
        return [lead.unit for lead in self.leads]

    @property
    def gains(self) -> list[float]:
        return [lead.gain for lead in self.leads]

    @property
    def adc_zeros(self) -> list[float]:
        return [lead.adc_zero for lead in self.leads]
