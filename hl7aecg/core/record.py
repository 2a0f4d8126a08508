# hl7aecg/core/record.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Iterable, Iterator

import numpy as np

from .exceptions import InvalidRecord, LeadNotFound
from .lead import Lead
from .metadata import Header


@dataclass(frozen=True, slots=True)
class AnnotationSet:
    """
    Annotations attached to a record.

    Annotation blocks are not decoded yet: a decoded set is always empty
    and `is_decoded` is False. An empty set does NOT mean the recording
    has no beats or waves.
    """
    items: tuple[Any, ...] = ()
    is_decoded: bool = False

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items)


@dataclass(frozen=True, slots=True)
class ECGRecord:
    """
    A decoded aECG recording.

    Design goals:
    - dict-like access by lead label: rec["Lead II"] (or by column index)
    - safe: the header and the sample matrix are checked against each other
    - predictable: immutable; slice_samples returns a new record

    `samples` holds raw digits, rows = samples, columns = leads.
    """
    samples: np.ndarray = field(repr=False)
    header: Header | None = None
    annotations: AnnotationSet | None = field(default=None, repr=False)
    source: str | None = None
    last_sample: int | None = None

    def __post_init__(self) -> None:
        s = np.asarray(self.samples, dtype=float)
        if s.ndim != 2:
            raise InvalidRecord(f"`samples` must be 2D (samples x leads), got shape {s.shape}")
        object.__setattr__(self, "samples", s)

        if self.header is not None:
            if not isinstance(self.header, Header):
                raise InvalidRecord("ECGRecord.header must be a Header instance.")
            if self.header.n_leads != s.shape[1]:
                raise InvalidRecord(
                    f"Header describes {self.header.n_leads} leads but samples have "
                    f"{s.shape[1]} columns."
                )
            if self.header.n_samples != s.shape[0]:
                raise InvalidRecord(
                    f"Header describes {self.header.n_samples} samples but samples have "
                    f"{s.shape[0]} rows."
                )

        if self.annotations is not None and not isinstance(self.annotations, AnnotationSet):
            raise InvalidRecord("ECGRecord.annotations must be an AnnotationSet instance.")

        if self.last_sample is None:
            object.__setattr__(self, "last_sample", int(s.shape[0]))

    # ---- shape ----
    @property
    def n_samples(self) -> int:
        return int(self.samples.shape[0])

    @property
    def n_leads(self) -> int:
        return int(self.samples.shape[1])

    @property
    def labels(self) -> list[str]:
        # Without a header, leads are only known by position
        if self.header is None:
            return [str(i) for i in range(self.n_leads)]
        return self.header.labels

    @property
    def sampling_frequency(self) -> float | None:
        return None if self.header is None else self.header.sampling_frequency

    # ---- dict-like API ----
    def __len__(self) -> int:
        return self.n_leads

    def __iter__(self) -> Iterator[str]:
        return iter(self.labels)

    def __contains__(self, label: object) -> bool:
        return label in self.labels

    def keys(self) -> Iterable[str]:
        return list(self.labels)

    def __getitem__(self, key: str | int) -> Lead:
        if isinstance(key, int):
            if not -self.n_leads <= key < self.n_leads:
                raise LeadNotFound(key)
            return self._lead_at(key % self.n_leads)
        try:
            idx = self.labels.index(key)
        except ValueError as e:
            raise LeadNotFound(key) from e
        return self._lead_at(idx)

    def get(self, label: str, default: Lead | None = None) -> Lead | None:
        try:
            return self[label]
        except LeadNotFound:
            return default

    def leads(self) -> Iterator[Lead]:
        for idx in range(self.n_leads):
            yield self._lead_at(idx)

    def _lead_at(self, idx: int) -> Lead:
        meta = None if self.header is None else self.header.leads[idx]
        return Lead(label=self.labels[idx], samples=self.samples[:, idx], meta=meta)

    # ---- transformations ----
    def slice_samples(self, start: int | None = None, stop: int | None = None) -> "ECGRecord":
        """
        Return a new record restricted to rows [start, stop).

        This is a window over an already decoded record; decoding itself
        always reads the full document.
        """
        window = self.samples[start:stop, :]
        header = self.header
        if header is not None:
            header = replace(header, n_samples=int(window.shape[0]))
        return ECGRecord(
            samples=window,
            header=header,
            annotations=self.annotations,
            source=self.source,
        )
