# hl7aecg/core/__init__.py
"""
Core domain objects for hl7aecg.

This module defines the format-agnostic data model of a decoded ECG:
- SeriesMeta / LeadMeta / Header: recording and per-lead metadata
- Lead: one raw digit column + its header entry
- ECGRecord: sample matrix + header + annotations
- vocabulary lookups (lead / wave / beat codes) and unit normalization

The core layer is independent from XML and file handling.
"""

from .metadata import SeriesMeta, LeadMeta, Header
from .lead import Lead
from .record import ECGRecord, AnnotationSet
from .units import AMPLITUDE_UNITS, TIME_UNITS, normalize_amplitude, normalize_time
from .vocabulary import (
    LEAD_CODES,
    WAVE_CODES,
    BEAT_CODES,
    LeadCode,
    WaveCode,
    BeatCode,
    lookup_lead,
    lookup_wave,
    lookup_beat,
)
from .exceptions import (
    Hl7aError,
    DecodeError,
    DocumentReadError,
    NoSeriesError,
    MissingElementError,
    UnknownLeadCodeError,
    UnrecognizedUnitError,
    MalformedAttributeError,
    MalformedDigitsError,
    SampleShapeMismatchError,
    MissingTimeBaseError,
    InvalidHeader,
    InvalidLead,
    InvalidRecord,
    CodeNotFound,
    LeadNotFound,
    MultipleSeriesWarning,
)


__all__ = [
    # metadata
    "SeriesMeta",
    "LeadMeta",
    "Header",

    # domain objects
    "Lead",
    "ECGRecord",
    "AnnotationSet",

    # units
    "AMPLITUDE_UNITS",
    "TIME_UNITS",
    "normalize_amplitude",
    "normalize_time",

    # vocabulary
    "LEAD_CODES",
    "WAVE_CODES",
    "BEAT_CODES",
    "LeadCode",
    "WaveCode",
    "BeatCode",
    "lookup_lead",
    "lookup_wave",
    "lookup_beat",

    # exceptions
    "Hl7aError",
    "DecodeError",
    "DocumentReadError",
    "NoSeriesError",
    "MissingElementError",
    "UnknownLeadCodeError",
    "UnrecognizedUnitError",
    "MalformedAttributeError",
    "MalformedDigitsError",
    "SampleShapeMismatchError",
    "MissingTimeBaseError",
    "InvalidHeader",
    "InvalidLead",
    "InvalidRecord",
    "CodeNotFound",
    "LeadNotFound",
    "MultipleSeriesWarning",
]
