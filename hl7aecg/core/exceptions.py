# hl7aecg/core/exceptions.py
from __future__ import annotations


class Hl7aError(Exception):
    """Base error for all hl7aecg exceptions."""


# ---- Decode errors (fatal, abort the whole decode) ----
class DecodeError(Hl7aError):
    """Base error for failures while decoding an aECG document.

    `source` identifies the document (usually its path) and is prefixed
    to the message so a failure can be traced back to the bad file.
    """

    def __init__(self, message: str, *, source: str | None = None) -> None:
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(message)


class DocumentReadError(DecodeError):
    """Raised when the XML document cannot be read or parsed."""


class NoSeriesError(DecodeError):
    """Raised when the document holds no `series` element."""


class MissingElementError(DecodeError):
    """Raised when a required element (sequenceSet, origin, digits, ...) is absent."""


class UnknownLeadCodeError(DecodeError):
    """Raised when a lead code is not part of the lead vocabulary."""

    def __init__(self, code: str, lead_index: int, *, source: str | None = None) -> None:
        self.code = code
        self.lead_index = lead_index
        super().__init__(f"unknown lead code '{code}' at lead {lead_index}", source=source)


class UnrecognizedUnitError(DecodeError):
    """Raised when an amplitude or time unit is outside the recognised set."""

    def __init__(
        self,
        value: float,
        unit: str,
        lead_index: int | None = None,
        *,
        source: str | None = None,
    ) -> None:
        self.value = value
        self.unit = unit
        self.lead_index = lead_index
        where = "time base" if lead_index is None else f"lead {lead_index}"
        super().__init__(
            f"unrecognized unit '{unit}' (value {value}) at {where}", source=source
        )


class MalformedAttributeError(DecodeError):
    """Raised when an attribute other than `value`/`unit` shows up."""

    def __init__(
        self,
        name: str,
        value: str,
        lead_index: int | None = None,
        *,
        source: str | None = None,
    ) -> None:
        self.name = name
        self.value = value
        self.lead_index = lead_index
        where = "time base" if lead_index is None else f"lead {lead_index}"
        super().__init__(f"unexpected attribute {name}:{value} at {where}", source=source)


class MalformedDigitsError(DecodeError):
    """Raised when a `digits` block holds a token that is not a number."""

    def __init__(self, token: str, lead_index: int, *, source: str | None = None) -> None:
        self.token = token
        self.lead_index = lead_index
        super().__init__(f"non-numeric sample '{token}' at lead {lead_index}", source=source)


class SampleShapeMismatchError(DecodeError):
    """Raised when a lead's sample count differs from the first lead's."""

    def __init__(
        self,
        expected: int,
        actual: int,
        lead_index: int,
        *,
        source: str | None = None,
    ) -> None:
        self.expected = expected
        self.actual = actual
        self.lead_index = lead_index
        super().__init__(
            f"lead {lead_index} has {actual} samples, expected {expected}", source=source
        )


class MissingTimeBaseError(DecodeError):
    """Raised when a header is requested but no GLIST_TS component exists."""


# ---- Validation / construction errors ----
class InvalidHeader(Hl7aError):
    """Raised when a Header / LeadMeta / SeriesMeta is constructed with invalid inputs."""


class InvalidLead(Hl7aError):
    """Raised when a Lead is constructed with invalid inputs."""


class InvalidRecord(Hl7aError):
    """Raised when an ECGRecord is constructed with invalid inputs."""


# ---- Lookup errors (also behave like KeyError for dict-like APIs) ----
class CodeNotFound(Hl7aError, KeyError):
    """Raised when a vocabulary code is not present in its table."""


class LeadNotFound(Hl7aError, KeyError):
    """Raised when a requested lead label is not present in a record."""


# ---- Warnings ----
class MultipleSeriesWarning(UserWarning):
    """Emitted when a document holds more than one series; the first one is used."""
