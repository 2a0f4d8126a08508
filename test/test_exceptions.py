# test/test_exceptions.py
import pytest

from hl7aecg.core import (
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


def test_exception_inheritance_decode():
    for exc in (
        DocumentReadError,
        NoSeriesError,
        MissingElementError,
        UnknownLeadCodeError,
        UnrecognizedUnitError,
        MalformedAttributeError,
        MalformedDigitsError,
        SampleShapeMismatchError,
        MissingTimeBaseError,
    ):
        assert issubclass(exc, DecodeError)
        assert issubclass(exc, Hl7aError)


def test_exception_inheritance_validation():
    assert issubclass(InvalidHeader, Hl7aError)
    assert issubclass(InvalidLead, Hl7aError)
    assert issubclass(InvalidRecord, Hl7aError)
    assert not issubclass(InvalidRecord, DecodeError)


def test_exception_inheritance_lookup_keyerror():
    assert issubclass(CodeNotFound, KeyError)
    assert issubclass(CodeNotFound, Hl7aError)
    assert issubclass(LeadNotFound, KeyError)
    assert issubclass(LeadNotFound, Hl7aError)


def test_multiple_series_is_a_warning_not_an_error():
    assert issubclass(MultipleSeriesWarning, UserWarning)
    assert not issubclass(MultipleSeriesWarning, Hl7aError)


def test_decode_error_message_carries_source():
    err = NoSeriesError("No series found", source="/data/rec1.xml")
    assert err.source == "/data/rec1.xml"
    assert str(err) == "/data/rec1.xml: No series found"

    bare = NoSeriesError("No series found")
    assert bare.source is None
    assert str(bare) == "No series found"


def test_errors_keep_offending_values():
    err = UnknownLeadCodeError("MDC_ECG_LEAD_FOO", 2, source="x.xml")
    assert err.code == "MDC_ECG_LEAD_FOO"
    assert err.lead_index == 2
    assert "MDC_ECG_LEAD_FOO" in str(err)

    err = MalformedAttributeError("foo", "bar", 1)
    assert (err.name, err.value, err.lead_index) == ("foo", "bar", 1)
    assert "foo:bar" in str(err)

    err = SampleShapeMismatchError(100, 99, 4)
    assert (err.expected, err.actual, err.lead_index) == (100, 99, 4)


def test_lookup_errors_can_be_raised_and_caught_as_keyerror():
    with pytest.raises(KeyError):
        raise CodeNotFound("MDC_ECG_LEAD_FOO")

    with pytest.raises(KeyError):
        raise LeadNotFound("Lead II")
