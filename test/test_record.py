# test/test_record.py
import numpy as np
import pytest

from hl7aecg.core import ECGRecord, AnnotationSet, Header, LeadMeta, SeriesMeta, Lead
from hl7aecg.core import InvalidRecord, LeadNotFound


def _header(n_samples=4):
    return Header(
        series=SeriesMeta(recname="rec1", date="2016/02/05", time="14:30:00"),
        leads=(
            LeadMeta(label="Lead I", gain=0.2, unit="uV"),
            LeadMeta(label="Lead II", adc_zero=0.005, gain=0.4, unit="uV"),
        ),
        sampling_frequency=500.0,
        n_samples=n_samples,
    )


def _samples():
    return np.array([[1, 10], [2, 20], [3, 30], [4, 40]], dtype=float)


def test_record_basic_dict_api():
    rec = ECGRecord(samples=_samples(), header=_header(), source="rec1.xml")

    assert len(rec) == 2
    assert rec.n_samples == 4
    assert rec.n_leads == 2
    assert rec.last_sample == 4
    assert rec.sampling_frequency == 500.0
    assert list(rec) == ["Lead I", "Lead II"]
    assert "Lead II" in rec
    assert "Lead V1" not in rec

    lead = rec["Lead II"]
    assert isinstance(lead, Lead)
    assert lead.gain == 0.4
    assert np.allclose(lead.samples, [10, 20, 30, 40])


def test_record_access_by_index():
    rec = ECGRecord(samples=_samples(), header=_header())
    assert rec[0].label == "Lead I"
    assert rec[-1].label == "Lead II"
    with pytest.raises(LeadNotFound):
        _ = rec[2]


def test_record_getitem_missing_raises_leadnotfound():
    rec = ECGRecord(samples=_samples(), header=_header())
    with pytest.raises(LeadNotFound):
        _ = rec["Lead V6"]
    assert rec.get("Lead V6") is None


def test_record_without_header_uses_positional_labels():
    rec = ECGRecord(samples=_samples())
    assert rec.labels == ["0", "1"]
    assert rec["1"].meta is None
    assert rec.sampling_frequency is None
    assert [lead.label for lead in rec.leads()] == ["0", "1"]


def test_record_rejects_header_sample_mismatch():
    with pytest.raises(InvalidRecord):
        ECGRecord(samples=_samples()[:, :1], header=_header())
    with pytest.raises(InvalidRecord):
        ECGRecord(samples=_samples(), header=_header(n_samples=5))
    with pytest.raises(InvalidRecord):
        ECGRecord(samples=np.zeros(4))


def test_record_rejects_bad_annotations():
    with pytest.raises(InvalidRecord):
        ECGRecord(samples=_samples(), annotations=[])  # type: ignore[arg-type]


def test_annotation_set_is_an_empty_stub():
    ann = AnnotationSet()
    assert len(ann) == 0
    assert list(ann) == []
    assert ann.is_decoded is False


def test_slice_samples_returns_new_record():
    rec = ECGRecord(
        samples=_samples(),
        header=_header(),
        annotations=AnnotationSet(),
        source="rec1.xml",
    )

    out = rec.slice_samples(1, 3)
    assert out is not rec
    assert out.n_samples == 2
    assert out.last_sample == 2
    assert out.header.n_samples == 2
    assert out.header.labels == rec.header.labels
    assert out.source == "rec1.xml"
    assert np.allclose(out["Lead I"].samples, [2, 3])

    # original untouched
    assert rec.n_samples == 4
    assert rec.header.n_samples == 4
