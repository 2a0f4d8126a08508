# test/test_load.py
import numpy as np

from hl7aecg.core import AnnotationSet, ECGRecord, Header
from hl7aecg.io.load import load_hl7a, read_hl7a


def test_load_hl7a_returns_record(sample_path):
    rec = load_hl7a(sample_path)
    assert isinstance(rec, ECGRecord)
    assert rec.header is not None
    assert rec.annotations is None


def test_read_hl7a_full(sample_path):
    samples, header, ann, last_sample = read_hl7a(sample_path, with_annotations=True)

    assert isinstance(samples, np.ndarray)
    assert samples.shape == (6, 3)
    assert isinstance(header, Header)
    assert header.sampling_frequency == 500.0
    assert isinstance(ann, AnnotationSet)
    assert len(ann) == 0
    assert last_sample == 6


def test_read_hl7a_samples_only(sample_path):
    samples, header, ann, last_sample = read_hl7a(sample_path, with_header=False)
    assert samples.shape == (6, 3)
    assert header is None
    assert ann is None
    assert last_sample == 6
