# test/test_vocabulary.py
import pytest

from hl7aecg.core import (
    LEAD_CODES,
    WAVE_CODES,
    BEAT_CODES,
    CodeNotFound,
    lookup_lead,
    lookup_wave,
    lookup_beat,
)


def test_table_sizes():
    assert len(LEAD_CODES) == 105
    assert len(WAVE_CODES) == 35
    assert len(BEAT_CODES) == 38


def test_lookup_lead_returns_label_and_description():
    entry = lookup_lead("MDC_ECG_LEAD_AVR")
    assert entry.code == "MDC_ECG_LEAD_AVR"
    assert entry.label == "Lead aVR"
    assert entry.description == "aVR augmented voltage right"


def test_lookup_is_case_insensitive():
    assert lookup_lead("mdc_ecg_lead_ii").label == "Lead II"
    assert lookup_lead("MDC_ECG_LEAD_DAVR").code == "MDC_ECG_LEAD_daVR"
    assert lookup_wave("mdc_ecg_wavc_twave").label == "T wave"
    assert lookup_beat("Mdc_Ecg_Beat_Normal").beat_class == "N"


def test_lowercase_prefixed_codes_stay_distinct():
    # fI and I only differ by a prefix letter, not by case
    assert lookup_lead("MDC_ECG_LEAD_fI").code == "MDC_ECG_LEAD_fI"
    assert lookup_lead("MDC_ECG_LEAD_I").code == "MDC_ECG_LEAD_I"


def test_lookup_beat_classes():
    assert lookup_beat("MDC_ECG_BEAT_V_P_C").beat_class == "V"
    assert lookup_beat("MDC_ECG_BEAT_V_P_C_FUSION").beat_class == "F"
    assert lookup_beat("MDC_ECG_BEAT_ATR_P_C").beat_class == "S"
    assert lookup_beat("MDC_ECG_BEAT_PACED").beat_class == "Q"


def test_no_partial_matching():
    with pytest.raises(CodeNotFound):
        lookup_lead("MDC_ECG_LEAD_")
    with pytest.raises(CodeNotFound):
        lookup_lead("LEAD_II")


def test_unknown_codes_raise_keyerror():
    with pytest.raises(KeyError):
        lookup_lead("MDC_ECG_LEAD_XYZ")
    with pytest.raises(KeyError):
        lookup_wave("MDC_ECG_WAVC_NOPE")
    with pytest.raises(KeyError):
        lookup_beat("MDC_ECG_BEAT_NOPE")
    with pytest.raises(CodeNotFound):
        lookup_lead(None)  # type: ignore[arg-type]


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        LEAD_CODES["NEW"] = LEAD_CODES["MDC_ECG_LEAD_I"]  # type: ignore[index]
