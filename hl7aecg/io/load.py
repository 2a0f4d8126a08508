# hl7aecg/io/load.py
from __future__ import annotations

from pathlib import Path

import numpy as np

from hl7aecg.config import DecodeOptions
from hl7aecg.core import AnnotationSet, ECGRecord, Header
from hl7aecg.io.hl7a_reader import Hl7aReader


def load_hl7a(
    path: str | Path,
    *,
    with_header: bool = True,
    with_annotations: bool = False,
) -> ECGRecord:
    reader = Hl7aReader(
        path,
        DecodeOptions(with_header=with_header, with_annotations=with_annotations),
    )
    return reader.read()


def read_hl7a(
    path: str | Path,
    *,
    with_header: bool = True,
    with_annotations: bool = False,
) -> tuple[np.ndarray, Header | None, AnnotationSet | None, int]:
    """Decode an aECG file into (samples, header, annotations, last_sample).

    Parts that were not requested come back as None. `last_sample` is
    always the full decoded length.
    """
    rec = load_hl7a(path, with_header=with_header, with_annotations=with_annotations)
    return rec.samples, rec.header, rec.annotations, rec.last_sample
