from __future__ import annotations

from pathlib import Path
from typing import Any
import logging
import warnings

from hl7aecg.config import DEFAULT_DATE, DEFAULT_TIME, TIMESTAMP_LENGTH, DecodeOptions
from hl7aecg.core import AnnotationSet, ECGRecord, Header, SeriesMeta
from hl7aecg.core.exceptions import (
    InvalidHeader,
    MissingElementError,
    MissingTimeBaseError,
    MultipleSeriesWarning,
    NoSeriesError,
)
from hl7aecg.io.components import (
    ComponentKind,
    DecodeState,
    classify_component,
    decode_lead,
    decode_time_base,
)
from hl7aecg.io.xml_tree import EtreeNavigator, XmlNavigator, local_name, read_document


logger = logging.getLogger(__name__)


def parse_timestamp(raw: str | None) -> tuple[str, str]:
    """Split an HL7 TS value into (date, time).

    Examples
    --------
    "20160205143000" -> ("2016/02/05", "14:30:00")
    "201602051430"   -> ("01/01/2000", "00:00:00")   # not 14 chars: default
    None             -> ("01/01/2000", "00:00:00")
    """
    if raw is None or len(raw) != TIMESTAMP_LENGTH:
        return DEFAULT_DATE, DEFAULT_TIME
    date = f"{raw[0:4]}/{raw[4:6]}/{raw[6:8]}"
    time = f"{raw[8:10]}:{raw[10:12]}:{raw[12:14]}"
    return date, time


class Hl7aReader:
    """Decoder for HL7 annotated-ECG (aECG) XML documents.

    One `read()` call parses the file, decodes the first series and
    returns a new ECGRecord. The reader holds no decode state between
    calls, so reading twice gives identical records.
    """

    def __init__(
        self,
        path: str | Path,
        options: DecodeOptions | None = None,
        *,
        navigator: XmlNavigator | None = None,
    ):
        self._path = str(path)
        self._options = options if options is not None else DecodeOptions()
        self._nav = navigator if navigator is not None else EtreeNavigator()

    @property
    def path(self) -> str:
        return self._path

    @property
    def options(self) -> DecodeOptions:
        return self._options

    # ------------------------------------------------------------------
    # Document structure
    # ------------------------------------------------------------------
    def _first_series(self, root: Any) -> Any:
        all_series = self._nav.children(root, "series")
        # getElementsByTagName semantics: the root itself may be a series
        if local_name(root.tag) == "series":
            all_series.insert(0, root)

        if not all_series:
            raise NoSeriesError("No series found", source=self._path)
        if len(all_series) > 1:
            msg = (
                f"More than one series ({len(all_series)}) in {self._path}. "
                "Reading only the first one."
            )
            logger.warning(msg)
            warnings.warn(msg, MultipleSeriesWarning, stacklevel=3)
        return all_series[0]

    def _bound_value(self, effective_time: Any | None, tag: str) -> str | None:
        if effective_time is None:
            return None
        bound = self._nav.first(effective_time, tag)
        if bound is None:
            return None
        value = self._nav.attribute(bound, "value")
        if value is not None:
            return value
        attrs = self._nav.attributes(bound)
        return attrs[0][1] if attrs else None

    def _read_series_meta(self, series: Any) -> SeriesMeta:
        effective_time = self._nav.first(series, "effectiveTime")
        low = self._bound_value(effective_time, "low")
        high = self._bound_value(effective_time, "high")
        date, time = parse_timestamp(low)
        if date == DEFAULT_DATE and low is not None:
            logger.debug("Unrecognized start timestamp %r, using default date", low)

        return SeriesMeta(
            recname=Path(self._path).stem,
            date=date,
            time=time,
            low=low,
            high=high,
        )

    # ------------------------------------------------------------------
    # Decoding
    # ------------------------------------------------------------------
    def read(self) -> ECGRecord:
        """Decode the document to the depth requested by the options.

        Raises
        ------
        DecodeError
            Any subclass; nothing partial is returned.
        """
        with_header = self._options.with_header
        logger.info("Reading aECG file: %s", self._path)

        root = read_document(self._path)
        series = self._first_series(root)
        series_meta = self._read_series_meta(series) if with_header else None

        sequence_set = self._nav.first(series, "sequenceSet")
        if sequence_set is None:
            raise MissingElementError("missing <sequenceSet> in series", source=self._path)

        components = self._nav.children(sequence_set, "component")
        # By convention one component is the time base, the rest are leads
        declared_leads = max(len(components) - 1, 0)

        state = DecodeState(source=self._path)
        for position, component in enumerate(components):
            kind, value = classify_component(self._nav, component)

            if kind is ComponentKind.LEAD:
                decode_lead(self._nav, component, value, state, with_header=with_header)
            elif kind is ComponentKind.TIME_BASE:
                if with_header:
                    # Last time base wins
                    if state.sampling_frequency is not None:
                        logger.debug(
                            "Time base at component %d overrides %.6g Hz",
                            position,
                            state.sampling_frequency,
                        )
                    state.sampling_frequency = decode_time_base(
                        self._nav, value, source=self._path
                    )
            else:
                logger.debug("Skipping component %d (not a lead or time base)", position)

        samples = state.sample_matrix()
        header = None
        if with_header:
            header = self._finalize_header(series_meta, state, declared_leads)

        annotations = AnnotationSet() if self._options.with_annotations else None

        record = ECGRecord(
            samples=samples,
            header=header,
            annotations=annotations,
            source=self._path,
            last_sample=int(samples.shape[0]),
        )
        logger.info(
            "Decoded %s: %d leads x %d samples%s",
            self._path,
            record.n_leads,
            record.n_samples,
            "" if header is None else f" at {header.sampling_frequency:g} Hz",
        )
        return record

    def _finalize_header(
        self,
        series_meta: SeriesMeta,
        state: DecodeState,
        declared_leads: int,
    ) -> Header:
        # One header entry per decoded column
        if len(state.leads) != len(state.columns):
            raise InvalidHeader(
                f"{len(state.leads)} lead headers for {len(state.columns)} sample columns"
            )
        if len(state.columns) != declared_leads:
            logger.debug(
                "Decoded %d leads, document declares %d", len(state.columns), declared_leads
            )
        if state.sampling_frequency is None:
            raise MissingTimeBaseError("No GLIST_TS time base component found", source=self._path)

        return Header(
            series=series_meta,
            leads=tuple(state.leads),
            sampling_frequency=state.sampling_frequency,
            n_samples=state.n_samples or 0,
        )
