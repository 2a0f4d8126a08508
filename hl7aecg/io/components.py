from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
import logging
import math
import re

import numpy as np

from hl7aecg.config import LEAD_VALUE_TYPE, TIME_BASE_VALUE_TYPE
from hl7aecg.core.exceptions import (
    CodeNotFound,
    MalformedAttributeError,
    MalformedDigitsError,
    MissingElementError,
    SampleShapeMismatchError,
    UnknownLeadCodeError,
)
from hl7aecg.core.metadata import LeadMeta
from hl7aecg.core.units import normalize_amplitude, normalize_time
from hl7aecg.core.vocabulary import lookup_lead
from hl7aecg.io.xml_tree import XmlNavigator


logger = logging.getLogger(__name__)

_DIGITS_SPLIT_RE = re.compile(r"[\s,;]+")


class ComponentKind(Enum):
    LEAD = "lead"            # SLIST_PQ: sampled lead
    TIME_BASE = "time_base"  # GLIST_TS: shared sampling increment
    OTHER = "other"          # anything else, skipped


@dataclass
class DecodeState:
    """Accumulator owned by a single decode call."""

    source: str | None = None
    lead_index: int = 0
    n_samples: int | None = None      # fixed by the first decoded lead
    columns: list[np.ndarray] = field(default_factory=list)
    leads: list[LeadMeta] = field(default_factory=list)
    sampling_frequency: float | None = None

    def sample_matrix(self) -> np.ndarray:
        if not self.columns:
            return np.empty((0, 0), dtype=float)
        return np.column_stack(self.columns)


def classify_component(nav: XmlNavigator, component: Any) -> tuple[ComponentKind, Any | None]:
    """Return the kind of a `component` element and its `value` element.

    The kind comes from the value element's type discriminator
    (xsi:type), compared case-insensitively.
    """
    value = nav.first(component, "value")
    if value is None:
        return ComponentKind.OTHER, None

    value_type = (nav.attribute(value, "type") or "").strip().upper()
    if value_type == LEAD_VALUE_TYPE:
        return ComponentKind.LEAD, value
    if value_type == TIME_BASE_VALUE_TYPE:
        return ComponentKind.TIME_BASE, value
    return ComponentKind.OTHER, value


def _read_value_unit(
    nav: XmlNavigator,
    element: Any,
    lead_index: int | None,
    source: str | None,
) -> tuple[float | None, str | None]:
    """Read the `value` / `unit` attribute pair of origin, scale or increment."""
    value: float | None = None
    unit: str | None = None

    for name, raw in nav.attributes(element):
        key = name.lower()
        if key == "value":
            try:
                value = float(raw)
            except ValueError as e:
                raise MalformedAttributeError(name, raw, lead_index, source=source) from e
        elif key == "unit":
            unit = raw
        else:
            raise MalformedAttributeError(name, raw, lead_index, source=source)

    return value, unit


def _require(nav: XmlNavigator, element: Any, tag: str, where: str, source: str | None) -> Any:
    child = nav.first(element, tag)
    if child is None:
        raise MissingElementError(f"missing <{tag}> in {where}", source=source)
    return child


def parse_digits(text: str, lead_index: int, *, source: str | None = None) -> np.ndarray:
    """Parse a whitespace/comma separated list of numbers into a float array."""
    tokens = [tok for tok in _DIGITS_SPLIT_RE.split(text.strip()) if tok]
    try:
        return np.array(tokens, dtype=float)
    except ValueError:
        for tok in tokens:
            try:
                float(tok)
            except ValueError as e:
                raise MalformedDigitsError(tok, lead_index, source=source) from e
        raise


def _decode_lead_meta(
    nav: XmlNavigator,
    component: Any,
    value: Any,
    lead_index: int,
    source: str | None,
) -> LeadMeta:
    where = f"lead {lead_index}"

    # ADC zero, converted to volts
    origin = _require(nav, value, "origin", where, source)
    origin_value, origin_unit = _read_value_unit(nav, origin, lead_index, source)
    adc_zero = 0.0 if origin_value is None else origin_value
    if origin_unit is not None:
        adc_zero = normalize_amplitude(
            adc_zero, origin_unit, lead_index=lead_index, source=source
        )

    # Gain is 1/scale; the scale unit is kept as-is and not applied to gain
    scale = _require(nav, value, "scale", where, source)
    scale_value, scale_unit = _read_value_unit(nav, scale, lead_index, source)
    gain = 1.0
    if scale_value is not None:
        if scale_value == 0 or not math.isfinite(scale_value):
            raise MalformedAttributeError(
                "value", f"{scale_value:g}", lead_index, source=source
            )
        gain = 1.0 / scale_value

    code_el = _require(nav, component, "code", where, source)
    code = nav.attribute(code_el, "code")
    if code is None:
        raise MissingElementError(f"missing code attribute in {where}", source=source)
    try:
        entry = lookup_lead(code)
    except CodeNotFound as e:
        raise UnknownLeadCodeError(code, lead_index, source=source) from e

    return LeadMeta(
        label=entry.label,
        description=entry.description,
        code=entry.code,
        adc_zero=adc_zero,
        gain=gain,
        unit=scale_unit,
    )


def decode_lead(
    nav: XmlNavigator,
    component: Any,
    value: Any,
    state: DecodeState,
    *,
    with_header: bool = True,
) -> None:
    """Decode one SLIST_PQ component and append it as a new column.

    The first decoded lead fixes the number of samples; every later lead
    must match it exactly.
    """
    idx = state.lead_index

    if with_header:
        state.leads.append(_decode_lead_meta(nav, component, value, idx, state.source))

    digits = _require(nav, value, "digits", f"lead {idx}", state.source)
    samples = parse_digits(nav.text(digits), idx, source=state.source)

    if state.n_samples is None:
        state.n_samples = int(samples.size)
    elif samples.size != state.n_samples:
        raise SampleShapeMismatchError(
            state.n_samples, int(samples.size), idx, source=state.source
        )

    state.columns.append(samples)
    state.lead_index += 1
    logger.debug("Decoded lead %d (%d samples)", idx, samples.size)


def decode_time_base(nav: XmlNavigator, value: Any, *, source: str | None = None) -> float:
    """Decode a GLIST_TS component into a sampling frequency (Hz).

    frequency = (1 / increment value) * time-unit multiplier
    """
    increment = _require(nav, value, "increment", "time base", source)
    inc_value, inc_unit = _read_value_unit(nav, increment, None, source)
    if inc_value is None:
        raise MissingElementError("missing increment value in time base", source=source)
    # A sampling step must be a positive, finite duration
    if inc_value <= 0 or not math.isfinite(inc_value):
        raise MalformedAttributeError("value", f"{inc_value:g}", source=source)

    frequency = 1.0 / inc_value
    if inc_unit is not None:
        frequency = normalize_time(frequency, inc_unit, source=source)
    return frequency
