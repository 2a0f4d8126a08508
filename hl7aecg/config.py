from dataclasses import dataclass

# Recording start used when effectiveTime/low is not a 14-char timestamp
DEFAULT_DATE = "01/01/2000"
DEFAULT_TIME = "00:00:00"
TIMESTAMP_LENGTH = 14  # YYYYMMDDHHMMSS

# Value element type discriminators
LEAD_VALUE_TYPE = "SLIST_PQ"
TIME_BASE_VALUE_TYPE = "GLIST_TS"

# Soft cap (megabytes) on a single read, for callers that batch files.
# The decoder itself does not enforce it.
MAX_IO_READ_MB = 200


@dataclass(frozen=True)
class DecodeOptions:
    """How deep a decode goes.

    with_header: decode offsets, gains, units, labels, sampling rate and date.
    with_annotations: return an (empty) AnnotationSet.
    Samples are always decoded.
    """

    with_header: bool = True
    with_annotations: bool = False
