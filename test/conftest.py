# test/conftest.py
from pathlib import Path

import pytest


SAMPLE_AECG = Path(__file__).parent / "files" / "sample_aecg.xml"


def _attrs(pairs) -> str:
    return " ".join(f'{k}="{v}"' for k, v in pairs)


def lead_component(
    code: str = "MDC_ECG_LEAD_I",
    digits: str = "1 2 3 4",
    origin=(("value", "0"), ("unit", "uV")),
    scale=(("value", "4.76837"), ("unit", "uV")),
    value_type: str = "SLIST_PQ",
) -> str:
    return f"""
          <component>
            <sequence>
              <code code="{code}" codeSystem="2.16.840.1.113883.6.24"/>
              <value xsi:type="{value_type}">
                <origin {_attrs(origin)}/>
                <scale {_attrs(scale)}/>
                <digits>{digits}</digits>
              </value>
            </sequence>
          </component>"""


def time_component(increment=(("value", "2"), ("unit", "ms"))) -> str:
    return f"""
          <component>
            <sequence>
              <code code="TIME_ABSOLUTE" codeSystem="2.16.840.1.113883.5.4"/>
              <value xsi:type="GLIST_TS">
                <head value="20160205143000.000"/>
                <increment {_attrs(increment)}/>
              </value>
            </sequence>
          </component>"""


def build_aecg(
    components: list[str],
    *,
    low: str | None = "20160205143000",
    n_series: int = 1,
) -> str:
    effective_time = ""
    if low is not None:
        effective_time = f"""
      <effectiveTime>
        <low value="{low}"/>
        <high value="20160205143010"/>
      </effectiveTime>"""

    series = f"""
  <component>
    <series>{effective_time}
      <component>
        <sequenceSet>{"".join(components)}
        </sequenceSet>
      </component>
    </series>
  </component>"""

    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<AnnotatedECG xmlns="urn:hl7-org:v3" '
        'xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance">'
        f"{series * n_series}\n"
        "</AnnotatedECG>\n"
    )


@pytest.fixture
def write_aecg(tmp_path):
    """Write an XML document to tmp_path and return its path."""

    def _write(content: str, name: str = "record.xml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_path() -> Path:
    return SAMPLE_AECG
