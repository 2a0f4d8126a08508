# test/test_xml_tree.py
import xml.etree.ElementTree as ET

import pytest

from hl7aecg.core import DocumentReadError
from hl7aecg.io.xml_tree import EtreeNavigator, local_name, read_document


DOC = """<root xmlns="urn:hl7-org:v3" xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance">
  <a id="1"><b id="2"/></a>
  <b id="3"/>
  <value xsi:type="SLIST_PQ" unit="uV"><digits>1 2 <!-- c -->3</digits></value>
</root>"""


@pytest.fixture
def root():
    return ET.fromstring(DOC)


@pytest.fixture
def nav():
    return EtreeNavigator()


def test_local_name():
    assert local_name("{urn:hl7-org:v3}series") == "series"
    assert local_name("{http://www.w3.org/2001/XMLSchema-instance}type") == "type"
    assert local_name("code") == "code"


def test_children_searches_descendants_in_document_order(nav, root):
    ids = [el.get("id") for el in nav.children(root, "b")]
    assert ids == ["2", "3"]
    assert nav.children(root, "missing") == []


def test_children_excludes_the_element_itself(nav, root):
    a = nav.first(root, "a")
    assert nav.children(a, "a") == []


def test_first(nav, root):
    assert nav.first(root, "b").get("id") == "2"
    assert nav.first(root, "missing") is None


def test_attribute_ignores_namespace(nav, root):
    value = nav.first(root, "value")
    assert nav.attribute(value, "type") == "SLIST_PQ"
    assert nav.attribute(value, "unit") == "uV"
    assert nav.attribute(value, "missing") is None


def test_attributes_in_document_order(nav, root):
    value = nav.first(root, "value")
    assert nav.attributes(value) == [("type", "SLIST_PQ"), ("unit", "uV")]


def test_text_joins_nested_text(nav, root):
    digits = nav.first(root, "digits")
    assert nav.text(digits).split() == ["1", "2", "3"]


def test_read_document_parses_file(sample_path):
    root = read_document(sample_path)
    assert local_name(root.tag) == "AnnotatedECG"


def test_read_document_rejects_malformed_xml(write_aecg):
    path = write_aecg("<AnnotatedECG><series></AnnotatedECG>")
    with pytest.raises(DocumentReadError) as exc:
        read_document(path)
    assert exc.value.source == str(path)


def test_read_document_rejects_missing_file(tmp_path):
    with pytest.raises(DocumentReadError):
        read_document(tmp_path / "does_not_exist.xml")
