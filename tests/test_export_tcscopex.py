"""Tests for the .tcscopex writer (scopegen.export.tcscopex)."""

import re

import pytest

from conftest import golden, mask_guids, parse_xml, pattern, settings

from scopegen.export import escape_xml, render_primary_document, synthesize_acquisitions
from scopegen.model import Acquisition, DataType

GUID_RE = re.compile(r"<Guid>([0-9a-f-]{36})</Guid>")


def _acq(name: str = "MAIN.x", **overrides) -> Acquisition:
    fields = dict(
        guid="11111111-2222-3333-4444-555555555555",
        name=name,
        symbol_name=name,
        ams_net_id="127.0.0.1.1.1",
        target_port=851,
        data_type=DataType.REAL64,
        variable_size=8,
        base_sample_time=100_000,
    )
    fields.update(overrides)
    return Acquisition(**fields)


# ---------------------------------------------------------------------------
# escape_xml
# ---------------------------------------------------------------------------

class TestEscapeXml:
    def test_all_reserved(self):
        assert escape_xml("&<>\"'") == "&amp;&lt;&gt;&quot;&apos;"

    def test_ampersand_first(self):
        assert escape_xml("<&lt;>") == "&lt;&amp;lt;&gt;"

    def test_plain_text_untouched(self):
        assert escape_xml("MAIN.mover[1].position") == "MAIN.mover[1].position"

    def test_round_trip_through_parser(self):
        name = "R&D <Line \"3\"> 'A'"
        doc = render_primary_document(settings(project_name=name), [])
        assert parse_xml(doc).findtext("Name") == name


# ---------------------------------------------------------------------------
# Document structure
# ---------------------------------------------------------------------------

class TestPrimaryDocument:
    def test_declaration_and_root(self):
        doc = render_primary_document(settings(), [_acq()])
        assert doc.startswith('<?xml version="1.0" encoding="utf-8"?>\n<ScopeProject ')
        assert doc.endswith("</ScopeProject>")

    def test_project_fields(self):
        s = settings(project_name="Line 3", main_server="10.0.0.1.1.1", record_time=42)
        root = parse_xml(render_primary_document(s, []))
        assert root.tag == "ScopeProject"
        assert root.get("AssemblyName") == "TwinCAT.Measurement.Scope.API.Model"
        assert root.findtext("Name") == "Line 3"
        assert root.findtext("MainServer") == "10.0.0.1.1.1"
        assert root.findtext("RecordTime") == "42"

    def test_acquisition_fields(self):
        acq = _acq(
            "GVL.a[1]", data_type=DataType.UINT16, variable_size=2,
            target_port=350, ams_net_id="5.1.2.3.1.1", base_sample_time=5000,
        )
        root = parse_xml(render_primary_document(settings(), [acq]))
        [el] = root.findall("SubMember/DataPool/SubMember/AdsAcquisition")
        assert el.findtext("SymbolName") == "GVL.a[1]"
        assert el.findtext("Name") == "GVL.a[1]"
        assert el.findtext("TargetPort") == "350"
        assert el.findtext("DataType") == "UINT16"
        assert el.findtext("VariableSize") == "2"
        assert el.findtext("AmsNetId") == "5.1.2.3.1.1"
        assert el.findtext("BaseSampleTime") == "5000"
        assert el.findtext("Guid") == acq.guid
        assert el.findtext("Enabled") == "true"

    def test_constant_acquisition_fields(self):
        root = parse_xml(render_primary_document(settings(), [_acq()]))
        el = root.find("SubMember/DataPool/SubMember/AdsAcquisition")
        assert el.findtext("CompressionMode") == "Uncompressed"
        assert el.findtext("DisplayColor") == "Black"
        assert el.findtext("IndexGroup") == "16448"
        assert el.findtext("SaveOption") == "IncludeDataInSVDX"
        assert el.findtext("SymbolBased") == "true"
        assert el.findtext("DataAccess/DataAccessMode/Protocoll") == "ADS"
        assert el.findtext("RawUnit/Unit/ReturnText") == " (None) "
        levels = [i.text for i in el.findall("SubMember/NameRelationInfo/DetailLevel/Int32")]
        assert levels == ["0", "1", "2", "3"]

    def test_acquisition_order_preserved(self):
        acqs = synthesize_acquisitions(pattern("A[{n:1:3}]", "B"), settings())
        doc = render_primary_document(settings(), acqs)
        assert re.findall(r"<SymbolName>(.*?)</SymbolName>", doc) == [
            "A[1]", "A[2]", "A[3]", "B",
        ]

    def test_user_text_escaped(self):
        doc = render_primary_document(settings(), [_acq("a<b>&'c\"")])
        assert "<SymbolName>a&lt;b&gt;&amp;&apos;c&quot;</SymbolName>" in doc
        assert "<Name>a&lt;b&gt;&amp;&apos;c&quot;</Name>" in doc

    def test_indentation(self):
        doc = render_primary_document(settings(), [_acq()])
        lines = doc.split("\n")
        assert '  <MainServer>127.0.0.1.1.1</MainServer>' in lines
        assert '    <DataPool AssemblyName="TwinCAT.Measurement.Scope.API.Model">' in lines
        assert '        <AdsAcquisition AssemblyName="TwinCAT.Measurement.Scope.API.Model">' in lines
        assert '          <SymbolName>MAIN.x</SymbolName>' in lines
        assert '        </AdsAcquisition>' in lines

    def test_empty_data_pool(self):
        doc = render_primary_document(settings(), [])
        assert "      <SubMember>\n\n      </SubMember>" in doc
        root = parse_xml(doc)
        assert root.findall("SubMember/DataPool/SubMember/AdsAcquisition") == []

    def test_embedded_documents(self):
        root = parse_xml(render_primary_document(settings(), []))
        export_cfg = root.findtext("AutoSaveExportConfigurationString")
        assert export_cfg.startswith('<?xml version="1.0" encoding="utf-8"?>\n<ExportConfiguration>')
        assert "\t<CSVProperties>" in export_cfg
        inner = parse_xml(export_cfg)
        assert inner.findtext("Silent") == "False"

        layout = root.findtext("Layout")
        assert layout.startswith('<?xml version="1.0" encoding="utf-16"?>\n<Layout>')
        assert root.findtext("AutoSavePath") == "$ScopeProject$\\AutoSave"

    def test_layout_guids_consistent(self):
        doc = render_primary_document(settings(), [])
        layout = parse_xml(doc).findtext("Layout")
        window = re.search(r'<Window Guid="([^"]+)"', layout).group(1)
        container = re.search(r'<ControlLayoutSystem [^>]*Guid="([^"]+)"', layout).group(1)
        assert f'SelectedControl="{window}"' in layout
        assert f'<Control Guid="{window}" />' in layout
        assert f'DocumentWindowGroupGuid="{container}"' in layout
        assert window != container

    def test_fresh_document_ids_per_render(self):
        acqs = [_acq()]
        first = set(GUID_RE.findall(render_primary_document(settings(), acqs)))
        second = set(GUID_RE.findall(render_primary_document(settings(), acqs)))
        # Only the acquisition's own guid is shared.
        assert first & second == {acqs[0].guid}

    def test_no_duplicate_guids(self):
        acqs = synthesize_acquisitions(pattern("A[{n:1:20}]"), settings())
        guids = GUID_RE.findall(render_primary_document(settings(), acqs))
        # project + data pool + (acquisition + name relation) per acquisition
        assert len(guids) == 2 + 2 * 20
        assert len(set(guids)) == len(guids)

    def test_wrong_settings_type(self):
        with pytest.raises(TypeError, match="expects GlobalSettings"):
            render_primary_document({"project_name": "x"}, [])


# ---------------------------------------------------------------------------
# Whole-document layout
# ---------------------------------------------------------------------------

class TestPrimaryDocumentGolden:
    def test_matches_reference_document(self):
        s = settings(
            project_name="Golden <Test> & Co",
            ams_net_id="5.1.2.3.1.1",
            main_server="10.0.0.1.1.1",
            record_time=123,
            base_sample_time=456,
        )
        acqs = [
            _acq(
                "MAIN.a[1]", ams_net_id="5.1.2.3.1.1", base_sample_time=456,
            ),
            _acq(
                "GVL.b'2'", guid="aaaaaaaa-bbbb-cccc-dddd-eeeeeeeeeeee",
                ams_net_id="5.1.2.3.1.1", base_sample_time=456,
                data_type=DataType.BIT, variable_size=1, target_port=350,
            ),
        ]
        doc = render_primary_document(s, acqs)
        assert mask_guids(doc) == golden("scope.tcscopex")
