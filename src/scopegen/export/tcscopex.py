"""TwinCAT Scope project (``.tcscopex``) writer.

Emits a ScopeProject with a single DataPool holding one AdsAcquisition
per acquisition. Apart from the project settings and the acquisitions
themselves, every field is a constant the Scope requires to load the
file. Project, data pool and layout ids are minted fresh per render.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from scopegen.model.acquisition import Acquisition
from scopegen.model.project import GlobalSettings

from ._xml import XML_DECLARATION, XmlWriter, escape_xml, new_guid

logger = logging.getLogger(__name__)

PRIMARY_EXTENSION = ".tcscopex"

_MODEL_ASSEMBLY = {"AssemblyName": "TwinCAT.Measurement.Scope.API.Model"}
_NULL_GUID = "00000000-0000-0000-0000-000000000000"

# Embedded as escaped text in <AutoSaveExportConfigurationString>.
_EXPORT_CONFIGURATION = (
    '<?xml version="1.0" encoding="utf-8"?>\n'
    "<ExportConfiguration>\n"
    "  <Silent>False</Silent>\n"
    "  <Format_Properties>\n"
    "\t<CSVProperties>\n"
    "\t</CSVProperties>\n"
    "  </Format_Properties>\n"
    "</ExportConfiguration>\n"
)


def _layout(window_guid: str, container_guid: str) -> str:
    """Docking layout with a single chart window, embedded in <Layout>."""
    window_attrs = (
        f'Guid="{window_guid}" LastFocused="0" DockedSize="200" PopupSize="0" '
        'FloatingLocation="-1, -1" FloatingSize="550, 400" '
        'LastOpenDockSituation="Document" LastFixedDockSituation="Document" '
        f'LastFixedDockLocation="Right" LastFloatingWindowGuid="{_NULL_GUID}" '
        'LastDockContainerCount="0" LastDockContainerIndex="0" '
        f'DockedWorkingSize="250, 400" DockedWindowGroupGuid="{_NULL_GUID}" '
        'DockedIndexInWindowGroup="0" DockedSplitPath="0" '
        f'DocumentWorkingSize="250, 400" DocumentWindowGroupGuid="{container_guid}" '
        'DocumentIndexInWindowGroup="0" DocumentSplitPath="0" '
        f'FloatingWorkingSize="250, 400" FloatingWindowGroupGuid="{_NULL_GUID}" '
        'FloatingIndexInWindowGroup="0" FloatingSplitPath="0"'
    )
    return (
        '<?xml version="1.0" encoding="utf-16"?>\n'
        "<Layout>\n"
        f"  <Window {window_attrs} />\n"
        '  <DocumentContainer Dock="5">\n'
        '    <SplitLayoutSystem WorkingSize="250, 400" SplitMode="0">\n'
        f'      <ControlLayoutSystem WorkingSize="250, 400" Guid="{container_guid}" '
        f'Collapsed="0" SelectedControl="{window_guid}">\n'
        "        <Controls>\n"
        f'          <Control Guid="{window_guid}" />\n'
        "        </Controls>\n"
        "      </ControlLayoutSystem>\n"
        "    </SplitLayoutSystem>\n"
        "  </DocumentContainer>\n"
        "</Layout>"
    )


def render_primary_document(
    settings: GlobalSettings, acquisitions: Sequence[Acquisition]
) -> str:
    """Render a complete ``.tcscopex`` document for *acquisitions*."""
    if not isinstance(settings, GlobalSettings):
        raise TypeError(
            f"render_primary_document() expects GlobalSettings, "
            f"got {type(settings).__name__}"
        )
    w = ScopeProjectWriter()
    w.write_project(settings, acquisitions)
    logger.debug(
        "Rendered scope project %r with %d acquisitions",
        settings.project_name, len(acquisitions),
    )
    return w.getvalue()


class ScopeProjectWriter(XmlWriter):
    """Walks settings and acquisitions and emits ScopeProject XML."""

    # ======================================================================
    # Project
    # ======================================================================

    def write_project(
        self, settings: GlobalSettings, acquisitions: Sequence[Acquisition]
    ) -> None:
        window_guid = new_guid()
        container_guid = new_guid()

        self._line(XML_DECLARATION)
        self._open("ScopeProject", _MODEL_ASSEMBLY)
        self._element("ActiveWorkfolderPath", "")
        self._element("AutoDeleteCapacity", 0)
        self._element("AutoDeleteMode", "Disabled")
        self._element("AutoDeleteOlderThan", 0)
        self._element("AutoRestartRecord", False)
        self._embedded("AutoSaveExportConfigurationString", _EXPORT_CONFIGURATION)
        self._element("AutoSaveFileNameMask", "{SCOPE}_AutoSave_{HH_mm_ss}")
        self._element("AutoSaveMode", "None")
        self._element("AutoSavePath", "$ScopeProject$\\AutoSave")
        self._empty("Comment")
        self._element("DisplayColor", "Black")
        self._element("Guid", new_guid())
        self._empty("HeadlessServer")
        self._element("HeadlessServerConnectionId", _NULL_GUID)
        self._element("ImageAutoDeleteCapacity", 0)
        self._element("ImageAutoDeleteOlderThan", 0)
        self._element("ImagesDeleteMode", "Disabled")
        self._element("KeepPreviousExports", True)
        self._element("KeepPreviousImageExports", True)
        self._embedded("Layout", _layout(window_guid, container_guid))
        self._element("MainServer", escape_xml(settings.main_server))
        self._element("Name", escape_xml(settings.project_name))
        self._element("RecordTime", settings.record_time)
        self._empty("ServerVersions")
        self._element("SortPriority", 100)
        self._element("StopMode", "AutoStop")
        self._open("SubMember")
        self.write_data_pool(acquisitions)
        self._close("SubMember")
        self._close("ScopeProject")

    def write_data_pool(self, acquisitions: Sequence[Acquisition]) -> None:
        self._open("DataPool", _MODEL_ASSEMBLY)
        self._empty("Comment")
        self._element("DisplayColor", "Black")
        self._element("Guid", new_guid())
        self._element("Name", "DataPool")
        self._element("SortPriority", 0)
        self._open("SubMember")
        if not acquisitions:
            self._line()
        for acq in acquisitions:
            self.write_acquisition(acq)
        self._close("SubMember")
        self._close("DataPool")

    # ======================================================================
    # AdsAcquisition
    # ======================================================================

    def write_acquisition(self, acq: Acquisition) -> None:
        self._open("AdsAcquisition", _MODEL_ASSEMBLY)
        self._element("AmsNetId", escape_xml(acq.ams_net_id))
        self._element("Area", "Local")
        self._element("ArrayLength", 0)
        self._element("BaseSampleTime", acq.base_sample_time)
        self._empty("ChannelStyleInformation")
        self._element("Comment", "")
        self._element("CompressionMode", "Uncompressed")
        self._element("ContextMask", 0)
        self._write_data_access()
        self._element("DataType", acq.data_type)
        self._element("DisplayColor", "Black")
        self._element("Enabled", acq.enabled)
        self._element("FileHandle", 0)
        self._element("ForceOversampling", False)
        self._element("Guid", acq.guid)
        self._element("IndexGroup", 16448)
        self._element("IndexOffset", 0)
        self._element("IsEvent", False)
        self._element("IsHistorical", False)
        self._element("IsTimeline", False)
        self._element("Name", escape_xml(acq.name))
        self._element("Oversample", 0)
        self._write_raw_unit()
        self._element("SaveOption", "IncludeDataInSVDX")
        self._element("ServerHandle", 0)
        self._element("SortPriority", 10)
        self._empty("SubAdsAcquisition")
        self._open("SubMember")
        self._write_name_relation_info()
        self._close("SubMember")
        self._element("SymbolBased", True)
        self._element("SymbolName", escape_xml(acq.symbol_name))
        self._element("TargetPort", acq.target_port)
        self._element("TimeOffset", 0)
        self._element("Title", "MeasurementMemberBase")
        self._element("UseLocalServer", True)
        self._element("UseTaskSampleTime", True)
        self._element("UTF8Encoding", False)
        self._element("VariableSize", acq.variable_size)
        self._close("AdsAcquisition")

    def _write_data_access(self) -> None:
        self._open("DataAccess")
        self._open("DataAccessMode")
        self._element("Source", "TwinCAT")
        self._element("Protocoll", "ADS")
        self._element("Format", "TcBinary")
        self._element("TimeContext", "Present")
        self._open("TimeTangeInfo")
        self._element("StartTimeStamp", 0)
        self._element("EndTimeStamp", 0)
        self._close("TimeTangeInfo")
        self._close("DataAccessMode")
        self._close("DataAccess")

    def _write_raw_unit(self) -> None:
        self._open("RawUnit")

        self._open("Transformation")
        self._element("BaseUnitValue", 0)
        self._element("Name", "None")
        self._element("ScaleFactor", 1)
        self._element("SourceUnitPrefix", "none")
        self._empty("SourceUnitString")
        self._element("Symbol", 1)
        self._empty("TargetUnitString")
        self._element("TargetUnitValue", 0)
        self._close("Transformation")

        self._open("Unit")
        self._empty("BaseUnitString")
        self._element("BaseUnitValue", 0)
        self._empty("NameExtension")
        self._element("Offset", 0)
        self._element("Prefix", "none")
        self._element("ReturnText", " (None) ")
        self._element("ScaleFactor", 1)
        self._element("Symbol", "")
        self._close("Unit")

        self._element("UnitOffsetResult", 0)
        self._element("UnitScaleResult", 1)

        self._open("UserUnit")
        self._element("BaseName", "UnitOfOne")
        self._empty("BaseUnitString")
        self._element("BaseUnitValue", 0)
        self._element("Name", "None")
        self._empty("NameExtension")
        self._element("Offset", 0)
        self._element("Prefix", "none")
        self._element("ScaleFactor", 1)
        self._element("Symbol", "")
        self._element("UserPrefix", "none")
        self._close("UserUnit")

        self._close("RawUnit")

    def _write_name_relation_info(self) -> None:
        self._open("NameRelationInfo", _MODEL_ASSEMBLY)
        self._empty("Comment")
        self._open("DetailLevel")
        for level in range(4):
            self._element("Int32", level)
        self._close("DetailLevel")
        self._element("DisplayColor", "Black")
        self._element("Guid", new_guid())
        self._element("Name", "MeasurementMemberBase")
        self._element("SortPriority", 100)
        self._element("Title", "MeasurementMemberBase")
        self._element("UsedNameType", "DetailLevel")
        self._close("NameRelationInfo")
