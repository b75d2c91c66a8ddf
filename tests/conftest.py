"""Shared fixtures for the nanosheet test suite."""

import io
import sys
import zipfile
from pathlib import Path

# Add project root to path (tests/ -> project root)
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest

from nanosheet.styles import StyleRepository
from nanosheet.workbook import Workbook


MAIN_NS = "http://schemas.openxmlformats.org/spreadsheetml/2006/main"
REL_NS = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"
PKG_REL_NS = "http://schemas.openxmlformats.org/package/2006/relationships"

# cellXfs:
#   0 default, 1 bold red font, 2 date format 14,
#   3 custom format + gray125 fill + frame border,
#   4 alignment/protection, 5 duplicate of 0
SAMPLE_STYLES_XML = f"""<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<styleSheet xmlns="{MAIN_NS}">
  <numFmts count="1"><numFmt numFmtId="164" formatCode="0.000"/></numFmts>
  <fonts count="2">
    <font><sz val="11"/><color theme="1"/><name val="Calibri"/><family val="2"/><scheme val="minor"/></font>
    <font><b/><sz val="11"/><color rgb="FFFF0000"/><name val="Calibri"/><family val="2"/><scheme val="minor"/></font>
  </fonts>
  <fills count="2">
    <fill><patternFill patternType="none"/></fill>
    <fill><patternFill patternType="gray125"/></fill>
  </fills>
  <borders count="2">
    <border><left/><right/><top/><bottom/><diagonal/></border>
    <border>
      <left style="thin"/><right style="thin"/><top style="thin"/>
      <bottom style="medium"><color rgb="FF0000FF"/></bottom><diagonal/>
    </border>
  </borders>
  <cellXfs count="6">
    <xf numFmtId="0" fontId="0" fillId="0" borderId="0"/>
    <xf numFmtId="0" fontId="1" fillId="0" borderId="0" applyFont="1"/>
    <xf numFmtId="14" fontId="0" fillId="0" borderId="0" applyNumberFormat="1"/>
    <xf numFmtId="164" fontId="0" fillId="1" borderId="1"/>
    <xf numFmtId="0" fontId="0" fillId="0" borderId="0" applyAlignment="1">
      <alignment horizontal="left" indent="2" wrapText="1" textRotation="135"/>
      <protection locked="1" hidden="1"/>
    </xf>
    <xf numFmtId="0" fontId="0" fillId="0" borderId="0"/>
  </cellXfs>
</styleSheet>
"""

SAMPLE_SHEET_XML = f"""<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<worksheet xmlns="{MAIN_NS}">
  <sheetData>
    <row r="1">
      <c r="A1" s="1"><v>1</v></c>
      <c r="B1" s="5"><v>2</v></c>
      <c r="C1"><v>3</v></c>
    </row>
    <row r="2">
      <c r="A2" s="2"><v>45000</v></c>
    </row>
  </sheetData>
</worksheet>
"""


def build_xlsx(styles_xml=SAMPLE_STYLES_XML, sheets=None):
    """Build a minimal XLSX package in memory and return its bytes.

    ``sheets`` maps sheet names to worksheet XML. ``styles_xml=None`` omits
    the style part entirely.
    """
    if sheets is None:
        sheets = {"Data": SAMPLE_SHEET_XML}

    sheet_entries = []
    rel_entries = []
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as zf:
        for i, (name, xml) in enumerate(sheets.items(), start=1):
            sheet_entries.append(f'<sheet name="{name}" sheetId="{i}" r:id="rId{i}"/>')
            rel_entries.append(
                f'<Relationship Id="rId{i}" '
                f'Type="{REL_NS}/worksheet" Target="worksheets/sheet{i}.xml"/>'
            )
            zf.writestr(f"xl/worksheets/sheet{i}.xml", xml)

        zf.writestr(
            "xl/workbook.xml",
            f'<workbook xmlns="{MAIN_NS}" xmlns:r="{REL_NS}">'
            f'<sheets>{"".join(sheet_entries)}</sheets></workbook>',
        )
        zf.writestr(
            "xl/_rels/workbook.xml.rels",
            f'<Relationships xmlns="{PKG_REL_NS}">{"".join(rel_entries)}</Relationships>',
        )
        if styles_xml is not None:
            zf.writestr("xl/styles.xml", styles_xml)
    return buffer.getvalue()


@pytest.fixture
def repository():
    """A fresh, empty style repository."""
    return StyleRepository()


@pytest.fixture
def workbook():
    """A workbook with one empty worksheet."""
    wb = Workbook()
    wb.add_worksheet("Sheet1")
    return wb


@pytest.fixture
def sample_xlsx():
    return build_xlsx()


@pytest.fixture
def sample_xlsx_path(tmp_path, sample_xlsx):
    path = tmp_path / "sample.xlsx"
    path.write_bytes(sample_xlsx)
    return path


ENGINE_ENV_VARS = (
    "NANOSHEET_LOG_LEVEL",
    "NANOSHEET_LOG_FILE",
    "NANOSHEET_RESERVED_STYLE_ENTRIES",
    "NANOSHEET_STRICT_IMPORT",
)


@pytest.fixture(autouse=True)
def clean_engine_env(monkeypatch):
    """Keep NANOSHEET_* settings from the host environment out of the tests.

    Variables a test sets are dropped again before the settings are reloaded
    on teardown, so a test that plants an invalid value does not break it.
    """
    from nanosheet.config import reload_settings

    for name in ENGINE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reload_settings()
    yield
    for name in ENGINE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reload_settings()
