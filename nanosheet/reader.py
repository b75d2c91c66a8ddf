"""XLSX style reader - Converts a style table into canonical styles.

Handles:
- Fonts, fills, borders and custom number formats
- Cell formats (cellXfs) including alignment and protection
- Worksheet cell style references (the ``s`` attribute)

Each ``xf`` becomes one Style, interned in table order, so a table without
duplicates reproduces its indices as order ids.
"""

from __future__ import annotations

import zipfile
from io import BytesIO
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Union
from xml.etree import ElementTree as ET

from .config import get_settings
from .enums import (
    BorderStyle,
    CharsetValue,
    FontFamilyValue,
    FormatNumber,
    FormatRange,
    HorizontalAlignValue,
    PatternValue,
    SchemeValue,
    TextBreakValue,
    TextDirectionValue,
    UnderlineValue,
    VerticalAlignValue,
    VerticalTextAlignValue,
)
from .exceptions import InvalidAttributeError, StyleImportError
from .logger_config import get_logger
from .styles.base import StyleComponent
from .styles.border import Border
from .styles.cell_alignment import VERTICAL_TEXT_ROTATION, CellAlignment
from .styles.fill import Fill
from .styles.font import Font
from .styles.number_format import NumberFormat, try_parse_format_number
from .styles.repository import StyleRepository
from .styles.style import Style
from .workbook import Workbook

logger = get_logger(__name__)

Source = Union[str, Path, bytes, BytesIO]
Attribute = Tuple[str, Optional[str], Callable[[str], Any]]


# =============================================================================
# NAMESPACES
# =============================================================================

NS = {
    "main": "http://schemas.openxmlformats.org/spreadsheetml/2006/main",
    "r": "http://schemas.openxmlformats.org/officeDocument/2006/relationships",
    "rel": "http://schemas.openxmlformats.org/package/2006/relationships",
}

STYLES_PART = "xl/styles.xml"


# =============================================================================
# UTILITIES
# =============================================================================

def _flag(el: Optional[ET.Element]) -> bool:
    """Boolean toggle element like <b/>, <b val="1"/> or <b val="0"/>."""
    if el is None:
        return False
    return el.get("val", "1").lower() not in ("0", "false")


def _bool_attr(value: str) -> bool:
    return value.lower() in ("1", "true")


def _text_rotation(value: str) -> int:
    """Decode OOXML rotation: 91-180 are negative angles."""
    rotation = int(value)
    if 90 < rotation <= 180:
        return 90 - rotation
    return rotation


def _apply_attributes(
    component: StyleComponent,
    attributes: Iterable[Attribute],
    part: str,
    strict: bool,
) -> StyleComponent:
    """Assign raw XML attributes onto a component one by one.

    Missing attributes (``None``) keep the component default. In strict mode
    an invalid value aborts the import; otherwise it is logged and skipped.
    """
    for name, raw, convert in attributes:
        if raw is None:
            continue
        try:
            setattr(component, name, convert(raw))
        except (InvalidAttributeError, ValueError) as e:
            if strict:
                raise StyleImportError(part, f"{name}={raw!r}: {e}") from e
            logger.warning("Ignoring invalid %s=%r in %s: %s", name, raw, part, e)
    return component


def _open_package(source: Source) -> zipfile.ZipFile:
    if isinstance(source, bytes):
        source = BytesIO(source)
    try:
        return zipfile.ZipFile(source, "r")
    except zipfile.BadZipFile as e:
        raise StyleImportError("package", f"not an XLSX package: {e}") from e


# =============================================================================
# STYLE PARTS
# =============================================================================

def _parse_fonts(root: ET.Element, strict: bool) -> List[Font]:
    ns = NS["main"]
    fonts: List[Font] = []
    fonts_el = root.find(f"{{{ns}}}fonts")
    if fonts_el is None:
        return fonts

    for i, font_el in enumerate(fonts_el.findall(f"{{{ns}}}font")):
        def val(tag: str) -> Optional[str]:
            el = font_el.find(f"{{{ns}}}{tag}")
            return el.get("val") if el is not None else None

        attributes: List[Attribute] = [
            ("name", val("name"), str),
            ("size", val("sz"), float),
            ("family", val("family"), lambda v: FontFamilyValue(int(v))),
            ("charset", val("charset"), lambda v: CharsetValue(int(v))),
            ("scheme", val("scheme"), SchemeValue),
            ("vertical_align", val("vertAlign"), _vertical_text_align),
        ]

        for tag, name in (("b", "bold"), ("i", "italic"), ("strike", "strike")):
            el = font_el.find(f"{{{ns}}}{tag}")
            if el is not None:
                attributes.append((name, "1" if _flag(el) else "0", _bool_attr))

        u_el = font_el.find(f"{{{ns}}}u")
        if u_el is not None:
            attributes.append(("underline", u_el.get("val", "single"), UnderlineValue))

        color_el = font_el.find(f"{{{ns}}}color")
        if color_el is not None:
            if color_el.get("rgb"):
                attributes.append(("color_value", color_el.get("rgb"), str))
            elif color_el.get("theme") is not None:
                attributes.append(("color_theme", color_el.get("theme"), int))
            else:
                logger.debug("Font %d: unsupported color reference, keeping default", i)

        fonts.append(_apply_attributes(Font(), attributes, f"{STYLES_PART}:fonts[{i}]", strict))
    return fonts


def _vertical_text_align(value: str) -> VerticalTextAlignValue:
    if value == "baseline":
        return VerticalTextAlignValue.NONE
    return VerticalTextAlignValue(value)


def _parse_fills(root: ET.Element, strict: bool) -> List[Fill]:
    ns = NS["main"]
    fills: List[Fill] = []
    fills_el = root.find(f"{{{ns}}}fills")
    if fills_el is None:
        return fills

    for i, fill_el in enumerate(fills_el.findall(f"{{{ns}}}fill")):
        attributes: List[Attribute] = []
        pattern_el = fill_el.find(f"{{{ns}}}patternFill")
        if pattern_el is not None:
            attributes.append(("pattern_fill", pattern_el.get("patternType"), PatternValue))
            fg = pattern_el.find(f"{{{ns}}}fgColor")
            bg = pattern_el.find(f"{{{ns}}}bgColor")
            if fg is not None:
                attributes.append(("foreground_color", fg.get("rgb"), str))
                attributes.append(("indexed_color", fg.get("indexed"), int))
            if bg is not None:
                attributes.append(("background_color", bg.get("rgb"), str))
        else:
            logger.debug("Fill %d: no patternFill (gradient fills are not modeled)", i)
        fills.append(_apply_attributes(Fill(), attributes, f"{STYLES_PART}:fills[{i}]", strict))
    return fills


def _parse_borders(root: ET.Element, strict: bool) -> List[Border]:
    ns = NS["main"]
    borders: List[Border] = []
    borders_el = root.find(f"{{{ns}}}borders")
    if borders_el is None:
        return borders

    for i, border_el in enumerate(borders_el.findall(f"{{{ns}}}border")):
        attributes: List[Attribute] = [
            ("diagonal_up", border_el.get("diagonalUp"), _bool_attr),
            ("diagonal_down", border_el.get("diagonalDown"), _bool_attr),
        ]
        for side in ["left", "right", "top", "bottom", "diagonal"]:
            side_el = border_el.find(f"{{{ns}}}{side}")
            if side_el is None:
                continue
            attributes.append((f"{side}_style", side_el.get("style"), BorderStyle))
            color_el = side_el.find(f"{{{ns}}}color")
            if color_el is not None:
                attributes.append((f"{side}_color", color_el.get("rgb"), str))
        borders.append(_apply_attributes(Border(), attributes, f"{STYLES_PART}:borders[{i}]", strict))
    return borders


def _parse_number_format_codes(root: ET.Element) -> Dict[int, str]:
    ns = NS["main"]
    codes: Dict[int, str] = {}
    num_fmts_el = root.find(f"{{{ns}}}numFmts")
    if num_fmts_el is not None:
        for num_fmt in num_fmts_el.findall(f"{{{ns}}}numFmt"):
            codes[int(num_fmt.get("numFmtId", 0))] = num_fmt.get("formatCode", "")
    return codes


def _build_number_format(
    num_fmt_id: int, codes: Dict[int, str], part: str, strict: bool
) -> NumberFormat:
    format_range, number = try_parse_format_number(num_fmt_id)
    if format_range == FormatRange.DEFINED_FORMAT:
        return NumberFormat(number=number)
    if num_fmt_id in codes:
        return _apply_attributes(
            NumberFormat(number=FormatNumber.CUSTOM),
            [("custom_format_code", codes[num_fmt_id], str)],
            part,
            strict,
        )
    if strict:
        raise StyleImportError(part, f"numFmtId {num_fmt_id} is {format_range.value}")
    logger.warning("Unknown numFmtId %d in %s, using the general format", num_fmt_id, part)
    return NumberFormat()


def _build_cell_alignment(xf: ET.Element, part: str, strict: bool) -> CellAlignment:
    ns = NS["main"]
    attributes: List[Attribute] = []

    alignment_el = xf.find(f"{{{ns}}}alignment")
    if alignment_el is not None:
        attributes.append(("horizontal_align", alignment_el.get("horizontal"), HorizontalAlignValue))
        attributes.append(("vertical_align", alignment_el.get("vertical"), VerticalAlignValue))
        if _bool_attr(alignment_el.get("wrapText", "0")):
            attributes.append(("text_break", TextBreakValue.WRAP_TEXT.value, TextBreakValue))
        elif _bool_attr(alignment_el.get("shrinkToFit", "0")):
            attributes.append(("text_break", TextBreakValue.SHRINK_TO_FIT.value, TextBreakValue))
        attributes.append(("indent", alignment_el.get("indent"), int))
        rotation = alignment_el.get("textRotation")
        if rotation is not None and rotation.strip() == str(VERTICAL_TEXT_ROTATION):
            attributes.append(("text_direction", TextDirectionValue.VERTICAL.value, TextDirectionValue))
        else:
            attributes.append(("text_rotation", rotation, _text_rotation))

    protection_el = xf.find(f"{{{ns}}}protection")
    if protection_el is not None:
        attributes.append(("locked", protection_el.get("locked"), _bool_attr))
        attributes.append(("hidden", protection_el.get("hidden"), _bool_attr))

    return _apply_attributes(CellAlignment(), attributes, part, strict)


def _component_at(
    components: List[Any], index: int, default_type: type, part: str, strict: bool
):
    if 0 <= index < len(components):
        return components[index].copy()
    if index == 0 and not components:
        return default_type()  # collection omitted from the part
    if strict:
        raise StyleImportError(part, f"{default_type.__name__} index {index} is out of range")
    logger.warning("%s index %d out of range in %s, using default", default_type.__name__, index, part)
    return default_type()


def parse_styles_xml(
    xml: Union[bytes, str],
    repository: StyleRepository,
    strict: Optional[bool] = None,
) -> List[Style]:
    """Parse raw styles.xml content into canonical styles, one per cellXfs index."""
    if strict is None:
        strict = get_settings().strict_import

    try:
        root = ET.fromstring(xml)
    except ET.ParseError as e:
        raise StyleImportError(STYLES_PART, f"malformed XML: {e}") from e

    ns = NS["main"]
    fonts = _parse_fonts(root, strict)
    fills = _parse_fills(root, strict)
    borders = _parse_borders(root, strict)
    codes = _parse_number_format_codes(root)

    styles: List[Style] = []
    cell_xfs_el = root.find(f"{{{ns}}}cellXfs")
    if cell_xfs_el is None:
        return styles

    for i, xf in enumerate(cell_xfs_el.findall(f"{{{ns}}}xf")):
        part = f"{STYLES_PART}:cellXfs[{i}]"
        try:
            font_id = int(xf.get("fontId", 0))
            fill_id = int(xf.get("fillId", 0))
            border_id = int(xf.get("borderId", 0))
            num_fmt_id = int(xf.get("numFmtId", 0))
        except ValueError as e:
            raise StyleImportError(part, f"non-numeric component index: {e}") from e

        style = Style(
            border=_component_at(borders, border_id, Border, part, strict),
            cell_alignment=_build_cell_alignment(xf, part, strict),
            fill=_component_at(fills, fill_id, Fill, part, strict),
            font=_component_at(fonts, font_id, Font, part, strict),
            number_format=_build_number_format(num_fmt_id, codes, part, strict),
        )
        styles.append(repository.intern(style))

    logger.debug(
        "Read %d cell formats (%d canonical styles)", len(styles), len(repository)
    )
    return styles


def read_styles(
    source: Source,
    repository: Optional[StyleRepository] = None,
    strict: Optional[bool] = None,
) -> List[Style]:
    """Read the style table of an XLSX package (path, bytes or file object)."""
    if repository is None:
        repository = StyleRepository()
    with _open_package(source) as zf:
        return _read_styles_from_package(zf, repository, strict)


def _read_styles_from_package(
    zf: zipfile.ZipFile, repository: StyleRepository, strict: Optional[bool]
) -> List[Style]:
    try:
        with zf.open(STYLES_PART) as f:
            xml = f.read()
    except KeyError:
        logger.debug("Package has no %s", STYLES_PART)
        return []  # No styles
    return parse_styles_xml(xml, repository, strict)


# =============================================================================
# WORKBOOK
# =============================================================================

def _sheet_paths(zf: zipfile.ZipFile) -> List[Tuple[str, str]]:
    """(sheet name, part path) pairs in workbook order."""
    ns = NS["main"]
    r_ns = NS["r"]
    ns_rel = NS["rel"]

    with zf.open("xl/workbook.xml") as f:
        wb_root = ET.parse(f).getroot()
    with zf.open("xl/_rels/workbook.xml.rels") as f:
        rels_root = ET.parse(f).getroot()

    id_to_target: Dict[str, str] = {}
    for rel in rels_root.findall(f"{{{ns_rel}}}Relationship"):
        rel_id = rel.get("Id")
        target = rel.get("Target")
        if rel_id and target:
            id_to_target[rel_id] = target

    paths: List[Tuple[str, str]] = []
    sheets_el = wb_root.find(f"{{{ns}}}sheets")
    if sheets_el is not None:
        for sheet in sheets_el.findall(f"{{{ns}}}sheet"):
            target = id_to_target.get(sheet.get(f"{{{r_ns}}}id"), "")
            if target.startswith("/"):
                sheet_path = target[1:]
            else:
                sheet_path = f"xl/{target}"
            paths.append((sheet.get("name"), sheet_path))
    return paths


def load_workbook(
    source: Source,
    repository: Optional[StyleRepository] = None,
    strict: Optional[bool] = None,
) -> Workbook:
    """Load worksheets and their cell style references from an XLSX package."""
    if strict is None:
        strict = get_settings().strict_import
    workbook = Workbook(repository)
    ns = NS["main"]

    with _open_package(source) as zf:
        styles = _read_styles_from_package(zf, workbook.styles, strict)
        try:
            sheet_paths = _sheet_paths(zf)
        except KeyError as e:
            raise StyleImportError("xl/workbook.xml", f"missing workbook part: {e}") from e

        for name, sheet_path in sheet_paths:
            worksheet = workbook.add_worksheet(name)
            try:
                with zf.open(sheet_path) as f:
                    sheet_root = ET.parse(f).getroot()
            except KeyError:
                logger.warning("Worksheet part %s not found, sheet left empty", sheet_path)
                continue

            for cell in sheet_root.iter(f"{{{ns}}}c"):
                ref = cell.get("r")
                style_attr = cell.get("s")
                if ref is None or style_attr is None:
                    continue
                try:
                    index = int(style_attr)
                except ValueError as e:
                    if strict:
                        raise StyleImportError(
                            sheet_path, f"cell {ref} has non-numeric style index {style_attr!r}"
                        ) from e
                    logger.warning(
                        "Cell %s in %s has non-numeric style index %r", ref, sheet_path, style_attr
                    )
                    continue
                if not 0 <= index < len(styles):
                    if strict:
                        raise StyleImportError(sheet_path, f"cell {ref} uses unknown style index {index}")
                    logger.warning("Cell %s in %s uses unknown style index %d", ref, sheet_path, index)
                    continue
                worksheet.set_style(ref, styles[index])

    logger.debug(
        "Loaded %d worksheet(s) with %d canonical styles",
        len(workbook.worksheets), len(workbook.styles),
    )
    return workbook
