"""Read a curation template stored as an Excel (.xlsx) workbook."""

from __future__ import annotations

import re
import zipfile
from xml.etree import ElementTree as ET

__all__ = ["ExcelError", "read_excel_to_dataframe"]

_SHEET_NAME = "Sheet1"
_CELL_REF = re.compile(r"^([A-Za-z]+)(\d+)$")


class ExcelError(ValueError):
    """Raised when a workbook cannot be opened or its contents are malformed."""


def _local(tag: str) -> str:
    """Strip an XML namespace from a tag or attribute name."""
    return tag.rsplit("}", 1)[-1]


def _children(element: ET.Element, name: str) -> list[ET.Element]:
    return [child for child in element if _local(child.tag) == name]


def _attribute(element: ET.Element, name: str) -> str | None:
    for key, value in element.attrib.items():
        if _local(key) == name:
            return value
    return None


def _describe_os_error(err: OSError) -> str:
    if err.errno is not None and err.strerror:
        return f"I/O error: {err.strerror} (os error {err.errno})"
    return f"I/O error: {err}"


def _format_number(text: str) -> str:
    number = float(text)
    if number.is_integer():
        return str(int(number))
    return repr(number)


def _column_index(letters: str) -> int:
    index = 0
    for letter in letters.upper():
        index = index * 26 + (ord(letter) - ord("A") + 1)
    return index - 1


def _rich_text(element: ET.Element) -> str:
    """Concatenate the text runs of a string item, ignoring phonetic runs."""
    parts: list[str] = []
    for child in element:
        name = _local(child.tag)
        if name == "t":
            parts.append(child.text or "")
        elif name == "r":
            parts.extend(t.text or "" for t in _children(child, "t"))
    return "".join(parts)


def _shared_strings(archive: zipfile.ZipFile) -> list[str]:
    path = "xl/sharedStrings.xml"
    if path not in archive.namelist():
        return []
    root = ET.fromstring(archive.read(path))
    return [_rich_text(item) for item in _children(root, "si")]


def _sheet_path(archive: zipfile.ZipFile, sheet_name: str) -> str:
    workbook = ET.fromstring(archive.read("xl/workbook.xml"))
    rel_id = None
    for element in workbook.iter():
        if _local(element.tag) == "sheet" and element.get("name") == sheet_name:
            rel_id = _attribute(element, "id")
            break
    if rel_id is None:
        raise ExcelError(f"Worksheet '{sheet_name}' not found")
    rels = ET.fromstring(archive.read("xl/_rels/workbook.xml.rels"))
    for element in rels.iter():
        if _local(element.tag) == "Relationship" and element.get("Id") == rel_id:
            target = element.get("Target", "")
            if target.startswith("/"):
                return target.lstrip("/")
            return f"xl/{target}"
    raise ExcelError(f"Worksheet '{sheet_name}' not found")


def _cell_value(cell: ET.Element, shared: list[str]) -> str | None:
    kind = cell.get("t", "n")
    if kind == "inlineStr":
        inline = _children(cell, "is")
        return _rich_text(inline[0]) if inline else ""
    values = _children(cell, "v")
    if not values or values[0].text is None:
        return None
    text = values[0].text
    if kind == "s":
        return shared[int(text)]
    if kind == "b":
        return "true" if text.strip() == "1" else "false"
    if kind in ("str", "e", "d"):
        return text
    return _format_number(text)


def _read_sheet(archive: zipfile.ZipFile, sheet_name: str) -> list[list[str]]:
    shared = _shared_strings(archive)
    root = ET.fromstring(archive.read(_sheet_path(archive, sheet_name)))
    cells: dict[tuple[int, int], str] = {}
    next_row = 0
    for row in root.iter():
        if _local(row.tag) != "row":
            continue
        row_attr = row.get("r")
        row_idx = int(row_attr) - 1 if row_attr else next_row
        next_row = row_idx + 1
        next_col = 0
        for cell in _children(row, "c"):
            ref = cell.get("r")
            col_idx = next_col
            if ref:
                match = _CELL_REF.match(ref)
                if match is None:
                    raise ExcelError(f"Malformed cell reference '{ref}'")
                col_idx = _column_index(match.group(1))
                row_idx = int(match.group(2)) - 1
            next_col = col_idx + 1
            value = _cell_value(cell, shared)
            if value is not None:
                cells[(row_idx, col_idx)] = value
    if not cells:
        return []
    rows = [r for r, _ in cells]
    cols = [c for _, c in cells]
    first_col, last_col = min(cols), max(cols)
    return [
        [cells.get((r, c), "") for c in range(first_col, last_col + 1)]
        for r in range(min(rows), max(rows) + 1)
    ]


def read_excel_to_dataframe(file_path: str) -> list[list[str]]:
    """Read ``Sheet1`` of an .xlsx file as rows of strings.

    The first two rows are the header rows; every row must have as many
    fields as the first.
    """
    try:
        archive = zipfile.ZipFile(file_path)
    except OSError as err:
        raise ExcelError(
            f"Could not open Excel file at '{file_path}': {_describe_os_error(err)}"
        ) from err
    except zipfile.BadZipFile as err:
        raise ExcelError(
            f"Could not open Excel file at '{file_path}': Zip error: {err}"
        ) from err

    with archive:
        try:
            rows = _read_sheet(archive, _SHEET_NAME)
        except (ExcelError, KeyError, ET.ParseError, ValueError, IndexError) as err:
            raise ExcelError(f"Error reading workbook: {err}") from err

    if len(rows) < 2:
        raise ExcelError("No data in the worksheet")
    n1 = len(rows[0])
    n2 = len(rows[1])
    if n1 != n2:
        raise ExcelError(f"Malformed headers: expected {n2} fields, got {n1}")
    for row in rows[2:]:
        if len(row) != n1:
            raise ExcelError(
                f"Malformed line:: expected {n1} fields, got {len(row)}"
            )
    return rows