"""
Export of consolidated passengers.

- CSV with UTF-8 BOM, quoted special values and text-marked date columns
- pandas DataFrame view with the same headers
- Formatted Excel workbook
"""

import json
import logging
from datetime import date
from pathlib import Path

import pandas as pd

from config import (
    EXPORT_COLUMNS, DATE_COLUMNS, CSV_BOM, CSV_LINE_SEPARATOR,
    CSV_SPECIAL_CHARACTERS, DEFAULT_OUTPUT_PREFIX
)
from utils.date_formatter import DateFormatter

logger = logging.getLogger(__name__)


def get_next_available_filename(base_filename):
    """
    Get a path that doesn't exist yet, numbering the stem when needed.

    Example:
        passengers.csv exists -> passengers_1.csv
        passengers_1.csv exists too -> passengers_2.csv
    """
    base_path = Path(base_filename)
    candidate = base_path
    counter = 0

    while candidate.exists():
        counter += 1
        candidate = base_path.with_name(f"{base_path.stem}_{counter}{base_path.suffix}")

    if counter:
        logger.info(f"{base_path.name} already exists, using: {candidate.name}")
    return str(candidate)


def default_output_filename(extension='.csv', today=None):
    """Default export name, e.g. extracted-data-2024-06-01.csv"""
    today = today or date.today()
    return f"{DEFAULT_OUTPUT_PREFIX}-{today.isoformat()}{extension}"


def escape_csv_value(value):
    """
    Quote a value if it contains a comma, quote or newline.

    Internal quotes are doubled, so Doe, Jane becomes "Doe, Jane" and
    say "hi" becomes a quoted field with each inner quote written twice.
    """
    if not value:
        return ""

    string_value = str(value)
    if any(char in string_value for char in CSV_SPECIAL_CHARACTERS):
        return '"' + string_value.replace('"', '""') + '"'
    return string_value


def escape_csv_date_value(value):
    """
    Wrap a date as ="..." so spreadsheets keep it as text.

    A value with a comma or newline would split the cell, so the whole
    marker is then quoted as an ordinary CSV field.
    """
    if not value:
        return ""

    string_value = str(value)
    marker = '="' + string_value.replace('"', '""') + '"'
    if ',' in string_value or '\n' in string_value:
        return escape_csv_value(marker)
    return marker


def build_csv(passengers, formatter=None):
    """
    Build the CSV text for a passenger list.

    Args:
        passengers: Iterable of PassengerRecord
        formatter: DateFormatter for date columns (DD-MMM-YYYY if None)

    Returns:
        str: CSV text starting with a UTF-8 BOM, rows separated by newlines
    """
    formatter = formatter or DateFormatter()

    lines = [",".join(escape_csv_value(header) for header, _ in EXPORT_COLUMNS)]
    for passenger in passengers:
        cells = []
        for _, attr in EXPORT_COLUMNS:
            value = passenger.get(attr)
            if attr in DATE_COLUMNS:
                cells.append(escape_csv_date_value(formatter.format_date(value)))
            else:
                cells.append(escape_csv_value(value))
        lines.append(",".join(cells))

    return CSV_BOM + CSV_LINE_SEPARATOR.join(lines)


def export_csv(passengers, output_file, formatter=None):
    """
    Write passengers to a CSV file (UTF-8, with BOM).

    Returns:
        str: Path written
    """
    csv_text = build_csv(passengers, formatter)
    with open(output_file, 'w', encoding='utf-8', newline='') as handle:
        handle.write(csv_text)

    logger.info(f"Exported {len(passengers)} passenger(s) to {output_file}")
    return str(output_file)


def passengers_to_dataframe(passengers, formatter=None):
    """
    Build a DataFrame with one row per passenger and the export headers.

    Date columns are formatted; no text markers are added.
    """
    formatter = formatter or DateFormatter()

    rows = []
    for passenger in passengers:
        row = {}
        for header, attr in EXPORT_COLUMNS:
            value = passenger.get(attr)
            row[header] = formatter.format_date(value) if attr in DATE_COLUMNS else value
        rows.append(row)

    return pd.DataFrame(rows, columns=[header for header, _ in EXPORT_COLUMNS])


def save_results_to_excel(results_df, output_file):
    """
    Save results to Excel with formatting.

    Features:
    - Blue bold header row
    - Auto-adjusted column widths
    - Frozen header row

    Args:
        results_df: Results DataFrame
        output_file: Output file path
    """
    from openpyxl import load_workbook
    from openpyxl.styles import PatternFill, Alignment, Font

    logger.info("Creating formatted Excel output...")

    results_df.to_excel(output_file, index=False)

    wb = load_workbook(output_file)
    ws = wb.active

    try:
        header_fill = PatternFill(start_color="4472C4", end_color="4472C4", fill_type="solid")
        header_font = Font(bold=True, color="FFFFFF", size=11)
        header_alignment = Alignment(horizontal='center', vertical='center')

        for cell in ws[1]:
            if cell.value:
                cell.fill = header_fill
                cell.font = header_font
                cell.alignment = header_alignment

        for col_idx, col in enumerate(results_df.columns, 1):
            values_length = results_df[col].astype(str).apply(len).max() if not results_df.empty else 0
            max_length = max(values_length, len(str(col))) + 2
            col_letter = ws.cell(row=1, column=col_idx).column_letter
            ws.column_dimensions[col_letter].width = min(max_length, 50)

        ws.row_dimensions[1].height = 30
        ws.freeze_panes = 'A2'

        wb.save(output_file)
        logger.info("Applied Excel formatting: header colors, auto-widths, freeze panes")

    except Exception as e:
        logger.warning(f"Could not apply Excel formatting: {e}")
        logger.info("Basic Excel file saved without formatting")

    return str(output_file)


def save_raw_records(records, output_file):
    """Write gathered per-document records as a JSON list."""
    with open(output_file, 'w', encoding='utf-8') as handle:
        json.dump([record.to_dict() for record in records], handle, indent=2, ensure_ascii=False)

    logger.info(f"Saved {len(records)} raw record(s) to {output_file}")
    return str(output_file)
