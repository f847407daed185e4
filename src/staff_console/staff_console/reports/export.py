from __future__ import annotations

import csv
import io
from typing import Sequence

import pandas as pd

from ..core.constants import MONTH_NAMES

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def rows_to_csv_bytes(rows: Sequence[dict]) -> bytes:
    """CSV with a BOM so spreadsheet apps pick up UTF-8 (currency symbols)."""

    out = io.StringIO()
    if rows:
        writer = csv.DictWriter(out, fieldnames=list(rows[0].keys()))
        writer.writeheader()
        for row in rows:
            writer.writerow(row)
    return out.getvalue().encode("utf-8-sig")


def rows_to_xlsx_bytes(rows: Sequence[dict], *, sheet_name: str = "Report") -> bytes:
    df = pd.DataFrame(list(rows))
    output = io.BytesIO()
    # Excel caps sheet names at 31 characters.
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=sheet_name[:31] or "Report")
    return output.getvalue()


def report_filename(kind: str, year: int, month: int, *, ext: str = "xlsx") -> str:
    return f"{kind}_report_{MONTH_NAMES[int(month) - 1]}_{int(year)}.{ext}"


def receipt_filename(employee_name: str) -> str:
    safe = "_".join(employee_name.split()) or "employee"
    return f"Receipt_{safe}.xlsx"
