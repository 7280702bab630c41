"""Tabular renderings of a guarded record's fields."""
from __future__ import annotations

import csv
import html
import io
import json

import pandas as pd

from guarded_record.domain.record import Record

COLUMNS = ["name", "kind", "value", "removable"]


def record_to_rows(record: Record) -> list[dict[str, str]]:
    rows: list[dict[str, str]] = []
    for name, value in record.to_dict().items():
        rows.append(
            {
                "name": name,
                "kind": record.kind(name).value,
                "value": _format_value(value),
                "removable": "yes" if record.is_removable(name) else "no",
            }
        )
    return rows


def render_csv(record: Record) -> bytes:
    rows = record_to_rows(record)
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=COLUMNS)
    writer.writeheader()
    writer.writerows(rows)
    return buffer.getvalue().encode("utf-8")


def render_html(record: Record) -> str:
    rows = record_to_rows(record)
    if not rows:
        return "<p>No fields.</p>"
    header = "".join(f"<th>{html.escape(col)}</th>" for col in COLUMNS)
    body_parts = []
    for row in rows:
        body_parts.append("<tr>" + "".join(f"<td>{html.escape(row[col])}</td>" for col in COLUMNS) + "</tr>")
    body_html = "".join(body_parts)
    return f"<table><thead><tr>{header}</tr></thead><tbody>{body_html}</tbody></table>"


def record_to_dataframe(record: Record) -> pd.DataFrame:
    return pd.DataFrame(record_to_rows(record), columns=COLUMNS)


def _format_value(value: object) -> str:
    if isinstance(value, str):
        return value
    try:
        return json.dumps(value)
    except TypeError:
        return str(value)
