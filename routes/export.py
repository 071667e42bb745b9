from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse
from storage import RecordStore, get_store
from typing import Dict, List
from models import StudentRecord
import csv
import io
import logging
import openpyxl

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/teacher/export")

COLUMNS = ["id", "name", "test", "att", "attTotal", "hw", "hwTotal", "academic"]


def _build_rows(records: Dict[str, StudentRecord]) -> List[dict]:
    rows = []
    for sid, record in records.items():
        data = record.to_json()
        row = {"id": sid}
        for column in COLUMNS[1:]:
            value = data.get(column)
            row[column] = "" if value is None else value
        rows.append(row)
    return rows


@router.get("/csv")
def export_grades_csv(store: RecordStore = Depends(get_store)):
    rows = _build_rows(store.list_all())
    logger.info("GET /teacher/export/csv: exporting %d students", len(rows))

    output = io.StringIO()
    writer = csv.DictWriter(output, fieldnames=COLUMNS)
    writer.writeheader()
    writer.writerows(rows)
    output.seek(0)

    return StreamingResponse(
        iter([output.getvalue()]),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=grades.csv"},
    )


@router.get("/xlsx")
def export_grades_xlsx(store: RecordStore = Depends(get_store)):
    rows = _build_rows(store.list_all())
    logger.info("GET /teacher/export/xlsx: exporting %d students", len(rows))

    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Grades"

    ws.append(COLUMNS)
    for row in rows:
        ws.append([row.get(c, "") for c in COLUMNS])

    output = io.BytesIO()
    wb.save(output)
    output.seek(0)

    return StreamingResponse(
        iter([output.getvalue()]),
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        headers={"Content-Disposition": "attachment; filename=grades.xlsx"},
    )
