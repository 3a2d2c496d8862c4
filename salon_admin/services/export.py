"""Spreadsheet report export.

Report content is built as plain sheets (a header row plus data rows) so it
can be returned as JSON or rendered to an .xlsx workbook with openpyxl.
"""

import io
import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Sequence

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from salon_admin.models.appointment import AppointmentStatus
from salon_admin.services import stats

logger = logging.getLogger(__name__)

HEADER_FILL = "E91E63"
TITLE_FILL = "F06292"
NOT_INFORMED = "Not informed"
MAX_COLUMN_WIDTH = 50


@dataclass
class Sheet:
    title: str
    header: list[str]
    rows: list[list[Any]] = field(default_factory=list)


def _fmt_date(value: date | datetime | None) -> str:
    if value is None:
        return NOT_INFORMED
    return value.strftime("%Y-%m-%d")


def _fmt_time(value) -> str:
    return value.strftime("%H:%M") if value else ""


def monthly_closing_sheet(closing: dict) -> Sheet:
    rows: list[list[Any]] = [
        ["Revenue", closing["revenue"]],
        ["Services performed", closing["services_performed"]],
        ["Average ticket", closing["average_ticket"]],
        ["Total appointments", closing["total_appointments"]],
        ["Completed appointments", closing["completed_appointments"]],
        ["Completion rate (%)", closing["completion_rate"]],
        ["Canceled appointments", closing["canceled_appointments"]],
    ]
    for position, top in enumerate(closing["top_services"], start=1):
        rows.append([f"Top {position}: {top['service_name']}", top["count"]])
    rows.append(["Registered clients", closing["total_clients"]])
    rows.append(["Clients served this month", closing["clients_served"]])

    title = f"Closing {closing['year']}-{closing['month']:02d}"
    return Sheet(title=title, header=["Metric", "Value"], rows=rows)


def clients_sheet(clients: Sequence, title: str = "Clients", with_ids: bool = False) -> Sheet:
    header = ["Full name", "Email", "Phone", "Birth date", "Address", "Registered on"]
    rows = []
    for c in clients:
        row = [
            c.full_name,
            c.email or NOT_INFORMED,
            c.phone or NOT_INFORMED,
            _fmt_date(c.birth_date),
            c.address or NOT_INFORMED,
            _fmt_date(c.created_at),
        ]
        rows.append([c.id, *row] if with_ids else row)
    return Sheet(title=title, header=["ID", *header] if with_ids else header, rows=rows)


def appointments_sheet(enriched: Sequence[dict], title: str = "Appointments", with_ids: bool = False) -> Sheet:
    header = ["Date", "Time", "Client", "Service", "Status", "Price", "Observations"]
    rows = []
    for a in enriched:
        status = a["status"].value if hasattr(a["status"], "value") else a["status"]
        row = [
            _fmt_date(a["appointment_date"]),
            _fmt_time(a["appointment_time"]),
            a["client_name"],
            a["service_name"],
            status,
            a["total_price"],
            a.get("observations") or "None",
        ]
        rows.append([a["id"], *row] if with_ids else row)
    return Sheet(title=title, header=["ID", *header] if with_ids else header, rows=rows)


def services_sheet(services: Sequence, title: str = "Services", with_ids: bool = False) -> Sheet:
    header = ["Name", "Category", "Duration (min)", "Price", "Status", "Description"]
    rows = []
    for s in services:
        row = [
            s.name,
            s.category,
            s.duration_minutes or 0,
            float(s.price or 0),
            "Active" if s.active else "Inactive",
            s.description or "No description",
        ]
        rows.append([s.id, *row] if with_ids else row)
    return Sheet(title=title, header=["ID", *header] if with_ids else header, rows=rows)


def products_sheet(products: Sequence) -> Sheet:
    rows = [
        [p.id, p.name, p.category, p.quantity, p.minimum_stock, float(p.price or 0),
         stats.stock_status(p.quantity, p.minimum_stock)]
        for p in products
    ]
    return Sheet(
        title="Products",
        header=["ID", "Name", "Category", "Quantity", "Minimum stock", "Price", "Stock status"],
        rows=rows,
    )


def general_report(clients: Sequence, services: Sequence, appointments: Sequence, today: date) -> list[Sheet]:
    """Month closing plus client, appointment and service listings.

    Listing sheets are only included when the collection has records.
    """
    closing = stats.monthly_closing(clients, services, appointments, today)
    sheets = [monthly_closing_sheet(closing)]
    if clients:
        sheets.append(clients_sheet(clients))
    if appointments:
        sheets.append(appointments_sheet(stats.enrich_appointments(appointments, clients, services)))
    if services:
        sheets.append(services_sheet(services))
    return sheets


def detailed_report(
    clients: Sequence,
    services: Sequence,
    products: Sequence,
    appointments: Sequence,
    now: datetime,
) -> list[Sheet]:
    report = stats.report_stats(clients, services, products, appointments)
    completed = report["completed_appointments"]
    enriched = stats.enrich_appointments(appointments, clients, services)
    revenue = round(sum(
        row["total_price"] for row in enriched if row["status"] == AppointmentStatus.COMPLETED
    ), 2)

    dashboard = Sheet(
        title="Dashboard",
        header=["Metric", "Value", "Description"],
        rows=[
            ["Generated at", now.strftime("%Y-%m-%d %H:%M"), ""],
            ["Total clients", report["total_clients"], "Clients registered"],
            ["Total appointments", len(appointments), "Appointments booked"],
            ["Completed appointments", completed, "Appointments performed"],
            ["Completion rate (%)", stats.completion_rate(len(appointments), completed), ""],
            ["Active services", report["active_services"], "Services offered"],
            ["Products", report["total_products"], "Products in inventory"],
            ["Low stock products", len(stats.low_stock_products(products)), "At or below minimum stock"],
            ["Total revenue", revenue, "Completed appointments, current prices"],
            ["Average ticket", round(revenue / completed, 2) if completed else 0.0, "Revenue per completed appointment"],
        ],
    )
    return [
        dashboard,
        clients_sheet(clients, title="All Clients", with_ids=True),
        appointments_sheet(enriched, title="All Appointments", with_ids=True),
        services_sheet(services, title="All Services", with_ids=True),
        products_sheet(products),
    ]


def render_workbook(sheets: Sequence[Sheet], heading: str) -> bytes:
    """Render sheets to .xlsx bytes: heading row, styled header, auto widths."""
    wb = Workbook()
    wb.remove(wb.active)
    thin = Side(style="thin")
    border = Border(left=thin, right=thin, top=thin, bottom=thin)

    for sheet in sheets:
        ws = wb.create_sheet(title=sheet.title[:31])
        width = max(len(sheet.header), 1)

        ws.cell(row=1, column=1, value=heading).font = Font(size=14, bold=True, color="FFFFFF")
        ws.cell(row=1, column=1).fill = PatternFill("solid", fgColor=TITLE_FILL)
        ws.cell(row=1, column=1).alignment = Alignment(horizontal="center")
        if width > 1:
            ws.merge_cells(start_row=1, start_column=1, end_row=1, end_column=width)

        header_row = 3
        for col, title in enumerate(sheet.header, start=1):
            cell = ws.cell(row=header_row, column=col, value=title)
            cell.font = Font(bold=True, color="FFFFFF")
            cell.fill = PatternFill("solid", fgColor=HEADER_FILL)
            cell.alignment = Alignment(horizontal="center")
            cell.border = border

        for r_idx, row in enumerate(sheet.rows, start=header_row + 1):
            for col, value in enumerate(row, start=1):
                ws.cell(row=r_idx, column=col, value=value).border = border

        for col in range(1, width + 1):
            letter = get_column_letter(col)
            longest = max(
                (len(str(ws.cell(row=r, column=col).value or "")) for r in range(header_row, ws.max_row + 1)),
                default=0,
            )
            ws.column_dimensions[letter].width = min(longest + 2, MAX_COLUMN_WIDTH)

    buffer = io.BytesIO()
    wb.save(buffer)
    logger.info("Rendered workbook '%s' with %d sheets", heading, len(sheets))
    return buffer.getvalue()


def report_filename(kind: str, salon_name: str, day: date) -> str:
    slug = "_".join(salon_name.split())
    return f"{kind}_Report_{slug}_{day.isoformat()}.xlsx"
