# teams_core/export_pdf.py
from __future__ import annotations
from typing import Optional, Sequence
import io
from reportlab.lib.pagesizes import A4
from reportlab.lib import colors
from reportlab.pdfgen import canvas
from reportlab.platypus import Table, TableStyle

from .models import Player
from .reports import teams_grid_df
from .scoring import score, team_strength

def render_pdf(teams: Sequence[Sequence[Player]], bib_idx: Optional[int] = None, title: str = "Teams") -> bytes:
    if not teams:
        raise ValueError("No teams to export.")
    buf = io.BytesIO()
    page_size = A4
    c = canvas.Canvas(buf, pagesize=page_size)

    c.setFont("Helvetica-Bold", 16)
    c.drawString(40, page_size[1] - 40, title)
    c.setFont("Helvetica", 10)
    c.drawString(40, page_size[1] - 58, f"Variance: {score(teams):.4f}")

    # Helvetica has no emoji glyph; mark the bib team in plain text
    grid = teams_grid_df(teams)
    header = [f"Team {i + 1}" + (" (bibs)" if bib_idx == i else "") for i in range(len(teams))]
    data = [header]
    for slot in grid.index:
        data.append(list(grid.loc[slot, :].values))
    data.append([f"Avg {team_strength(t):.2f}" for t in teams])

    t = Table(data, repeatRows=1)
    t.setStyle(TableStyle([
        ("BACKGROUND", (0,0), (-1,0), colors.lightgrey),
        ("TEXTCOLOR", (0,0), (-1,0), colors.black),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTNAME", (0,-1), (-1,-1), "Helvetica-Oblique"),
        ("FONTSIZE", (0,0), (-1,-1), 10),
        ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
        ("ALIGN", (0,0), (-1,-1), "LEFT"),
        ("VALIGN", (0,0), (-1,-1), "MIDDLE"),
    ]))

    table_w, table_h = t.wrapOn(c, page_size[0] - 80, page_size[1] - 100)
    x = 40
    y = page_size[1] - 80 - table_h
    t.drawOn(c, x, y)

    c.showPage()
    c.save()
    return buf.getvalue()
