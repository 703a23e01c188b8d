"""
PDF Summary Export

Renders the current results view to a single A4 portrait document.
Uses fpdf2 (pure Python, no system dependencies).

Sections, in on-screen order:
1. Header + summary cards
2. Current Book of Business
3. ESI Opportunity (Management Fee) + scenario table
4. Understanding Your Estimated Earnings
5. Disclaimer

The dark page background of the on-screen view is painted on every page.
"""

from fpdf import FPDF

from .models import CalculatorInputs, CalculatorResult
from .output import OutputBuilder

EXPORT_FILENAME = "ESI-Channel-ROI-Calculator.pdf"

BACKGROUND = (37, 42, 47)  # #252a2f
CARD = (47, 53, 59)
LINE = (70, 78, 86)
ACCENT = (52, 223, 169)
TEXT = (255, 255, 255)
MUTED = (160, 167, 175)


def _safe(text: str) -> str:
    """Replace Unicode chars that can't be rendered by built-in PDF fonts (latin-1)."""
    if not text:
        return ""
    return (
        text
        .replace("—", "-")    # em dash (undefined placeholder)
        .replace("–", "-")    # en dash
        .replace("×", "x")    # multiplication sign
        .replace("“", '"')    # left double quote
        .replace("”", '"')    # right double quote
        .replace("‘", "'")    # left single quote
        .replace("’", "'")    # right single quote
        .encode("latin-1", errors="replace")
        .decode("latin-1")
    )


class SummaryPDF(FPDF):
    """A4 document with the calculator's dark theme."""

    def __init__(self):
        super().__init__(orientation="P", unit="mm", format="A4")
        self.set_margins(14, 14, 14)
        self.set_auto_page_break(auto=True, margin=14)

    def header(self):
        # Full-bleed background, drawn before any content on each page
        self.set_fill_color(*BACKGROUND)
        self.rect(0, 0, self.w, self.h, style="F")
        self.set_text_color(*TEXT)

    def footer(self):
        pass

    @property
    def printable_width(self) -> float:
        return self.w - self.l_margin - self.r_margin

    def section_header(self, title: str):
        """Render an accent-coloured section title."""
        self.ln(4)
        self.set_font("Helvetica", "B", 13)
        self.set_text_color(*ACCENT)
        self.cell(0, 8, _safe(title), new_x="LMARGIN", new_y="NEXT")
        self.set_text_color(*TEXT)

    def muted_text(self, text: str, size: float = 9):
        self.set_font("Helvetica", "", size)
        self.set_text_color(*MUTED)
        self.multi_cell(0, size * 0.5, _safe(text), new_x="LMARGIN", new_y="NEXT")
        self.set_text_color(*TEXT)

    def table_header(self, cols):
        """Render a table header row. cols: [(label, width), ...]"""
        self.set_font("Helvetica", "B", 8)
        self.set_text_color(*TEXT)
        self.set_draw_color(*LINE)
        for i, (label, width) in enumerate(cols):
            self.cell(width, 6, _safe(label), border="B", align="L" if i == 0 else "R")
        self.ln()

    def table_row(self, values, widths, captions=None, bold=False):
        """Render a data row, optionally with a muted caption line beneath."""
        self.set_font("Helvetica", "B" if bold else "", 9)
        self.set_text_color(*TEXT)
        for i, (val, width) in enumerate(zip(values, widths)):
            self.cell(width, 6, _safe(str(val)), align="L" if i == 0 else "R")
        self.ln()
        if captions:
            self.set_font("Helvetica", "", 7)
            self.set_text_color(*MUTED)
            for i, (val, width) in enumerate(zip(captions, widths)):
                self.cell(width, 4, _safe(str(val)), align="L" if i == 0 else "R")
            self.ln()
            self.set_text_color(*TEXT)
        self.set_draw_color(*LINE)
        self.line(self.l_margin, self.get_y() + 1, self.w - self.r_margin, self.get_y() + 1)
        self.ln(2)

    def summary_card(self, x: float, y: float, width: float, card: dict):
        """Render one summary card at (x, y)."""
        self.set_fill_color(*CARD)
        self.set_draw_color(*LINE)
        self.rect(x, y, width, 26, style="DF")

        self.set_xy(x + 3, y + 3)
        self.set_font("Helvetica", "", 8)
        self.set_text_color(*MUTED)
        self.cell(width - 6, 5, _safe(card["title"]))

        self.set_xy(x + 3, y + 9)
        self.set_font("Helvetica", "B", 16)
        self.set_text_color(*ACCENT)
        self.cell(width - 6, 9, _safe(card["display"]))

        if card.get("caption"):
            self.set_xy(x + 3, y + 19)
            self.set_font("Helvetica", "", 7)
            self.set_text_color(*MUTED)
            self.cell(width - 6, 4, _safe(card["caption"]))
        self.set_text_color(*TEXT)


def export_summary_pdf(result: CalculatorResult, inputs: CalculatorInputs) -> bytes:
    """
    Generate the PDF summary for a computed result.

    Args:
        result: CalculatorResult for the current inputs
        inputs: The inputs the result was computed from (for labels and rates)

    Returns:
        PDF bytes
    """
    view = OutputBuilder().build(result, inputs)

    pdf = SummaryPDF()
    pdf.add_page()
    pw = pdf.printable_width

    # ── SECTION 1: Header + cards ──
    pdf.set_font("Helvetica", "B", 20)
    pdf.set_text_color(*ACCENT)
    pdf.cell(0, 11, _safe(view["title"]), new_x="LMARGIN", new_y="NEXT")
    pdf.set_font("Helvetica", "", 10)
    pdf.set_text_color(*TEXT)
    pdf.multi_cell(0, 5, _safe(view["intro"]), new_x="LMARGIN", new_y="NEXT")
    pdf.ln(4)

    gap = 4
    card_width = (pw - 2 * gap) / 3
    top = pdf.get_y()
    for i, card in enumerate(view["summary_cards"]):
        pdf.summary_card(pdf.l_margin + i * (card_width + gap), top, card_width, card)
    pdf.set_xy(pdf.l_margin, top + 30)

    # ── SECTION 2: Current book ──
    book = view["book"]
    pdf.section_header("1. Current Book of Business")
    cols = [("Book", pw * 0.34), ("Total Book Amount", pw * 0.24),
            ("Commission %", pw * 0.18), ("Commission", pw * 0.24)]
    widths = [c[1] for c in cols]
    pdf.table_header(cols)
    for tier in book["tiers"]:
        pdf.table_row(
            [tier["label"], tier["amount"]["display"], tier["pct"]["display"], tier["commission"]["display"]],
            widths,
        )
    pdf.set_font("Helvetica", "B", 10)
    pdf.cell(0, 7, _safe(f"Current Book Commission Total: {book['total_book_commission']['display']}"),
             new_x="LMARGIN", new_y="NEXT")

    # ── SECTION 3: ESI opportunity ──
    opp = view["opportunity"]
    pdf.section_header("2. ESI Opportunity (Management Fee)")
    pdf.muted_text(f"Mode: {opp['input_mode_label']}")
    pdf.ln(1)
    facts = [
        ("Total WSE", opp["total_wse"]["display"]),
        ("Converted WSE", opp["converted_wse"]["display"]),
        ("Conversion Rate", opp["conversion_rate"]),
        ("Total payroll", opp["total_payroll"]["display"]),
        ("Gross fee on converted WSE", opp["gross_mgmt_fee"]["display"]),
    ]
    pdf.set_font("Helvetica", "", 9)
    for label, value in facts:
        pdf.cell(pw * 0.5, 5.5, _safe(label))
        pdf.cell(pw * 0.5, 5.5, _safe(value), align="R", new_x="LMARGIN", new_y="NEXT")
    pdf.ln(3)

    pdf.set_font("Helvetica", "B", 10)
    pdf.cell(0, 7, "Summary of Your Book Revenue Scenarios", new_x="LMARGIN", new_y="NEXT")
    cols = [("Scenario", pw * 0.2), ("Management Fee Commission", pw * 0.22),
            ("Your Current Book", pw * 0.2), ("Total Revenue", pw * 0.18), ("Value Added", pw * 0.2)]
    widths = [c[1] for c in cols]
    pdf.table_header(cols)

    scenarios = view["scenarios"]
    rows = list(scenarios["rows"])
    if scenarios["totals"] is not None:
        rows.append(scenarios["totals"])
    for row in rows:
        pdf.table_row(
            [row["label"], row["mgmt_commission"]["display"], row["adjusted_book"]["display"],
             row["total_revenue"]["display"], row["uplift_pct"]["display"]],
            widths,
            captions=["", f"{row['mgmt_share']['display']} of total",
                      f"{row['book_share']['display']} of total", "",
                      f"{row['uplift_abs']['display']} added"],
            bold=row is scenarios["totals"],
        )

    # ── SECTION 4: Talking points ──
    pdf.section_header("3. Understanding Your Estimated Earnings")
    pdf.set_font("Helvetica", "", 9)
    for point in view["talking_points"]:
        pdf.multi_cell(0, 4.5, _safe(f"-  {point}"), new_x="LMARGIN", new_y="NEXT")
        pdf.ln(1)

    # ── SECTION 5: Disclaimer ──
    pdf.ln(4)
    pdf.muted_text(view["disclaimer"], size=7)

    return bytes(pdf.output())
