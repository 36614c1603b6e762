"""
PDF report generation with ReportLab.

- SalesReportPDF: sales of a date range with a status summary
- InventoryReportPDF: stock summary, low stock list and full catalog

Every page carries a "Page i of n" footer.
"""

import io
from datetime import date
from decimal import Decimal
from typing import Any, Dict, Iterable, List

from django.conf import settings
from django.utils import timezone

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle
from reportlab.platypus.flowables import HRFlowable

PRIMARY_COLOR = colors.HexColor("#2D3142")
SECONDARY_COLOR = colors.HexColor("#4F5D75")
ROW_SHADE_COLOR = colors.HexColor("#F2F2F2")
PAGE_MARGIN = 14 * mm


def format_currency(value) -> str:
    amount = Decimal(value or 0)
    return f"{settings.SHOP_CURRENCY_SYMBOL} {amount:,.2f}"


class NumberedCanvas(canvas.Canvas):
    """
    Canvas that defers page output until the page count is known so each
    page can be stamped with "Page i of n".
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._saved_page_states = []

    def showPage(self):
        self._saved_page_states.append(dict(self.__dict__))
        self._startPage()

    def save(self):
        page_count = len(self._saved_page_states)
        for state in self._saved_page_states:
            self.__dict__.update(state)
            self.draw_page_footer(page_count)
            super().showPage()
        super().save()

    def draw_page_footer(self, page_count):
        self.saveState()
        self.setFont("Helvetica", 8)
        self.setFillColor(colors.grey)
        self.drawString(
            PAGE_MARGIN,
            10 * mm,
            f"{settings.SHOP_NAME} - Page {self._pageNumber} of {page_count}",
        )
        self.restoreState()


class BaseReportPDF:
    """
    Shared layout for the shop's PDF reports.

    Subclasses set ``title`` and implement ``build_story``.
    """

    title = ""

    def __init__(self):
        self.styles = getSampleStyleSheet()
        self._create_custom_styles()

    def _create_custom_styles(self):
        """Create custom paragraph styles for reports."""
        self.shop_name_style = ParagraphStyle(
            "ShopName",
            parent=self.styles["Heading1"],
            fontSize=20,
            spaceAfter=4,
            textColor=PRIMARY_COLOR,
            fontName="Helvetica-Bold",
        )

        self.title_style = ParagraphStyle(
            "ReportTitle",
            parent=self.styles["Heading2"],
            fontSize=12,
            spaceAfter=4,
            textColor=SECONDARY_COLOR,
        )

        self.section_style = ParagraphStyle(
            "Section",
            parent=self.styles["Heading3"],
            fontSize=12,
            spaceBefore=10,
            spaceAfter=6,
            textColor=PRIMARY_COLOR,
            fontName="Helvetica-Bold",
        )

        self.body_style = ParagraphStyle(
            "ReportBody",
            parent=self.styles["Normal"],
            fontSize=10,
            spaceAfter=3,
            textColor=colors.black,
        )

    def get_title(self) -> str:
        return self.title

    def build_story(self) -> List[Any]:
        raise NotImplementedError

    def generate_pdf(self) -> bytes:
        """
        Render the report.

        Returns:
            PDF bytes
        """
        buffer = io.BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=PAGE_MARGIN,
            leftMargin=PAGE_MARGIN,
            topMargin=PAGE_MARGIN,
            bottomMargin=20 * mm,
            title=self.get_title(),
            author=settings.SHOP_NAME,
        )

        story = self._build_header() + self.build_story()
        doc.build(story, canvasmaker=NumberedCanvas)

        pdf_bytes = buffer.getvalue()
        buffer.close()
        return pdf_bytes

    def _build_header(self) -> List[Any]:
        generated_at = timezone.localtime().strftime("%Y-%m-%d %H:%M")
        return [
            Paragraph(settings.SHOP_NAME.upper(), self.shop_name_style),
            Paragraph(self.get_title(), self.title_style),
            Paragraph(f"Generated on: {generated_at}", self.body_style),
            Spacer(1, 6),
            HRFlowable(width="100%", thickness=1, color=colors.lightgrey),
            Spacer(1, 8),
        ]

    def _build_summary(self, lines: Iterable[str]) -> List[Any]:
        return [Paragraph(line, self.body_style) for line in lines]

    def _build_table(self, header: List[str], rows: List[List[str]], col_widths=None) -> Table:
        table = Table([header] + rows, colWidths=col_widths, repeatRows=1)
        table.setStyle(
            TableStyle(
                [
                    ("BACKGROUND", (0, 0), (-1, 0), PRIMARY_COLOR),
                    ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, 0), 9),
                    ("BOTTOMPADDING", (0, 0), (-1, 0), 6),
                    ("FONTNAME", (0, 1), (-1, -1), "Helvetica"),
                    ("FONTSIZE", (0, 1), (-1, -1), 9),
                    ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, ROW_SHADE_COLOR]),
                    ("LINEBELOW", (0, 0), (-1, -1), 0.25, colors.lightgrey),
                    ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
                ]
            )
        )
        return table


class SalesReportPDF(BaseReportPDF):
    """
    Sales report for a range of days.

    Args:
        sales: Sales to list, already filtered to the range
        start: First day of the range
        end: Last day of the range
        summary: Output of SalesReportService.summarize for the same sales
    """

    def __init__(self, sales, start: date, end: date, summary: Dict[str, Any]):
        super().__init__()
        self.sales = list(sales)
        self.start = start
        self.end = end
        self.summary = summary

    def get_title(self) -> str:
        return f"Sales Report - {self.start:%Y-%m-%d} to {self.end:%Y-%m-%d}"

    def build_story(self) -> List[Any]:
        if not self.sales:
            return [Paragraph("No sales found in the selected period.", self.body_style)]

        story = [Paragraph("Sales Summary", self.section_style)]
        story.extend(
            self._build_summary(
                [
                    f"Total sales: {self.summary['sales_count']}",
                    f"Total value: {format_currency(self.summary['total_value'])}",
                    f"Completed sales: {self.summary['completed_count']} "
                    f"({format_currency(self.summary['completed_value'])})",
                    f"Pending sales: {self.summary['pending_count']}",
                    f"Cancelled sales: {self.summary['cancelled_count']}",
                ]
            )
        )

        story.append(Paragraph("Sales Details", self.section_style))
        rows = [
            [
                str(sale.pk),
                timezone.localtime(sale.date).strftime("%Y-%m-%d %H:%M"),
                sale.customer.name if sale.customer_id else "-",
                sale.get_status_display(),
                format_currency(sale.total),
            ]
            for sale in self.sales
        ]
        story.append(
            self._build_table(
                ["ID", "Date", "Customer", "Status", "Total"],
                rows,
                col_widths=[15 * mm, 35 * mm, 70 * mm, 25 * mm, 35 * mm],
            )
        )
        return story


class InventoryReportPDF(BaseReportPDF):
    """
    Inventory report: stock summary, low stock products and the full catalog.
    """

    title = "Inventory Report"

    def __init__(self, summary: Dict[str, Any], low_stock_products, products):
        super().__init__()
        self.summary = summary
        self.low_stock_products = list(low_stock_products)
        self.products = list(products)

    def build_story(self) -> List[Any]:
        story = [Paragraph("Inventory Summary", self.section_style)]
        story.extend(
            self._build_summary(
                [
                    f"Total products: {self.summary['total_products']}",
                    f"Units in stock: {self.summary['total_stock']}",
                    f"Low stock products: {self.summary['low_stock_count']}",
                    f"Out of stock products: {self.summary['out_of_stock_count']}",
                    f"Total stock value: {format_currency(self.summary['total_value'])}",
                ]
            )
        )

        story.append(Paragraph("Low Stock Products", self.section_style))
        if self.low_stock_products:
            rows = [
                [
                    product.name,
                    product.get_category_display(),
                    product.size,
                    product.color,
                    str(product.stock),
                    str(product.min_stock),
                ]
                for product in self.low_stock_products
            ]
            story.append(
                self._build_table(
                    ["Product", "Category", "Size", "Color", "Stock", "Min. Stock"],
                    rows,
                    col_widths=[60 * mm, 30 * mm, 18 * mm, 28 * mm, 22 * mm, 22 * mm],
                )
            )
        else:
            story.append(Paragraph("No products are low on stock.", self.body_style))

        story.append(Paragraph("All Products", self.section_style))
        if self.products:
            rows = [
                [
                    product.name,
                    product.get_category_display(),
                    product.size,
                    product.color,
                    format_currency(product.price),
                    str(product.stock),
                ]
                for product in self.products
            ]
            story.append(
                self._build_table(
                    ["Product", "Category", "Size", "Color", "Price", "Stock"],
                    rows,
                    col_widths=[60 * mm, 30 * mm, 18 * mm, 28 * mm, 28 * mm, 16 * mm],
                )
            )
        else:
            story.append(Paragraph("No products registered.", self.body_style))
        return story
