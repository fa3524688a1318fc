"""
Draws cheque contents onto a ReportLab canvas.

The layout step turns ChequeData and a template into text placements
(field, lines, font, size, direction); the drawing step puts them on a
cheque-sized PDF page. Coordinates in templates are millimetres from the
top-left corner of the cheque.
"""

import logging
from dataclasses import dataclass

from pypdf import PdfReader, PdfWriter
from reportlab.pdfgen import canvas
from reportlab.pdfbase import pdfmetrics
from reportlab.lib import colors

import chequeformats
from page_size import mm_to_points
from amount_words import create_converter
from font_manager import resolve_font
from text_rendering import TextFitter, contains_arabic, process_arabic_text
from text_rendering.text_fitting import iter_font_sizes, text_fits

_LOGGER = logging.getLogger(__name__)

# Outline colours of the alignment test overlay
FIELD_COLORS = {
    chequeformats.AMOUNT_NUMERIC: colors.blue,
    chequeformats.AMOUNT_WORDS_L1: colors.green,
    chequeformats.AMOUNT_WORDS_L2: colors.green,
    chequeformats.BENEFICIARY: colors.purple,
    chequeformats.PLACE: colors.orange,
    chequeformats.DATE: colors.red,
}

OVERLAY_LINE_WIDTH = 0.5
CROSSHAIR_SIZE_MM = 2
LABEL_FONT = "Helvetica"
LABEL_FONT_SIZE = 6


@dataclass(frozen=True)
class TextPlacement:
    field_id: str
    text: str
    rect: chequeformats.FieldRect  # with the global offset applied
    font_name: str
    font_size: float
    rtl: bool = False

    @property
    def align_right(self):
        return self.rtl or self.rect.alignment == "Right"


class ChequeRenderer:
    """
    Lays out and draws cheque data for one template.

    :param template: ChequeTemplate
    :param test_mode: Draw the alignment overlay (page border, field boxes)
    :param measure: TextMeasurer for fitting text into the fields
    :param font_resolver: Callable(family, arabic=...) -> ReportLab font name
    """

    def __init__(self, template, test_mode=False, measure=None, font_resolver=resolve_font):
        self.template = template
        self.test_mode = test_mode
        self.fitter = TextFitter(measure)
        self.font_resolver = font_resolver

    def _font(self, rtl):
        fonts = self.template.fonts
        if rtl:
            return self.font_resolver(fonts.arabic_family, arabic=True)
        return self.font_resolver(fonts.latin_family, arabic=False)

    def _simple_field(self, field_id, text):
        rect = self.template.placed_field(field_id)
        if rect is None or not text:
            return None
        rtl = contains_arabic(text)
        font_name = self._font(rtl)
        font_size = self._single_line_size(text, rect, font_name)
        return TextPlacement(field_id, text, rect, font_name, font_size, rtl)

    def _single_line_size(self, text, rect, font_name):
        """Largest font size in the template range at which text fits rect."""
        fonts = self.template.fonts
        for font_size in iter_font_sizes(fonts.min_size, fonts.max_size):
            if text_fits(text, rect.region(), self.fitter.measure, font_name, font_size):
                return font_size
        _LOGGER.warning(f"'{text}' does not fit its field at {fonts.min_size}pt")
        return fonts.min_size

    def layout_amount_in_words(self, data):
        """
        Fit the amount in words into the two amount lines.

        :return: (list of TextPlacement, FitResult) or ([], None) if the
                 template lacks one of the lines
        """
        line1 = self.template.placed_field(chequeformats.AMOUNT_WORDS_L1)
        line2 = self.template.placed_field(chequeformats.AMOUNT_WORDS_L2)
        if line1 is None or line2 is None:
            _LOGGER.warning("Template has no amount-in-words lines; skipping amount in words")
            return [], None

        converter = create_converter(data.language)
        phrase = converter.convert(data.amount)
        font_name = self._font(converter.is_rtl)
        fonts = self.template.fonts

        result = self.fitter.fit(
            phrase,
            line1.region(),
            line2.region(),
            font_name,
            min_font_size=fonts.min_size,
            max_font_size=fonts.max_size,
            is_rtl=converter.is_rtl,
        )
        _LOGGER.info(
            f"Amount in words fitted in {len(result.lines)} line(s) at {result.font_size}pt "
            f"(success={result.success})"
        )

        placements = []
        for field_id, rect, text in zip(
            (chequeformats.AMOUNT_WORDS_L1, chequeformats.AMOUNT_WORDS_L2),
            (line1, line2),
            result.lines,
        ):
            if text:
                placements.append(
                    TextPlacement(field_id, text, rect, font_name, result.font_size, converter.is_rtl)
                )
        return placements, result

    def layout(self, data):
        """
        Compute every text placement of the cheque.

        :param data: ChequeData
        :return: List of TextPlacement
        """
        placements = []
        for field_id, text in (
            (chequeformats.AMOUNT_NUMERIC, data.formatted_amount),
            (chequeformats.BENEFICIARY, data.beneficiary),
            (chequeformats.PLACE, data.place),
            (chequeformats.DATE, data.formatted_date),
        ):
            placement = self._simple_field(field_id, text)
            if placement is not None:
                placements.append(placement)

        amount_placements, _ = self.layout_amount_in_words(data)
        placements.extend(amount_placements)
        return placements

    def _page_height(self):
        return mm_to_points(self.template.cheque_size_mm[1])

    def draw_placement(self, c, placement):
        rect = placement.rect
        top = self._page_height() - mm_to_points(rect.y)
        baseline = top - pdfmetrics.getAscent(placement.font_name, placement.font_size)
        text = process_arabic_text(placement.text) if placement.rtl else placement.text

        c.setFont(placement.font_name, placement.font_size)
        c.setFillColor(colors.black)
        if placement.align_right:
            c.drawRightString(mm_to_points(rect.x + rect.w), baseline, text)
        else:
            c.drawString(mm_to_points(rect.x), baseline, text)

    def draw_debug_overlay(self, c):
        """Draw the page border and every field box with a crosshair and label."""
        width, height = self.template.cheque_size_mm
        c.setLineWidth(OVERLAY_LINE_WIDTH)
        c.setStrokeColor(colors.gray)
        c.rect(0, 0, mm_to_points(width), mm_to_points(height), stroke=1, fill=0)

        page_height = self._page_height()
        for field_id in self.template.fields:
            rect = self.template.placed_field(field_id)
            color = FIELD_COLORS.get(field_id, colors.gray)
            left = mm_to_points(rect.x)
            bottom = page_height - mm_to_points(rect.y + rect.h)

            c.setStrokeColor(color)
            c.setLineWidth(OVERLAY_LINE_WIDTH)
            c.rect(left, bottom, mm_to_points(rect.w), mm_to_points(rect.h), stroke=1, fill=0)

            center_x = left + mm_to_points(rect.w) / 2
            center_y = bottom + mm_to_points(rect.h) / 2
            arm = mm_to_points(CROSSHAIR_SIZE_MM) / 2
            c.setLineWidth(0.3)
            c.line(center_x - arm, center_y, center_x + arm, center_y)
            c.line(center_x, center_y - arm, center_x, center_y + arm)

            c.setFillColor(color)
            c.setFont(LABEL_FONT, LABEL_FONT_SIZE)
            c.drawString(left, bottom + mm_to_points(rect.h) + mm_to_points(1), field_id)

    def draw(self, c, data):
        """
        Draw the cheque on a canvas whose page is the cheque size.

        :return: List of TextPlacement that were drawn
        """
        if self.test_mode:
            self.draw_debug_overlay(c)

        placements = self.layout(data)
        for placement in placements:
            self.draw_placement(c, placement)
        return placements

    def render_pdf(self, data, output_path):
        """
        Render the cheque to a one-page PDF of the cheque's size.

        :param data: ChequeData
        :param output_path: Path or file-like object to write to
        :return: output_path
        """
        width, height = self.template.cheque_size_mm
        c = canvas.Canvas(output_path, pagesize=(mm_to_points(width), mm_to_points(height)))
        c.setTitle("Test d'alignement" if self.test_mode else "Impression de chèque")
        self.draw(c, data)
        c.showPage()
        c.save()
        _LOGGER.info(f"Rendered cheque for {data.formatted_amount} to {output_path}")
        return output_path


def merge_onto_background(overlay_pdf, background_pdf, output_pdf_path):
    """
    Stamp the rendered cheque onto the first page of a scanned cheque, to
    check the alignment before printing on real cheques.

    :param overlay_pdf: Path or binary stream of the rendered cheque
    :param background_pdf: Path or binary stream of the scanned cheque
    :param output_pdf_path: Path of the merged PDF
    """
    background = PdfReader(background_pdf).pages[0]
    overlay = PdfReader(overlay_pdf).pages[0]
    background.merge_page(overlay)

    writer = PdfWriter()
    writer.add_page(background)
    with open(output_pdf_path, "wb") as f:
        writer.write(f)
    return output_pdf_path
