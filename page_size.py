"""
Unit conversions between millimetres and PDF points, plus page size lookup
for rendered cheques.
"""

from pypdf import PdfReader

MM_PER_INCH = 25.4
POINTS_PER_INCH = 72.0


def mm_to_points(mm):
    """Convert millimeters to points (PDF units)"""
    return mm / MM_PER_INCH * POINTS_PER_INCH


def points_to_mm(points):
    """Convert points to millimeters"""
    return points / POINTS_PER_INCH * MM_PER_INCH


def get_page_size_mm(pdf_path, page_number=0):
    """
    Get page size in millimeters for a specific page.

    Args:
        pdf_path: Path to the PDF file
        page_number: Page number (0-based)

    Returns:
        tuple: (width_mm, height_mm)
    """
    reader = PdfReader(pdf_path)
    if page_number >= len(reader.pages):
        raise IndexError(f"Page {page_number} does not exist")

    box = reader.pages[page_number].mediabox
    return (points_to_mm(float(box.width)), points_to_mm(float(box.height)))
