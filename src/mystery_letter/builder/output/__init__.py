"""
Module: builder.output

Purpose:
    PDF rendering for the letter builder.
    Converts a DocumentPlan to a multi-page PDF using ReportLab.

Key Functions:
    - render_to_pdf(): Render document to PDF

Dependencies:
    - reportlab: PDF generation
    - PIL: Image handling

Used By:
    - builder.controller: Pipeline orchestration
"""

from .renderer import render_to_pdf

__all__ = [
    "render_to_pdf",
]
