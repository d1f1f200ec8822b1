"""python-docx helpers shared by the document exporter."""

from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Pt, RGBColor

FONT_NAME = "Calibri"
INFO_SIZE = 12
BODY_SIZE = 11
LINK_COLOR = RGBColor(0x05, 0x63, 0xC1)

HYPERLINK_REL = "http://schemas.openxmlformats.org/officeDocument/2006/relationships/hyperlink"


def style_run(run, size=BODY_SIZE, bold=False):
    run.font.name = FONT_NAME
    run.font.size = Pt(size)
    run.bold = bold
    return run


def add_text_run(paragraph, text, size=BODY_SIZE, bold=False):
    return style_run(paragraph.add_run(text), size=size, bold=bold)


def add_multiline_run(paragraph, text, size=BODY_SIZE, bold=False):
    """Add ``text`` as one run, turning newlines into explicit line breaks."""
    run = style_run(paragraph.add_run(), size=size, bold=bold)
    for index, line in enumerate((text or "").split("\n")):
        if index > 0:
            run.add_break()
        run.add_text(line)
    return run


def _hyperlink_element(paragraph, url):
    r_id = paragraph.part.relate_to(url, HYPERLINK_REL, is_external=True)
    hyperlink = OxmlElement("w:hyperlink")
    hyperlink.set(qn("r:id"), r_id)
    return hyperlink


def add_hyperlink(paragraph, url, text, size=BODY_SIZE):
    """Append a clickable, blue underlined link to ``paragraph``."""
    hyperlink = _hyperlink_element(paragraph, url)

    new_run = OxmlElement("w:r")
    rPr = OxmlElement("w:rPr")

    fonts = OxmlElement("w:rFonts")
    fonts.set(qn("w:ascii"), FONT_NAME)
    fonts.set(qn("w:hAnsi"), FONT_NAME)
    rPr.append(fonts)

    color = OxmlElement("w:color")
    color.set(qn("w:val"), str(LINK_COLOR))
    rPr.append(color)

    underline = OxmlElement("w:u")
    underline.set(qn("w:val"), "single")
    rPr.append(underline)

    half_points = OxmlElement("w:sz")
    half_points.set(qn("w:val"), str(size * 2))
    rPr.append(half_points)

    new_run.append(rPr)
    text_el = OxmlElement("w:t")
    text_el.text = text
    text_el.set(qn("xml:space"), "preserve")
    new_run.append(text_el)

    hyperlink.append(new_run)
    paragraph._p.append(hyperlink)
    return hyperlink


def wrap_run_in_hyperlink(paragraph, run, url):
    """Move an existing run (e.g. a picture) inside a hyperlink to ``url``."""
    hyperlink = _hyperlink_element(paragraph, url)
    hyperlink.append(run._r)
    paragraph._p.append(hyperlink)
    return hyperlink


def format_paragraph(paragraph, alignment=WD_ALIGN_PARAGRAPH.LEFT, spacing_after=0, spacing_before=0):
    pf = paragraph.paragraph_format
    pf.alignment = alignment
    pf.space_after = Pt(spacing_after)
    pf.space_before = Pt(spacing_before)
