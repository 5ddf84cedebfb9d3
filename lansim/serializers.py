from __future__ import annotations
import io
from typing import TextIO

from .nodes import LabelFormat, Node
from .topology import walk_ring

XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n\n<network>'
HTML_HEADER = "<HTML>\n<HEAD>\n<TITLE>LAN Simulation</TITLE>\n</HEAD>\n<BODY>\n<H1>LAN SIMULATION</H1>"
HTML_FOOTER = "\n\t<LI>...</LI>\n</UL>\n\n</BODY>\n</HTML>\n"

def print_on(start: Node, buf: TextIO):
    for node in walk_ring(start):
        node.render_label(buf, LabelFormat.TEXT)
        buf.write(" -> ")
    buf.write(" ... ")

def print_xml_on(start: Node, buf: TextIO):
    buf.write(XML_HEADER)
    for node in walk_ring(start):
        buf.write("\n\t")
        node.render_label(buf, LabelFormat.XML)
    buf.write("\n</network>")

def print_html_on(start: Node, buf: TextIO):
    buf.write(HTML_HEADER)
    buf.write("\n\n<UL>")
    for node in walk_ring(start):
        buf.write("\n\t<LI> ")
        node.render_label(buf, LabelFormat.HTML)
        buf.write(" </LI>")
    buf.write(HTML_FOOTER)

def _render(fn, start: Node) -> str:
    buf = io.StringIO()
    fn(start, buf)
    return buf.getvalue()

def to_text(start: Node) -> str:
    return _render(print_on, start)

def to_xml(start: Node) -> str:
    return _render(print_xml_on, start)

def to_html(start: Node) -> str:
    return _render(print_html_on, start)

RENDERERS = {
    LabelFormat.TEXT: to_text,
    LabelFormat.HTML: to_html,
    LabelFormat.XML: to_xml,
}
