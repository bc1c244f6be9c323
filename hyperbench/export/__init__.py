"""Exporters that write benchmark results as Markdown, AsciiDoc, org-mode tables, CSV or JSON."""