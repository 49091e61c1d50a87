"""
VITAE - Versatile Internationalized Typesetting of Academic and Employment records

Renders a structured resume document into LaTeX, HTML or Markdown under a
chosen visual template and locale.

Architecture:
- Localization Context: Translation tables and term resolution per locale
- Richtext Context: Stored rich-text documents and per-engine code generation
- Computing Context: Derived display fields (dates, joined lists, addresses, URLs)
- Rendering Context: Template/engine dispatch and document composition
"""

from loguru import logger

__version__ = "0.1.0"

# Library stays silent until a caller opts in through vitae.utils.logger.setup_logger
logger.disable("vitae")
