"""Output document assembly and persistence."""

from docusaurus_scraper.storage.document import assemble_document, write_document

__all__ = ["assemble_document", "write_document"]
