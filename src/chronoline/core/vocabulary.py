"""Property URIs used as default predicates for source objects."""

from __future__ import annotations

from typing import Final

DC: Final[str] = "http://purl.org/dc/elements/1.1/"
DCTERMS: Final[str] = "http://purl.org/dc/terms/"
RDFS: Final[str] = "http://www.w3.org/2000/01/rdf-schema#"

DC_DATE: Final[str] = DC + "date"
DC_TITLE: Final[str] = DC + "title"
DCTERMS_ABSTRACT: Final[str] = DCTERMS + "abstract"
RDFS_LABEL: Final[str] = RDFS + "label"

__all__ = ["DC", "DCTERMS", "DCTERMS_ABSTRACT", "DC_DATE", "DC_TITLE", "RDFS", "RDFS_LABEL"]
