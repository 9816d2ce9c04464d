
# Copyright 2026 Justin Cook
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Handles ingestion of résumé documents (PDF, plain text).
"""

import os
import logging
from typing import Dict, List

from pypdf import PdfReader

from resume_parser.models import PdfDocument
from resume_parser.settings import get_max_file_size
from resume_parser.text_utils import format_file_size

logger = logging.getLogger(__name__)

class DocumentError(Exception):
    """The document could not be read (missing, too large, wrong type or corrupt)."""

def _resolve(obj):
    """Follows pypdf indirect references; plain values pass through."""
    return obj.get_object() if hasattr(obj, "get_object") else obj

def _check_file(file_path: str, extensions: tuple) -> int:
    if not os.path.isfile(file_path):
        raise DocumentError(f"File not found: {file_path}")

    if not file_path.lower().endswith(extensions):
        raise DocumentError(f"Unsupported file type: {os.path.basename(file_path)}. Only {', '.join(extensions)} files are allowed")

    size = os.path.getsize(file_path)
    max_size = get_max_file_size()
    if size > max_size:
        raise DocumentError(f"File too large: {format_file_size(size)} (limit {format_file_size(max_size)})")
    return size

def _page_links(page) -> List[str]:
    """URIs of the link annotations on a page, in annotation order."""
    links = []
    if "/Annots" not in page:
        return links

    for annot_ref in _resolve(page["/Annots"]) or []:
        annot = _resolve(annot_ref)
        if annot.get("/Subtype") != "/Link" or "/A" not in annot:
            continue
        action = _resolve(annot["/A"])
        uri = action.get("/URI")
        if uri:
            links.append(str(_resolve(uri)))
    return links

def _document_info(reader: PdfReader) -> Dict[str, str]:
    metadata = reader.metadata or {}
    return {str(key).lstrip("/"): str(value) for key, value in metadata.items()}

def read_pdf(file_path: str) -> PdfDocument:
    """
    Extracts text, hyperlinks, page count and metadata from a PDF file.

    Raises:
        DocumentError: the file is missing, too large, not a PDF or unreadable.
    """
    _check_file(file_path, (".pdf",))

    try:
        reader = PdfReader(file_path)
        pages_text = []
        links: List[str] = []
        for page in reader.pages:
            pages_text.append(page.extract_text() or "")
            links.extend(_page_links(page))
        info = _document_info(reader)
    except Exception as e:
        logger.error(f"Error reading PDF {file_path}: {e}")
        raise DocumentError(f"Failed to parse PDF: {e}") from e

    logger.info(f"Read {len(pages_text)} page(s) and {len(links)} link(s) from {os.path.basename(file_path)}")
    return PdfDocument(
        text="\n\n".join(pages_text).strip(),
        links=links,
        num_pages=len(pages_text),
        info=info,
    )

def read_text(file_path: str) -> PdfDocument:
    """
    Loads an already-extracted plain text résumé.
    Treated as a single page without hyperlinks.
    """
    _check_file(file_path, (".txt", ".text", ".md"))
    try:
        with open(file_path, "r", encoding="utf-8", errors="replace") as f:
            text = f.read()
    except OSError as e:
        logger.error(f"Error reading {file_path}: {e}")
        raise DocumentError(f"Failed to read text file: {e}") from e

    return PdfDocument(text=text, links=[], num_pages=1, info={})

def read_document(file_path: str) -> PdfDocument:
    """Dispatches on the file extension."""
    if file_path.lower().endswith(".pdf"):
        return read_pdf(file_path)
    return read_text(file_path)
