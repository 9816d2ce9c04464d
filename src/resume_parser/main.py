
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
Main entry point for the Resume Parser CLI.
"""

import argparse
import json
import os
import sys
import logging
from datetime import datetime, timezone

from rich.console import Console
from rich.logging import RichHandler

from resume_parser.extractor import extract_from_document
from resume_parser.ingest import DocumentError, read_document
from resume_parser.models import PdfDocument, RawDocument, ResumeData
from resume_parser.settings import get_log_dir, get_max_file_size, set_max_file_size_override
from resume_parser.text_utils import format_file_size

SERVICE_NAME = "Resume Parser"
VERSION = "1.0.0"
FEATURES = [
    "PDF text extraction",
    "Contact information parsing",
    "Skills detection",
    "Experience extraction",
    "Education parsing",
    "Summary extraction",
]
SUPPORTED_FORMATS = ["PDF", "TXT"]

logger = logging.getLogger(__name__)

def setup_logging(verbosity: int, quiet: bool = False):
    """
    Configures logging:
    - File: <log dir>/resume_parser.log (DEBUG)
    - Console (stderr): Default=WARNING, -q=ERROR, -v=INFO, -vv=DEBUG
    """
    log_dir = get_log_dir()
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "resume_parser.log"

    # Root Logger
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    file_handler = logging.FileHandler(log_file)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    root.addHandler(file_handler)

    if quiet:
        level = logging.ERROR
    elif verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    # stdout carries the JSON report, so logs go to stderr
    console_handler = RichHandler(console=Console(stderr=True), show_path=False)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    root.addHandler(console_handler)

    # pypdf warns about every malformed object it recovers from
    if verbosity < 2:
        logging.getLogger("pypdf").setLevel(logging.ERROR)

def build_report(file_path: str, document: PdfDocument, extracted: ResumeData) -> dict:
    """JSON envelope around the extracted data and the document metadata."""
    file_size = os.path.getsize(file_path)
    return {
        "success": True,
        "message": "Resume parsed successfully",
        "originalFilename": os.path.basename(file_path),
        "fileSize": file_size,
        "fileSizeFormatted": format_file_size(file_size),
        "parsedAt": datetime.now(timezone.utc).isoformat(),
        "extractedData": extracted.to_dict(),
        "metadata": {
            "totalPages": document.num_pages,
            "pdfInfo": dict(document.info),
            "textLength": len(document.text),
        },
    }

def build_stats() -> dict:
    return {
        "success": True,
        "service": SERVICE_NAME,
        "version": VERSION,
        "features": list(FEATURES),
        "supportedFormats": list(SUPPORTED_FORMATS),
        "maxFileSize": format_file_size(get_max_file_size()),
    }

def _write_output(payload: dict, output: str | None):
    rendered = json.dumps(payload, indent=2, ensure_ascii=False)
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(rendered + "\n")
        logger.info(f"Wrote report to: {output}")
    else:
        sys.stdout.write(rendered + "\n")

def main(argv=None):
    try:
        return _main_cli(argv)
    except KeyboardInterrupt:
        # Use stderr so it captures attention even if stdout is redirected
        sys.stderr.write("\n\033[31m[-] Cancelled by user\033[0m\n")
        sys.exit(130)

def _main_cli(argv=None):
    """
    Parses arguments, reads the résumé, runs the extraction pipeline and
    prints the JSON report.
    """
    parser = argparse.ArgumentParser(description="Extract structured data from PDF résumés")
    parser.add_argument("file", nargs="?", help="Path to the résumé (PDF or plain text)")
    parser.add_argument("-o", "--output", help="Write the JSON report to this file instead of stdout")
    parser.add_argument("--stats", action="store_true", help="Print parser capabilities and exit")
    parser.add_argument("--no-links", action="store_true", help="Ignore hyperlinks embedded in the document")
    parser.add_argument("--max-file-size", type=int, help="Largest accepted file size in bytes (default: 10 MB)")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase output verbosity (-v=INFO, -vv=DEBUG)")
    parser.add_argument("-q", "--quiet", action="store_true", help="Suppress status output (ERROR only)")

    args = parser.parse_args(argv)

    setup_logging(args.verbose, quiet=args.quiet)

    if args.max_file_size is not None:
        try:
            set_max_file_size_override(args.max_file_size)
        except ValueError as e:
            parser.error(str(e))

    if args.stats:
        _write_output(build_stats(), args.output)
        return 0

    if not args.file:
        parser.error("A résumé file is required unless --stats is used.")

    return _run_main_logic(args)

def _run_main_logic(args) -> int:
    logger.info(f"--- {SERVICE_NAME} ---")
    logger.info(f"Reading résumé from: {args.file}")

    try:
        document = read_document(args.file)
    except DocumentError as e:
        logger.error(str(e))
        return 1

    if not document.text.strip():
        logger.warning("No text could be extracted. Scanned PDFs need OCR first.")

    raw = document.as_raw()
    if args.no_links:
        raw = RawDocument(text=raw.text)
    extracted = extract_from_document(raw)

    logger.info(f"    > Skills found: {extracted.skills.count}")
    logger.info(f"    > Jobs found: {extracted.experience.count}")
    logger.info(f"    > Credentials found: {extracted.education.count}")

    _write_output(build_report(args.file, document, extracted), args.output)
    logger.info("Done!")
    return 0

if __name__ == "__main__":
    sys.exit(main())
