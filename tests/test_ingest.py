
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

import unittest
from unittest.mock import patch, MagicMock
import os
import shutil
import tempfile

from resume_parser import ingest, settings
from resume_parser.ingest import DocumentError

class FakeRef:
    """Stands in for a pypdf IndirectObject."""
    def __init__(self, target):
        self.target = target

    def get_object(self):
        return self.target

class FakePage(dict):
    def __init__(self, text, annots=None):
        super().__init__()
        self.text = text
        if annots is not None:
            self["/Annots"] = annots

    def extract_text(self):
        return self.text

class TestIngest(unittest.TestCase):
    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        settings._max_file_size_override = None
        self.pdf_path = self._write("resume.pdf", b"%PDF-1.4 fake")

    def tearDown(self):
        shutil.rmtree(self.test_dir)
        settings._max_file_size_override = None

    def _write(self, name, content: bytes) -> str:
        path = os.path.join(self.test_dir, name)
        with open(path, "wb") as f:
            f.write(content)
        return path

    @patch('resume_parser.ingest.PdfReader')
    def test_read_pdf(self, mock_reader_class):
        link = {"/Subtype": "/Link", "/A": {"/URI": "https://github.com/janedoe"}}
        widget = {"/Subtype": "/Widget"}
        mock_reader = MagicMock()
        mock_reader.pages = [
            FakePage("Jane Doe\nEngineer", annots=[FakeRef(link), FakeRef(widget)]),
            FakePage(None),
        ]
        mock_reader.metadata = {"/Title": "Jane Doe CV", "/Producer": "Writer"}
        mock_reader_class.return_value = mock_reader

        document = ingest.read_pdf(self.pdf_path)

        mock_reader_class.assert_called_once_with(self.pdf_path)
        self.assertEqual(document.text, "Jane Doe\nEngineer")
        self.assertEqual(document.links, ("https://github.com/janedoe",))
        self.assertEqual(document.num_pages, 2)
        self.assertEqual(document.info, {"Title": "Jane Doe CV", "Producer": "Writer"})

    @patch('resume_parser.ingest.PdfReader')
    def test_read_pdf_without_metadata(self, mock_reader_class):
        mock_reader = MagicMock()
        mock_reader.pages = [FakePage("Text")]
        mock_reader.metadata = None
        mock_reader_class.return_value = mock_reader

        document = ingest.read_pdf(self.pdf_path)
        self.assertEqual(document.info, {})
        self.assertEqual(document.links, ())

    @patch('resume_parser.ingest.PdfReader')
    def test_corrupt_pdf(self, mock_reader_class):
        mock_reader_class.side_effect = ValueError("EOF marker not found")
        with self.assertRaises(DocumentError) as ctx:
            ingest.read_pdf(self.pdf_path)
        self.assertIn("Failed to parse PDF", str(ctx.exception))

    def test_missing_file(self):
        with self.assertRaises(DocumentError):
            ingest.read_pdf(os.path.join(self.test_dir, "nonexistent.pdf"))

    def test_wrong_extension(self):
        path = self._write("resume.docx", b"PK")
        with self.assertRaises(DocumentError):
            ingest.read_pdf(path)

    def test_file_too_large(self):
        with patch.dict(os.environ, {"RESUME_PARSER_MAX_FILE_SIZE": "5"}, clear=True):
            with self.assertRaises(DocumentError) as ctx:
                ingest.read_pdf(self.pdf_path)
        self.assertIn("too large", str(ctx.exception))

    def test_read_text(self):
        path = self._write("resume.txt", "Jane Doe\nSummary\nEngineer".encode("utf-8"))
        document = ingest.read_text(path)
        self.assertEqual(document.text, "Jane Doe\nSummary\nEngineer")
        self.assertEqual(document.num_pages, 1)
        self.assertEqual(document.links, ())

    @patch('resume_parser.ingest.read_pdf')
    def test_read_document_dispatch(self, mock_read_pdf):
        ingest.read_document(self.pdf_path)
        mock_read_pdf.assert_called_once_with(self.pdf_path)

        path = self._write("resume.txt", b"Jane Doe")
        self.assertEqual(ingest.read_document(path).text, "Jane Doe")

if __name__ == '__main__':
    unittest.main()
