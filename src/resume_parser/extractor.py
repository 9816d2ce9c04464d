
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
Entry point of the extraction pipeline.

Turns extracted document text (and optionally its hyperlinks) into a
ResumeData record. Input types are checked here and nowhere else; the
extractors themselves never fail on text.
"""

import logging
from typing import Iterable, List, Optional

from resume_parser.contact import extract_contact_info
from resume_parser.education import extract_education
from resume_parser.experience import extract_experience
from resume_parser.models import RawDocument, ResumeData
from resume_parser.skills import extract_skills
from resume_parser.summary import extract_summary
from resume_parser.text_utils import normalize_text

logger = logging.getLogger(__name__)

class InvalidInputError(TypeError):
    """Raised when the pipeline is handed something other than text."""

def _validate_links(links: Optional[Iterable[str]]) -> List[str]:
    if links is None:
        return []
    if isinstance(links, (str, bytes)):
        raise InvalidInputError("links must be a sequence of URL strings, not a single string")
    try:
        links = list(links)
    except TypeError as e:
        raise InvalidInputError(f"links must be iterable, got {type(links).__name__}") from e
    for link in links:
        if not isinstance(link, str):
            raise InvalidInputError(f"links must contain strings, got {type(link).__name__}")
    return links

def extract_resume_data(text: str, links: Optional[Iterable[str]] = None) -> ResumeData:
    """
    Runs every extractor over the normalized text.

    Args:
        text: Plain text of the résumé.
        links: Hyperlinks embedded in the source document, if any.

    Returns:
        ResumeData with missing fields left as None or empty.

    Raises:
        InvalidInputError: text is not a str or links is not a collection of str.
    """
    if not isinstance(text, str):
        raise InvalidInputError(f"text must be a str, got {type(text).__name__}")
    links = _validate_links(links)

    cleaned_text = normalize_text(text)
    logger.debug(f"Normalized {len(text)} chars to {len(cleaned_text)} chars")

    return ResumeData(
        contact=extract_contact_info(cleaned_text, links),
        skills=extract_skills(cleaned_text),
        experience=extract_experience(cleaned_text),
        education=extract_education(cleaned_text),
        summary=extract_summary(cleaned_text),
    )

def extract_from_document(document: RawDocument) -> ResumeData:
    return extract_resume_data(document.text, document.links)

async def extract_resume_data_async(text: str, links: Optional[Iterable[str]] = None) -> ResumeData:
    """Awaitable form for async hosts. Runs inline, there is nothing to await."""
    return extract_resume_data(text, links)
