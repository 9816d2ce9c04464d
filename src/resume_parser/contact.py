
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
Contact information extraction (email, phone, profile links, website, name).

Every lookup is independent and returns None when nothing matches.
Document hyperlinks are only consulted for fields the text left empty.
"""

import logging
import re
from typing import List, Optional, Sequence, Tuple

from resume_parser.models import ContactInfo
from resume_parser.text_utils import YEAR_RE

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")

# Tried in priority order, first pattern with a match wins
PHONE_PATTERNS: Tuple[Tuple[int, re.Pattern], ...] = (
    (1, re.compile(r"(?:\+?\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")),
    (2, re.compile(r"\+?\d{1,3}[-.\s]?\d{1,4}[-.\s]?\d{1,4}[-.\s]?\d{1,9}")),
)
MIN_PHONE_DIGITS = 7

LINKEDIN_RE = re.compile(r"linkedin\.com/in/[\w-]+", re.IGNORECASE)
GITHUB_RE = re.compile(r"github\.com/[\w-]+", re.IGNORECASE)
WEBSITE_RE = re.compile(r"(?:https?://)?(?:www\.)?[\w-]+\.[a-z]{2,}(?:/[\w-]*)?", re.IGNORECASE)
WEBSITE_EXCLUDED_HOSTS = ("linkedin.com", "github.com", "facebook.com", "twitter.com")

NAME_RE = re.compile(r"^[A-Z][a-z]+(?: [A-Z][a-z]+){1,3}$")
NAME_SKIP_KEYWORDS = ("resume", "cv", "curriculum vitae", "phone", "email", "address")
NAME_SCAN_LINES = 5
NAME_MAX_LENGTH = 50

def extract_email(text: str) -> Optional[str]:
    match = EMAIL_RE.search(text)
    return match.group(0) if match else None

def _digit_count(value: str) -> int:
    return sum(ch.isdigit() for ch in value)

def extract_phone(text: str) -> Optional[str]:
    """
    US-style numbers first, then a looser international digit grouping.
    Matches with fewer than MIN_PHONE_DIGITS digits (years, zip codes)
    are not phone numbers and are skipped, as are runs of year tokens
    such as "2012-2016".
    """
    for _, pattern in sorted(PHONE_PATTERNS, key=lambda entry: entry[0]):
        for match in pattern.finditer(text):
            candidate = match.group(0).strip()
            if _digit_count(candidate) < MIN_PHONE_DIGITS:
                continue
            if _digit_count(YEAR_RE.sub("", candidate)) == 0:
                continue
            return candidate
    return None

def extract_linkedin(text: str) -> Optional[str]:
    match = LINKEDIN_RE.search(text)
    return f"https://{match.group(0)}" if match else None

def extract_github(text: str) -> Optional[str]:
    match = GITHUB_RE.search(text)
    return f"https://{match.group(0)}" if match else None

def _is_personal_site(candidate: str) -> bool:
    lowered = candidate.lower()
    if "@" in lowered:
        return False
    return not any(host in lowered for host in WEBSITE_EXCLUDED_HOSTS)

def extract_website(text: str) -> Optional[str]:
    # Blank out email addresses so their local part and domain are never
    # picked up as a site
    text = EMAIL_RE.sub(" ", text)
    for match in WEBSITE_RE.finditer(text):
        candidate = match.group(0)
        if _is_personal_site(candidate):
            return candidate
    return None

def extract_name(text: str) -> Optional[str]:
    """Best guess at the candidate's name from the top of the document."""
    lines = [line.strip() for line in text.split("\n") if line.strip()]

    for line in lines[:NAME_SCAN_LINES]:
        lower_line = line.lower()
        if any(keyword in lower_line for keyword in NAME_SKIP_KEYWORDS):
            continue
        if NAME_RE.match(line) and len(line) < NAME_MAX_LENGTH:
            return line

    return None

def _links_with_prefix(links: Sequence[str], prefix: str) -> List[str]:
    return [link[len(prefix):] for link in links if link.lower().startswith(prefix)]

def _first_http_link(links: Sequence[str]) -> Optional[str]:
    for link in links:
        if not link.lower().startswith(("http://", "https://")):
            continue
        # The scheme alone is not a site
        if WEBSITE_RE.match(link) and _is_personal_site(link):
            return link
    return None

def extract_contact_info(text: str, links: Optional[Sequence[str]] = None) -> ContactInfo:
    """
    Pulls contact details out of normalized résumé text.

    Args:
        text: Normalized document text.
        links: Hyperlinks found in the source document, in document order.
            Used only to fill fields the text did not provide.
    """
    email = extract_email(text)
    phone = extract_phone(text)
    linkedin = extract_linkedin(text)
    github = extract_github(text)
    website = extract_website(text)
    name = extract_name(text)

    links = [link.strip() for link in (links or []) if link and link.strip()]
    if links:
        if email is None:
            mailtos = [m for m in _links_with_prefix(links, "mailto:") if EMAIL_RE.search(m)]
            email = EMAIL_RE.search(mailtos[0]).group(0) if mailtos else None
        if phone is None:
            phones = [extract_phone(value) for value in _links_with_prefix(links, "tel:")]
            phone = next((value for value in phones if value), None)
        joined = "\n".join(links)
        if linkedin is None:
            linkedin = extract_linkedin(joined)
        if github is None:
            github = extract_github(joined)
        if website is None:
            website = _first_http_link(links)
        logger.debug(f"Resolved contact fields with {len(links)} document link(s)")

    return ContactInfo(
        name=name,
        email=email,
        phone=phone,
        linkedin=linkedin,
        github=github,
        website=website,
    )
