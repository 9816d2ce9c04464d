
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
Education extraction.
"""

import logging
from typing import List, Optional, Sequence

from resume_parser.models import EducationEntry, EducationSection
from resume_parser.text_utils import contains_any, extract_section_lines, find_years

logger = logging.getLogger(__name__)

EDUCATION_KEYWORDS = (
    "education", "academic", "university", "college", "degree", "bachelor",
    "master", "phd", "doctorate", "certification", "diploma",
)
EDUCATION_STOP_KEYWORDS = ("experience", "skills", "projects")
DEGREE_KEYWORDS = ("bachelor", "master", "phd", "doctorate", "diploma", "certificate")

def extract_year(line: str) -> Optional[str]:
    """The latest year mentioned on the line (the last one written)."""
    years = find_years(line)
    return years[-1] if years else None

def parse_education_entries(lines: Sequence[str]) -> List[EducationEntry]:
    return [
        EducationEntry(degree=line.strip(), raw_line=line, year=extract_year(line))
        for line in lines
        if contains_any(line, DEGREE_KEYWORDS)
    ]

def extract_education(text: str) -> EducationSection:
    raw = extract_section_lines(text, EDUCATION_KEYWORDS, EDUCATION_STOP_KEYWORDS)
    entries = parse_education_entries(raw)
    logger.debug(f"Education section: {len(raw)} line(s), {len(entries)} credential(s)")
    return EducationSection(raw=tuple(raw), parsed=tuple(entries))
