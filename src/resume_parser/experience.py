
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
Work experience extraction.
"""

import logging
from typing import List, Optional, Sequence

from resume_parser.models import ExperienceSection, JobEntry
from resume_parser.text_utils import YEAR_RE, contains_any, extract_section_lines, find_years

logger = logging.getLogger(__name__)

EXPERIENCE_KEYWORDS = (
    "experience", "work history", "employment", "career", "professional experience",
    "work experience", "employment history",
)
EXPERIENCE_STOP_KEYWORDS = ("education", "skills", "projects", "certifications")
COMPANY_INDICATORS = ("inc", "corp", "llc", "ltd", "company", "technologies", "solutions")

def is_job_header(line: str) -> bool:
    """A dated line or one naming a company opens a new job."""
    return bool(YEAR_RE.search(line)) or contains_any(line, COMPANY_INDICATORS)

def parse_duration(line: str) -> Optional[str]:
    years = find_years(line)
    return " - ".join(years) if years else None

def parse_job_entries(lines: Sequence[str]) -> List[JobEntry]:
    """
    Splits experience lines into jobs.
    Lines before the first header have no job to attach to and are dropped.
    """
    jobs: List[JobEntry] = []
    header: Optional[str] = None
    description: List[str] = []

    def close_current():
        if header is not None:
            jobs.append(JobEntry(raw_line=header, duration=parse_duration(header), description=tuple(description)))

    for line in lines:
        if is_job_header(line):
            close_current()
            header = line
            description = []
        elif header is not None and line.strip():
            description.append(line.strip())

    close_current()
    return jobs

def extract_experience(text: str) -> ExperienceSection:
    raw = extract_section_lines(text, EXPERIENCE_KEYWORDS, EXPERIENCE_STOP_KEYWORDS)
    jobs = parse_job_entries(raw)
    logger.debug(f"Experience section: {len(raw)} line(s), {len(jobs)} job(s)")
    return ExperienceSection(raw=tuple(raw), parsed=tuple(jobs))
