
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
Data models for the Resume Parser.

Every record is created fresh per extraction and handed to the caller.
Records are frozen and their sequences are stored as tuples (mappings as
read-only proxies), so a result cannot be modified after it is built.
``to_dict()`` produces the JSON shape used by the CLI report.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

def _freeze(record, name: str) -> None:
    object.__setattr__(record, name, tuple(getattr(record, name)))

@dataclass(frozen=True)
class RawDocument:
    """Extracted document text plus the hyperlinks found in it."""
    text: str
    links: Tuple[str, ...] = ()

    def __post_init__(self):
        _freeze(self, "links")

@dataclass(frozen=True)
class PdfDocument:
    """Everything the PDF reader hands back for one file."""
    text: str
    links: Tuple[str, ...] = ()
    num_pages: int = 0
    info: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        _freeze(self, "links")
        object.__setattr__(self, "info", MappingProxyType(dict(self.info)))

    def as_raw(self) -> RawDocument:
        return RawDocument(text=self.text, links=self.links)

@dataclass(frozen=True)
class ContactInfo:
    """Contact details; a field is None when nothing plausible was found."""
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None
    website: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "linkedin": self.linkedin,
            "github": self.github,
            "website": self.website,
        }

@dataclass(frozen=True)
class SkillsResult:
    """Skill keywords found in the text, flat and grouped by category."""
    all: Tuple[str, ...] = ()
    categorized: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self):
        _freeze(self, "all")
        frozen = {category: tuple(skills) for category, skills in self.categorized.items()}
        object.__setattr__(self, "categorized", MappingProxyType(frozen))

    @property
    def count(self) -> int:
        return len(self.all)

    def to_dict(self) -> dict:
        return {
            "all": list(self.all),
            "categorized": {k: list(v) for k, v in self.categorized.items()},
            "count": self.count,
        }

@dataclass(frozen=True)
class JobEntry:
    """
    A single job inside the experience section.
    title and company are never resolved by the current heuristics.
    """
    raw_line: str
    duration: Optional[str] = None
    description: Tuple[str, ...] = ()
    title: Optional[str] = None
    company: Optional[str] = None

    def __post_init__(self):
        _freeze(self, "description")

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "company": self.company,
            "duration": self.duration,
            "description": list(self.description),
            "rawLine": self.raw_line,
        }

@dataclass(frozen=True)
class EducationEntry:
    """A single credential line inside the education section."""
    degree: str
    raw_line: str
    year: Optional[str] = None
    institution: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "degree": self.degree,
            "institution": self.institution,
            "year": self.year,
            "rawLine": self.raw_line,
        }

@dataclass(frozen=True)
class ExperienceSection:
    raw: Tuple[str, ...] = ()
    parsed: Tuple[JobEntry, ...] = ()

    def __post_init__(self):
        _freeze(self, "raw")
        _freeze(self, "parsed")

    @property
    def count(self) -> int:
        return len(self.parsed)

    def to_dict(self) -> dict:
        return {
            "raw": list(self.raw),
            "parsed": [job.to_dict() for job in self.parsed],
            "count": self.count,
        }

@dataclass(frozen=True)
class EducationSection:
    raw: Tuple[str, ...] = ()
    parsed: Tuple[EducationEntry, ...] = ()

    def __post_init__(self):
        _freeze(self, "raw")
        _freeze(self, "parsed")

    @property
    def count(self) -> int:
        return len(self.parsed)

    def to_dict(self) -> dict:
        return {
            "raw": list(self.raw),
            "parsed": [entry.to_dict() for entry in self.parsed],
            "count": self.count,
        }

@dataclass(frozen=True)
class ResumeData:
    """
    Structured résumé record.
    This is the only output of the extraction pipeline.
    """
    contact: ContactInfo = field(default_factory=ContactInfo)
    skills: SkillsResult = field(default_factory=SkillsResult)
    experience: ExperienceSection = field(default_factory=ExperienceSection)
    education: EducationSection = field(default_factory=EducationSection)
    summary: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "contact": self.contact.to_dict(),
            "skills": self.skills.to_dict(),
            "experience": self.experience.to_dict(),
            "education": self.education.to_dict(),
            "summary": self.summary,
        }
