
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
Keyword based skill detection against a fixed taxonomy.
"""

import logging
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from resume_parser.models import SkillsResult

logger = logging.getLogger(__name__)

# Category order is significant: SkillsResult.all follows it
SKILL_TAXONOMY: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "programming": (
        "javascript", "python", "java", "c++", "c#", "php", "ruby", "go", "rust", "swift",
        "kotlin", "scala", "typescript", "r", "matlab", "perl", "shell", "bash",
    ),
    "frameworks": (
        "react", "angular", "vue", "node.js", "express", "django", "flask", "spring",
        "laravel", "rails", "asp.net", ".net", "jquery", "bootstrap", "tailwind",
    ),
    "databases": (
        "mysql", "postgresql", "mongodb", "sqlite", "redis", "cassandra", "oracle",
        "sql server", "dynamodb", "elasticsearch", "firebase",
    ),
    "cloud": (
        "aws", "azure", "gcp", "google cloud", "heroku", "digitalocean", "kubernetes",
        "docker", "jenkins", "terraform", "ansible",
    ),
    "tools": (
        "git", "github", "gitlab", "bitbucket", "jira", "confluence", "slack",
        "trello", "figma", "sketch", "photoshop", "illustrator", "excel", "powerpoint",
    ),
    "methodologies": (
        "agile", "scrum", "kanban", "devops", "ci/cd", "tdd", "bdd", "microservices",
        "restful api", "graphql", "machine learning", "ai", "data science",
    ),
})

def extract_skills(text: str) -> SkillsResult:
    """
    Every taxonomy keyword contained in the text (case-insensitive substring).
    Categories without a match are left out of ``categorized``.
    """
    lower_text = text.lower()
    categorized: Dict[str, Tuple[str, ...]] = {}

    for category, keywords in SKILL_TAXONOMY.items():
        found = [keyword for keyword in keywords if keyword in lower_text]
        if found:
            categorized[category] = tuple(found)

    all_skills = [skill for found in categorized.values() for skill in found]
    logger.debug(f"Matched {len(all_skills)} skill keyword(s) in {len(categorized)} categories")
    return SkillsResult(all=tuple(all_skills), categorized=categorized)
