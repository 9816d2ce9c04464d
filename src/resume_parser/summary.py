
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

import logging
from typing import Optional

from resume_parser.text_utils import contains_any

logger = logging.getLogger(__name__)

SUMMARY_KEYWORDS = (
    "summary", "objective", "profile", "about", "overview", "introduction",
    "professional summary", "career objective", "personal statement",
)
SECTION_BREAK_KEYWORDS = ("experience", "education", "skills")
SUMMARY_MAX_LINES = 7

def extract_summary(text: str) -> Optional[str]:
    """
    Text following the first summary/objective heading, up to the next
    section heading or SUMMARY_MAX_LINES lines, joined into one paragraph.
    """
    lines = text.split("\n")

    for index, line in enumerate(lines):
        if not contains_any(line, SUMMARY_KEYWORDS):
            continue

        collected = []
        for next_line in lines[index + 1:index + 1 + SUMMARY_MAX_LINES]:
            next_line = next_line.strip()
            if contains_any(next_line, SECTION_BREAK_KEYWORDS):
                break
            if next_line:
                collected.append(next_line)

        summary = " ".join(collected).strip()
        logger.debug(f"Summary heading found on line {index + 1}")
        return summary or None

    return None
