
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
Text helpers shared by every extractor: normalisation, section slicing
and year tokens.
"""

import re
from enum import Enum
from typing import Iterable, List

_HORIZONTAL_WS_RE = re.compile(r"[^\S\n]+")
YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")

def normalize_text(text: str) -> str:
    """
    Canonical form used by all extractors.

    Runs of spaces/tabs become a single space, every line is stripped and
    blank lines are dropped, so a run of blank lines collapses to one newline.
    """
    # Windows and old Mac line endings
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    lines = (_HORIZONTAL_WS_RE.sub(" ", line).strip() for line in text.split("\n"))
    return "\n".join(line for line in lines if line)

def contains_any(line: str, keywords: Iterable[str]) -> bool:
    """Case-insensitive substring test against a keyword list."""
    lower_line = line.lower()
    return any(keyword.lower() in lower_line for keyword in keywords)

def find_years(line: str) -> List[str]:
    """All 4-digit years between 1900 and 2099 on the line, in order."""
    return YEAR_RE.findall(line)

class _ScanState(Enum):
    WAITING = "waiting"
    EXTRACTING = "extracting"
    STOPPED = "stopped"

def extract_section_lines(text: str, start_keywords: Iterable[str], end_keywords: Iterable[str] = ()) -> List[str]:
    """
    Returns the body lines of the first section introduced by a start keyword.

    The heading line itself is dropped, as is the line that ends the section.
    Once a section has ended, later headings are ignored.
    """
    start_keywords = list(start_keywords)
    end_keywords = list(end_keywords)
    extracted: List[str] = []
    state = _ScanState.WAITING

    for line in text.split("\n"):
        if state is _ScanState.STOPPED:
            break

        if state is _ScanState.WAITING:
            if contains_any(line, start_keywords):
                state = _ScanState.EXTRACTING
            continue

        if end_keywords and contains_any(line, end_keywords):
            state = _ScanState.STOPPED
            continue

        stripped = line.strip()
        if stripped:
            extracted.append(stripped)

    return extracted

def format_file_size(num_bytes: int) -> str:
    """Human readable size, e.g. 1536 -> '1.5 KB'."""
    if num_bytes <= 0:
        return "0 Bytes"

    units = ["Bytes", "KB", "MB", "GB"]
    value = float(num_bytes)
    index = 0
    while value >= 1024 and index < len(units) - 1:
        value /= 1024
        index += 1
    # Drop trailing zeros: 10.0 MB -> 10 MB
    return f"{round(value, 2):g} {units[index]}"
