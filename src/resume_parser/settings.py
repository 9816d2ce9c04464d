
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
Centralised runtime settings.

Maximum accepted file size is resolved in priority order:
  1. Explicit override via --max-file-size CLI arg
  2. RESUME_PARSER_MAX_FILE_SIZE environment variable
  3. MAX_FILE_SIZE environment variable
  4. DEFAULT_MAX_FILE_SIZE (10 MB)
"""

import os
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024
DEFAULT_LOG_DIR = "user_content/logs"

# Module-level override set by the CLI --max-file-size flag
_max_file_size_override: int | None = None


def set_max_file_size_override(size: int) -> None:
    """Set an explicit size limit (bytes) from a CLI argument."""
    global _max_file_size_override
    if size <= 0:
        raise ValueError(f"Maximum file size must be positive, got {size}")
    _max_file_size_override = size
    logger.info(f"Max file size override set to: {size} bytes")


def get_max_file_size() -> int:
    """Resolve the largest document size, in bytes, the parser accepts."""
    if _max_file_size_override:
        return _max_file_size_override

    for var in ("RESUME_PARSER_MAX_FILE_SIZE", "MAX_FILE_SIZE"):
        value = os.environ.get(var)
        if not value:
            continue
        try:
            size = int(value)
        except ValueError:
            logger.warning(f"Ignoring {var}={value!r}: not an integer")
            continue
        if size <= 0:
            logger.warning(f"Ignoring {var}={value!r}: must be positive")
            continue
        logger.debug(f"Using max file size from {var}: {size}")
        return size

    return DEFAULT_MAX_FILE_SIZE


def get_log_dir() -> Path:
    """Directory for the debug log file (RESUME_PARSER_LOG_DIR or default)."""
    return Path(os.environ.get("RESUME_PARSER_LOG_DIR") or DEFAULT_LOG_DIR)
