#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFALace v0.1.0

Exception hierarchy for block lacing.

Author: GFALace Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from pathlib import Path
from typing import Optional, Union


class GFALaceError(Exception):
    """Base class for all fatal lacing errors."""
    pass


class GFAParseError(GFALaceError, ValueError):
    """Raised when a GFA record cannot be parsed."""

    def __init__(self, message: str, source: Optional[Union[str, Path]] = None,
                 line_no: Optional[int] = None):
        self.source = str(source) if source is not None else None
        self.line_no = line_no
        location = ""
        if self.source is not None:
            location = self.source
            if line_no is not None:
                location += f":{line_no}"
            location += ": "
        super().__init__(f"{location}{message}")


class BlockStructureError(GFALaceError):
    """Raised when a block graph is internally inconsistent (ids, references, names)."""
    pass

# GFALace v0.1.0
# Any usage is subject to this software's license.
