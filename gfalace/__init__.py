#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFALace v0.1.0

Package initialization and version metadata.

Author: GFALace Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from .version import __version__

__all__ = ["__version__"]

# GFALace v0.1.0
# Any usage is subject to this software's license.
