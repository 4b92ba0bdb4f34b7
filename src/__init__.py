################################################################################
# File Name: __init__.py
# Purpose/Description: Source tree package initialization
# Author: Michael Cornelison
# Creation Date: 2026-01-21
# Copyright: (c) 2026 Michael Cornelison. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-01-21    | M. Cornelison | Initial implementation
# 2026-10-19    | M. Cornelison | Descriptive statistics layout
# ================================================================================
################################################################################

"""
Source tree for the descriptive statistics library.

Organized as:
- analysis/: Statistics functions, validation, summary types
- common/: Shared utilities (config, logging, errors)
"""

__version__ = '1.1.0'
