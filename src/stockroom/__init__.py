# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stockroom
"""
stockroom: generic in-memory inventory stores with typed failures.
"""

__version__ = "0.1.0"
