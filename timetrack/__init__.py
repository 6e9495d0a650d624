# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Working-time calendar rules and vacation entitlement ledger."""

__version__ = "0.1.0"
