# SPDX-License-Identifier: MIT
"""Core data model for bild."""
