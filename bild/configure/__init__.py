# SPDX-License-Identifier: MIT
"""Run settings (bild.toml, environment, command line)."""
