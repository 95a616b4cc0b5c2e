"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "jsxwrap"
CLI_DESCRIPTION: str = f"{BRAND_NAME}: flag multiline JSX that is missing wrapping parentheses"
