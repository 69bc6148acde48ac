"""mempw tool-call adapters."""

from mempw.api.tools import build_multiple_passwords_tool, build_password_tool

__all__ = ["build_multiple_passwords_tool", "build_password_tool"]
