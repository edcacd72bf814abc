"""Centralized exit-code contract for the CLI.

Code  Meaning
----  -------
  0   Success, scan completed (reports are not failures)
  2   Error, usage error, bad search pattern, fatal scan error
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    ERROR = 2
