"""Shared pytest fixtures and configuration for the cmdline-utils test suite.

Guidelines
----------
* No real terminal: every console interaction goes through ``MemoryConsole``.
* No SIGINT is ever delivered; signal installation is patched where tested.
* Tests must not depend on OS state.
"""

from __future__ import annotations

import pytest

from cmdline_utils.application import CommandLineApplication
from cmdline_utils.infra.memory_console import MemoryConsole


@pytest.fixture
def console() -> MemoryConsole:
    return MemoryConsole()


@pytest.fixture
def app(console: MemoryConsole) -> CommandLineApplication:
    return CommandLineApplication(name="tool", console=console)
