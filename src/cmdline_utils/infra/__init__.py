"""Infrastructure layer: the process boundary.

This layer wraps all interaction with the real terminal, the SIGINT
signal and installed-package metadata, plus the in-memory console used
in tests.

Rules
-----
* No imports from ``cli``.
* Only ``core`` protocols are implemented here; nothing in ``core``
  imports this package.
"""

from cmdline_utils.infra.memory_console import MemoryConsole
from cmdline_utils.infra.package_version import PackageVersionSource
from cmdline_utils.infra.physical_console import PhysicalConsole, physical_console

__all__: list[str] = [
    "MemoryConsole",
    "PackageVersionSource",
    "PhysicalConsole",
    "physical_console",
]
