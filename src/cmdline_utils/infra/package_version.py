"""Version metadata read from an installed package.

The informational version is the module's ``__version__`` attribute,
which may carry pre-release or build suffixes.  The fallback is the
version recorded in the installed distribution's metadata.
"""

from __future__ import annotations

import importlib
import importlib.metadata
import logging

logger = logging.getLogger(__name__)


class PackageVersionSource:
    """A :class:`~cmdline_utils.core.protocols.VersionSource` for an importable package.

    Parameters
    ----------
    package:
        Import name of the top-level package, e.g. ``"cmdline_utils"``.
    distribution:
        Distribution name when it differs from what
        :func:`importlib.metadata.packages_distributions` reports.
    """

    def __init__(self, package: str, distribution: str | None = None) -> None:
        self.package: str = package
        self.distribution: str | None = distribution

    @property
    def informational_version(self) -> str | None:
        try:
            module = importlib.import_module(self.package)
        except ImportError:
            logger.debug("Package %s is not importable", self.package)
            return None
        value = getattr(module, "__version__", None)
        return value if isinstance(value, str) else None

    @property
    def version(self) -> str | None:
        for name in self._distribution_names():
            try:
                return importlib.metadata.version(name)
            except importlib.metadata.PackageNotFoundError:
                continue
        logger.debug("No installed distribution found for %s", self.package)
        return None

    def _distribution_names(self) -> list[str]:
        if self.distribution is not None:
            return [self.distribution]
        mapped = importlib.metadata.packages_distributions().get(self.package, [])
        return [*mapped, self.package, self.package.replace("_", "-")]
