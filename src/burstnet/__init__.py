"""BurstNet-Py: reduced Hodgkin-Huxley network burst simulator."""

from burstnet.api.version import __version__

__all__ = ["__version__"]
