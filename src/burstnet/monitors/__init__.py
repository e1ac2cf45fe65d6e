"""Monitor implementations (console, csv)."""

from burstnet.monitors.csv import EpisodeCSVMonitor
from burstnet.monitors.metrics import AverageStateCSVMonitor
from burstnet.monitors.progress import BurstProgressMonitor

__all__ = [
    "AverageStateCSVMonitor",
    "BurstProgressMonitor",
    "EpisodeCSVMonitor",
]
