from burstnet.monitors.csv.episodes_csv import EpisodeCSVMonitor

__all__ = ["EpisodeCSVMonitor"]
