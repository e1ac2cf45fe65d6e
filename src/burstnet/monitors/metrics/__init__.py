from burstnet.monitors.metrics.average_state_csv import AverageStateCSVMonitor
from burstnet.monitors.metrics.scalar_utils import vector_to_floats

__all__ = ["AverageStateCSVMonitor", "vector_to_floats"]
