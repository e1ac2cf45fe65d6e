from burstnet.simulation.network.specs import Network, NetworkPartition

__all__ = ["Network", "NetworkPartition"]
