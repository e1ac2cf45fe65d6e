from burstnet.simulation.engine.torch_engine import ModelFactory, TorchBurstEngine, simulate

__all__ = ["ModelFactory", "TorchBurstEngine", "simulate"]
