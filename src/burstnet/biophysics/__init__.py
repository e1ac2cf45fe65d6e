"""Neuron models and ODE integrators."""
