"""Simulation engine, network and results."""
