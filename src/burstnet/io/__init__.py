"""I/O utilities: CSV sinks, result exporters and run manifests."""
