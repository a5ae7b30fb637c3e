"""Domain layer: MCF parser, error types and protocols (ports)."""
