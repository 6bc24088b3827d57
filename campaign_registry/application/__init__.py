"""Application layer: ports and the services that orchestrate registry operations."""
