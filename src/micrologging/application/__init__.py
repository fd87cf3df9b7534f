"""Application layer: logger ports and the dispatch use case."""
