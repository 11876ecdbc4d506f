"""FlowingLinks - link bookmarking REST backend."""
