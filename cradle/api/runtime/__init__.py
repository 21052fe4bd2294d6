"""Runtime layer: HTTP transport and endpoint execution."""
