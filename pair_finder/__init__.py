"""Host glue for overlap_core: MCP tool server and command-line entry point."""
