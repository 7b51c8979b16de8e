"""Command-line diagnostics: converter round-trip sweeps and month grid printing."""
