"""mdlinks API layer: commands return StageResult objects consumed by the CLI."""
