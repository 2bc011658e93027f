"""Domain layer: song library, events, bands and profiles."""
