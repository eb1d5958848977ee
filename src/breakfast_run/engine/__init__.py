"""Game engine: world model, player state and command dispatch."""
