"""Qt desktop host for the memory game core."""
