"""Console user interface: prompts, listings and the menu loop."""
