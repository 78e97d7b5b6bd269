"""Read highlights out of the Apple Books databases."""
