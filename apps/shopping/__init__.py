"""Shopping list, categories and built-in list templates."""
