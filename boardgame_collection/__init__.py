"""Board Game Collection - desktop catalog for a personal board game collection."""
