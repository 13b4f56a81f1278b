"""Domain layer: problem metadata, storage paths and progress counting."""
