"""HTTP adapter exposing the classifiers to the diagram editor."""
