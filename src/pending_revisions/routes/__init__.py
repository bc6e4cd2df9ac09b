"""HTTP routes exposing the decision services."""
