"""Domain model and reconciliation logic."""
