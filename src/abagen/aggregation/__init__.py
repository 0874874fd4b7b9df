"""Footer total aggregation."""
