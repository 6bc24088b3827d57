"""Domain services for the campaign registry."""
