"""Company and representative directory service."""
