"""HireHive job board API."""
