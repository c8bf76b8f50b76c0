"""HTTP clients for the speech service metadata endpoints."""
