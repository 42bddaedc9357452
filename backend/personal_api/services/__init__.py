"""Services Layer: orchestrates core logic and infrastructure per request."""
