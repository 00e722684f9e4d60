"""Services Layer — request handling that orchestrates core logic and the store."""
