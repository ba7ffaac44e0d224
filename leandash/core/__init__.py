"""Core building blocks of the dashboard client."""
