"""bizdirectory: local-business directory search API."""
