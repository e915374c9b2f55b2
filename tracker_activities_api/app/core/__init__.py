"""Configuration, logging, database access and error handling."""
