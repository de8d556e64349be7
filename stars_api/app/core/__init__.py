"""Configuration, logging, exceptions and persistence for the Stars API."""
