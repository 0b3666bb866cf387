"""Configuration, logging, write authorisation and album storage."""
