"""Configuration module for the LRU cache."""
