"""Shared infrastructure: config, secrets, logging, storage and the LLM client."""
