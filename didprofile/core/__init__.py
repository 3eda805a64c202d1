"""Credential decoding, protocol client and orchestration."""
