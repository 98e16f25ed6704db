"""Core pipeline for dnsctl: loading, validation, and IR output."""
