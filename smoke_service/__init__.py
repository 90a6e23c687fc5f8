"""Smoke-test HTTP service for container orchestrator deployments."""
