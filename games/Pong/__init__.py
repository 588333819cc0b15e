"""Pong - player paddle against a scripted opponent, three difficulty tiers."""
