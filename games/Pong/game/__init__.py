"""Pong game core: entities, physics, opponent policy and match state."""
