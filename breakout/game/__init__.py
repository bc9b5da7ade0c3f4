"""Breakout game core: entities, physics, progression and simulation."""
