"""
Command-line entry points.

- optimize: Run a turtle swarm against a benchmark function
"""
