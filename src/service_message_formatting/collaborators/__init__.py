"""Collaborators the core consumes: template provider, entity directory, humanizer."""
