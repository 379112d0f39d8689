"""Scriptoria: film blueprints and story continuations from an AI gateway."""
