"""
commit-spell: a git commit-msg hook that spell-checks commit messages.
"""
__version__ = "0.1.0"
