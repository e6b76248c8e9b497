"""
Core business logic modules for collab-match.

Submodules:
- matching: Collaborator-project matching engine and scoring functions
"""
