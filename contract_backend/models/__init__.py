"""
Database Models

This package contains MongoDB model classes for:
- User: account credentials and profile
- Template: reusable contract skeletons owned by one user
- Contract: contract documents with collaborators and signatures
- Clause: entries of the shared clause library
"""
