"""
API Routes

This package contains Flask blueprints for:
- auth: Registration and login
- templates: Per-user contract templates
- contracts: Contract CRUD, collaboration and signing
- clauses: Public clause library
- suggestions: Canned clause suggestions
"""
