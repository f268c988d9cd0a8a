"""
Utility Functions

This package contains helper functions for:
- auth_middleware: Bearer token request loader and validation decorators
- tokens: Identity token issue and verification
- permissions: Contract access rules
- object_ids: ObjectId parsing
- timestamps: ISO-8601 rendering of stored datetimes
"""
