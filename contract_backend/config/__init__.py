"""
Configuration

- database: MongoDB connection holder and index setup
- logging_config: log format and level
"""
