"""
Contract Manager backend: accounts, templates, a shared clause library and
contracts with collaborator access and signature collection.
"""
