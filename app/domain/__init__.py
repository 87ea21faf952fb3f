"""
Domain package.

The error taxonomy with its status table, and the users context
(entities, validation rules, repository port). Imports nothing
outside the standard library.
"""
