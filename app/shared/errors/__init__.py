"""
Central error handling.

Turns any exception raised while serving a request into one logged
error envelope with the status chosen by the domain status table.
"""
