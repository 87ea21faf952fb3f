"""
Security concerns: request rate limiting.
"""
