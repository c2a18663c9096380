"""
Security middleware: secure headers, rate limiting, request size limit.
"""
