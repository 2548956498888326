"""Core domain package for the contact form service.

Core contains validation, record construction, and response mapping without
any AWS or storage-specific code, keeping the submission pipeline portable.
"""
