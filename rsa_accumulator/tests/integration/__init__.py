"""
Integration tests for RSA Accumulator workflows
"""
