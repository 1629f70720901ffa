"""
Tests package for RSA Accumulator

- Unit tests: Test individual components in isolation
- Integration tests: Test complete workflows and component interactions
"""
