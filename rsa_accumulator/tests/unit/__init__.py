"""
Unit tests for RSA Accumulator components

Tests individual modules in isolation:
- test_arithmetic.py: Modular arithmetic helpers
- test_rsa_params.py: RSA parameter loading and validation
- test_accumulator.py: Core accumulator operations
- test_witness_refresh.py: Witness update algorithms
- test_config.py: Settings and logging setup
"""
