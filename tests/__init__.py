"""
Test suite for pyrefscale package.

This test suite covers:
- Import tests for all modules and submodules
- Unit tests for the reference scaler, its helpers, validation and CLI
- Integration tests for file based scale/validate workflows

Run with: pytest
"""
