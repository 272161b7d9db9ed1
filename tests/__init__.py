"""
Tests for the Royal Quest mob counter.

This package contains tests for:
- Chat row tokenizing and kill extraction
- Kill aggregation, sorting and limits
- Table rendering
- Configuration loading and log file discovery
- The command line interface
"""
