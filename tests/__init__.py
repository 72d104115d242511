"""Test suite for realtime-proxy.

Unit tests live under unit/<domain>/ as non-prefixed modules (see
conftest.py). Shared fakes and app builders live in the helpers/
subpackage.
"""
