"""End-to-end tests against a live Confluence instance.

These tests exercise every content operation through the real transport.
They require credentials and a test space in a .env.test file and are
skipped without one.
"""
