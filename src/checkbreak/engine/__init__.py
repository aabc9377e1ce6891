"""Signature-change classification engine."""
