"""Analyzers for Istio ``Gateway`` resources."""
