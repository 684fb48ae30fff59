"""Practicio — practice tracking with recency-weighted priority ranking."""
