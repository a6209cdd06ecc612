"""Tests for the fri_prover package."""
