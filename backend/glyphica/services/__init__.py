"""Glyphica domain services: accounts, game records, achievements,
statistics and the leaderboard.

Routes call into these functions and translate their results into JSON;
everything that touches the database or computes derived values lives
here, keeping transport concerns out of the core.
"""
