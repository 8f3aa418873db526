"""Yahtzee - single-player dice scoring game."""
