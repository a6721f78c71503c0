"""Драйверы железа и их симуляция."""
