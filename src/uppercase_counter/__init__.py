"""Uppercase Counter - Count uppercase letters in a file across parallel workers."""

from uppercase_counter.solver.solve import count_uppercase, main_count

__all__ = ["count_uppercase", "main_count"]
