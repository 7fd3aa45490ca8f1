"""Support code that is not specific to formulas or expressions.
"""
