"""
Word search puzzle generator.
"""
