"""
Command-line interface entry points for webster.

Entry points:
- webster: look up words, export them to HTML, or check the dictionary
"""
