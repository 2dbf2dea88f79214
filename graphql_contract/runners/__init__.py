"""
Command-line runners for the contract suite
"""
